#!/usr/bin/env python3
"""
Interactive ASCII Art Shell

A command-line interface for converting one image to ASCII art while
tuning the character set, resolution and output method.

Usage:
    ascii-art path/to/image.png
    ascii-art path/to/image.png --log-level DEBUG

Commands:
    chars                 Show the active characters
    add <spec>            Add characters: all | space | c | a-z
    remove <spec>         Remove characters (same spec forms)
    res [up|down]         Show or double/halve the resolution
    reverse               Toggle brightness inversion
    output html|console   Choose the output method
    asciiArt              Render with the current settings
    exit                  Quit
"""

from typing import Callable, Iterable, Iterator, List, Optional
import argparse
import logging
import sys

from .charsets import GlyphBrightnessTable, character_range, printable_characters
from .config import ShellConfig
from .exceptions import (
    AsciiArtError,
    CharsetTooSmallError,
    InputError,
    InvalidResolutionError,
)
from .image import Image
from .output import ConsoleAsciiOutput, HtmlAsciiOutput
from .pipeline import AsciiArtAssembler
from .preprocessing import resolution_bounds, validate_resolution


logger = logging.getLogger(__name__)

MIN_CHARSET_SIZE = 2

ERR_ADD_FORMAT = "Did not add due to incorrect format."
ERR_REMOVE_FORMAT = "Did not remove due to incorrect format."
ERR_RES_FORMAT = "Did not change resolution due to incorrect format."
ERR_RES_BOUNDARIES = "Did not change resolution due to exceeding boundaries."
ERR_OUTPUT_FORMAT = "Did not change output method due to incorrect format."
ERR_CHARSET_TOO_SMALL = "Did not execute, charset is too small"
ERR_INCORRECT_COMMAND = "Did not execute due to incorrect command."


def parse_char_spec(spec: str, printable: Optional[List[str]] = None) -> Optional[List[str]]:
    """
    Parse an add/remove argument into a list of characters.

    Accepts "all" (printable ASCII), "space", a single character, or an
    inclusive range "a-z" (endpoints may be given in either order).

    Returns:
        The characters, or None if the format is not recognized
    """
    if not spec:
        return None
    if spec == "all":
        return list(printable) if printable is not None else printable_characters()
    if spec == "space":
        return [" "]
    if len(spec) == 1:
        return [spec]
    if len(spec) == 3 and spec[1] == "-":
        return character_range(spec[0], spec[2])
    return None


class Shell:
    """
    Interactive REPL around an AsciiArtAssembler.

    Example:
        >>> shell = Shell(Image.from_file("cat.png"))
        >>> shell.run(["add a-e", "res up", "asciiArt", "exit"])
    """

    def __init__(
        self,
        image: Image,
        config: Optional[ShellConfig] = None,
        table: Optional[GlyphBrightnessTable] = None,
        assembler: Optional[AsciiArtAssembler] = None,
    ):
        self.config = config or ShellConfig()
        self.image = image
        self.table = table if table is not None else GlyphBrightnessTable(self.config.default_chars)
        self.assembler = assembler or AsciiArtAssembler()
        self.resolution = self.config.default_resolution
        self.invert = False
        self.output = ConsoleAsciiOutput()

        first, last = self.config.printable_range
        self._printable = [chr(code) for code in range(first, last + 1)]
        self._commands: dict = {
            "chars": self.handle_chars,
            "add": self.handle_add,
            "remove": self.handle_remove,
            "res": self.handle_resolution,
            "reverse": self.handle_reverse,
            "output": self.handle_output,
            "asciiArt": self.handle_ascii_art,
        }

    def run(self, lines: Optional[Iterable[str]] = None):
        """
        Read and execute commands until "exit" or end of input.

        Args:
            lines: Command source; defaults to interactive stdin
        """
        source = iter(lines) if lines is not None else self._prompt_lines()

        for line in source:
            line = line.rstrip("\n")
            if not line:
                continue

            tokens = line.rstrip(" ").split(" ")
            command = tokens[0]
            if command == "exit":
                return

            try:
                handler = self._commands.get(command)
                if handler is None:
                    raise InputError(ERR_INCORRECT_COMMAND)
                handler(tokens[1:])
            except (InputError, InvalidResolutionError) as e:
                print(e)

    def _prompt_lines(self) -> Iterator[str]:
        while True:
            try:
                yield input(self.config.prompt)
            except EOFError:
                return

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------

    def handle_chars(self, args: List[str]):
        for char in self.table.characters:
            print(f"{char} ")
        print()

    def _char_arg(self, args: List[str], error: str) -> List[str]:
        chars = parse_char_spec(args[0] if args else "", self._printable)
        if chars is None:
            raise InputError(error)
        return chars

    def handle_add(self, args: List[str]):
        for char in self._char_arg(args, ERR_ADD_FORMAT):
            self.table.add(char)

    def handle_remove(self, args: List[str]):
        for char in self._char_arg(args, ERR_REMOVE_FORMAT):
            self.table.remove(char)

    def handle_resolution(self, args: List[str]):
        if not args:
            print(f"Resolution set to {self.resolution}.")
            return

        step = self.config.resolution_step
        if args[0] == "up":
            new_resolution = self.resolution * step
        elif args[0] == "down":
            new_resolution = self.resolution // step
        else:
            raise InputError(ERR_RES_FORMAT)

        min_chars, max_chars = resolution_bounds(self.image)
        if new_resolution < min_chars or new_resolution > max_chars:
            raise InputError(ERR_RES_BOUNDARIES)

        self.resolution = new_resolution
        print(f"Resolution set to {self.resolution}.")

    def handle_reverse(self, args: List[str]):
        self.invert = not self.invert

    def handle_output(self, args: List[str]):
        mode = args[0] if args else ""
        if mode == "html":
            self.output = HtmlAsciiOutput(self.config.html_file_name, self.config.html_font_name)
        elif mode == "console":
            self.output = ConsoleAsciiOutput()
        else:
            raise InputError(ERR_OUTPUT_FORMAT)

    def handle_ascii_art(self, args: List[str]):
        if len(self.table) < MIN_CHARSET_SIZE:
            raise CharsetTooSmallError(ERR_CHARSET_TOO_SMALL)
        validate_resolution(self.image, self.resolution)
        logger.debug(
            "Rendering at resolution %d with %d characters (invert=%s)",
            self.resolution, len(self.table), self.invert,
        )

        grid = self.assembler.run(self.image, self.resolution, self.table.index, self.invert)
        self.output.out(grid)


def main(argv: Optional[List[str]] = None, loader: Callable[[str], Image] = Image.from_file) -> int:
    parser = argparse.ArgumentParser(
        description="Convert an image to brightness-matched ASCII art",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ascii-art cat.png
    Start the interactive shell for cat.png

  ascii-art cat.png --log-level DEBUG
    Show cache and glyph-table diagnostics on stderr
"""
    )

    parser.add_argument(
        "image",
        help="Path to the source image"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        image = loader(args.image)
        Shell(image).run()
    except AsciiArtError as e:
        print(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
