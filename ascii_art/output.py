"""
ASCII Art Output

Renderers for a finished character grid: plain console text and a
styled standalone HTML page.
"""

from typing import List, Optional, TextIO
import html
import logging
import sys


logger = logging.getLogger(__name__)

CharGrid = List[List[str]]


def grid_to_text(grid: CharGrid, separator: str = "") -> str:
    """Join a character grid into newline-separated rows."""
    return "\n".join(separator.join(row) for row in grid)


class ConsoleAsciiOutput:
    """Prints the grid to a text stream, each character followed by a space."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def out(self, grid: CharGrid):
        stream = self.stream or sys.stdout
        for row in grid:
            stream.write("".join(f"{char} " for char in row) + "\n")


class HtmlAsciiOutput:
    """
    Writes the grid to an HTML file.

    Attributes:
        file_name: Output path (overwritten on every call)
        font_name: CSS font family used for the art
    """

    def __init__(
        self,
        file_name: str = "out.html",
        font_name: str = "Courier New",
        bg_color: str = "#ffffff",
        fg_color: str = "#000000",
    ):
        self.file_name = file_name
        self.font_name = font_name
        self.bg_color = bg_color
        self.fg_color = fg_color

    def to_html(self, grid: CharGrid, title: str = "ASCII Art") -> str:
        """
        Convert a character grid to a styled HTML page.

        Args:
            grid: Row-major character grid
            title: HTML page title

        Returns:
            Complete HTML document string
        """
        escaped_text = html.escape(grid_to_text(grid, separator=" "))

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>
        body {{
            background-color: {self.bg_color};
            color: {self.fg_color};
            font-family: '{self.font_name}', monospace;
            font-size: 4px;
            line-height: 1.0;
            margin: 0;
        }}
        pre {{
            margin: 0;
            white-space: pre;
        }}
    </style>
</head>
<body>
    <pre>{escaped_text}</pre>
</body>
</html>
"""

    def out(self, grid: CharGrid):
        with open(self.file_name, 'w', encoding='utf-8') as f:
            f.write(self.to_html(grid))
        logger.debug("Wrote %dx%d grid to %s", len(grid[0]) if grid else 0, len(grid), self.file_name)
