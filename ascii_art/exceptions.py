"""
Exception Hierarchy

All errors raised by the ascii_art package derive from AsciiArtError,
so callers can catch one type at the outermost level.
"""


class AsciiArtError(Exception):
    """Base class for all ascii_art errors."""


class InputError(AsciiArtError):
    """Invalid user input: unknown command, bad argument or format."""


class CharsetTooSmallError(InputError):
    """Art generation requested with fewer than two active characters."""


class ImageLoadError(AsciiArtError):
    """The image file could not be read or decoded."""


class EmptyCharacterSetError(AsciiArtError):
    """Brightness matching attempted against an empty character set."""


class InvalidResolutionError(AsciiArtError):
    """Resolution outside the bounds allowed for the current image."""
