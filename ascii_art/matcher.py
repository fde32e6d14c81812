"""
Brightness Matcher

Maps a target brightness to the character whose normalized brightness
is nearest, with deterministic tie-breaking on character code.
"""

from bisect import bisect_left, bisect_right

from .charsets import GlyphIndex
from .exceptions import EmptyCharacterSetError


def match_brightness(index: GlyphIndex, brightness: float) -> str:
    """
    Find the best character for a brightness value.

    The floor (greatest key <= brightness) and ceiling (smallest key >=
    brightness) are compared by absolute distance. An exact key hit or a
    missing neighbour selects the remaining entry. On an exact distance
    tie the lower code point of the two groups' first characters wins.

    Args:
        index: Snapshot from GlyphBrightnessTable.index
        brightness: Target brightness, normally in [0, 1]

    Returns:
        The matched character

    Raises:
        EmptyCharacterSetError: If the index has no characters
    """
    if index.is_empty():
        raise EmptyCharacterSetError("Character set is empty.")

    keys = index.keys
    hi = bisect_right(keys, brightness)
    floor_pos = hi - 1 if hi > 0 else None
    lo = bisect_left(keys, brightness)
    ceil_pos = lo if lo < len(keys) else None

    if floor_pos is None:
        return index.groups[ceil_pos][0]
    if ceil_pos is None or keys[floor_pos] == brightness:
        return index.groups[floor_pos][0]

    floor_diff = abs(brightness - keys[floor_pos])
    ceil_diff = abs(brightness - keys[ceil_pos])

    if floor_diff < ceil_diff:
        return index.groups[floor_pos][0]
    if ceil_diff < floor_diff:
        return index.groups[ceil_pos][0]
    return min(index.groups[floor_pos][0], index.groups[ceil_pos][0])
