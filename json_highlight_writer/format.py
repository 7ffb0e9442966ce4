"""
This module turns a list of segments into text for the terminal.

Highlighted segments are wrapped in their color's escape sequence and a reset. Plain
segments stay raw unless a remainder color is given, in which case they are colored
with it as well.
"""

from typing import Iterable, NamedTuple, Optional

# Import colored text functionality for terminal output
from termcolor import colored

from json_highlight_writer.colors import validate_color


class Segment(NamedTuple):
    """A run of output text. `color` is None for plain text."""

    text: str
    color: Optional[str] = None

    @property
    def highlighted(self) -> bool:
        return self.color is not None


def render(segments: Iterable[Segment], remainder_color: Optional[str] = None, *, force_color: Optional[bool] = None) -> str:
    """
    Join segments into a single display string.

    Segments are emitted in the order given; nothing is merged or reordered.

    Args:
        segments: Segments as produced by `HighlightGenerator.segments()`
        remainder_color: Color for the plain segments, or None to leave them uncolored
        force_color: Passed to termcolor; True always emits escape sequences, False
            never does, None lets termcolor decide from the environment and terminal

    Example:
        >>> from json_highlight_writer.format import Segment, render
        >>> render([Segment('{"a":'), Segment("1", "red"), Segment("}")], force_color=True)
        '{"a":\\x1b[31m1\\x1b[0m}'
    """
    if remainder_color is not None:
        validate_color(remainder_color)

    # termcolor only honours force_color=True; turning color off needs no_color
    options = {}
    if force_color is not None:
        options = {"force_color": True} if force_color else {"no_color": True}

    parts = []
    for segment in segments:
        color = segment.color if segment.color is not None else remainder_color
        if color is None:
            parts.append(segment.text)
        else:
            parts.append(colored(segment.text, color, **options))
    return "".join(parts)
