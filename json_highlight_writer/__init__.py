"""
json-highlight-writer renders JSON documents as compact text with chosen nodes
highlighted in color. This module exposes the public entry points.
"""

from typing import Iterable, List, Optional, Sequence

from json_highlight_writer.codegen import dump, dumps
from json_highlight_writer.colors import ColorMode, ColorPolicy, PaletteExhaustedError
from json_highlight_writer.format import Segment, render
from json_highlight_writer.main import HighlightGenerator, TargetMatcher
from json_highlight_writer.nodes import (
    Array,
    Boolean,
    JsonValue,
    Null,
    Number,
    Object,
    String,
    array,
    from_python,
    object_,
)


def highlight_segments(
    document: JsonValue,
    targets: Iterable[JsonValue],
    policy: Optional[ColorPolicy] = None,
    *,
    debug: bool = False,
) -> List[Segment]:
    """
    Encode `document` and return its output split into plain and highlighted segments.

    Raises:
        PaletteExhaustedError: If `policy` is a finite palette with fewer colors than matches
    """
    gen = HighlightGenerator(targets, policy, debug=debug)
    gen.write_json(document)
    return gen.segments()


def highlight(
    document: JsonValue,
    targets: Iterable[JsonValue],
    *,
    force_color: Optional[bool] = None,
    debug: bool = False,
) -> str:
    """Highlight every target node in the default color."""
    return highlight_with_colors_and_remainder(
        document, targets, None, None, force_color=force_color, debug=debug
    )


def highlight_with_colors(
    document: JsonValue,
    targets: Iterable[JsonValue],
    colors: Sequence[str],
    *,
    force_color: Optional[bool] = None,
    debug: bool = False,
) -> str:
    """Highlight target nodes with colors taken round-robin from `colors`."""
    return highlight_with_colors_and_remainder(
        document, targets, colors, None, force_color=force_color, debug=debug
    )


def highlight_with_colors_and_remainder(
    document: JsonValue,
    targets: Iterable[JsonValue],
    colors: Optional[Sequence[str]] = None,
    remainder_color: Optional[str] = None,
    *,
    cycle: bool = True,
    force_color: Optional[bool] = None,
    debug: bool = False,
) -> str:
    """
    Highlight target nodes with full control over the colors used.

    Args:
        document: Root of the document to encode
        targets: Nodes of `document` to highlight, compared by identity
        colors: Palette for successive matches in document order; None uses the
            single default color
        remainder_color: Color for all text outside the matches; None leaves it plain
        cycle: Wrap around the palette (True) or raise once it runs out (False)
        force_color: Passed to termcolor, see `render`
        debug: Print every segment transition

    Returns:
        str: The compact JSON text with color escape sequences around the matches

    Raises:
        PaletteExhaustedError: If `cycle` is False and there are more matches than colors
        ValueError: If a color name is not known to termcolor
    """
    policy = ColorPolicy.from_colors(colors, cycle=cycle)
    segments = highlight_segments(document, targets, policy, debug=debug)
    return render(segments, remainder_color, force_color=force_color)


__all__ = [
    "highlight",
    "highlight_with_colors",
    "highlight_with_colors_and_remainder",
    "highlight_segments",
    "render",
    "dump",
    "dumps",
    "ColorMode",
    "ColorPolicy",
    "PaletteExhaustedError",
    "HighlightGenerator",
    "Segment",
    "TargetMatcher",
    "JsonValue",
    "Null",
    "Boolean",
    "Number",
    "String",
    "Array",
    "Object",
    "array",
    "from_python",
    "object_",
]
