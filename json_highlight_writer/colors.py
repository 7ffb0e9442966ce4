"""
This module decides which color each highlighted match receives.

A policy hands out one color per match, in the order the encoder first visits the
matched nodes. Colors are termcolor color names.
"""

from enum import Enum
from typing import List, Optional, Sequence

from termcolor import COLORS

# Color used when the caller does not pick one
DEFAULT_COLOR = "red"


class PaletteExhaustedError(ValueError):
    """
    Raised when a finite palette runs out of colors.

    Attributes:
        match_count (int): The number of the match that found no color (1-based)
        palette_size (int): How many colors the palette held
    """

    def __init__(self, match_count: int, palette_size: int):
        self.match_count = match_count
        self.palette_size = palette_size
        super().__init__(
            f"Palette exhausted: match {match_count} needs a color, "
            f"but only {palette_size} were supplied"
        )


class ColorMode(Enum):
    FIXED = "fixed"
    CYCLIC = "cyclic"
    EXHAUSTIBLE = "exhaustible"


def validate_color(color: str) -> str:
    """Check that `color` is a color name termcolor knows about."""
    if color not in COLORS:
        raise ValueError(f"Unsupported color: {color!r}")
    return color


class ColorPolicy:
    """
    Hands out the color for the next match.

    The same instance serves a whole encode call, so nested and sibling matches draw
    from one sequence. Use the `fixed`, `cyclic` and `exhaustible` constructors
    rather than building one directly.

    Attributes:
        mode (ColorMode): How the palette is consumed
        colors (List[str]): The palette (a single entry for FIXED)
        matches (int): How many colors have been handed out so far
    """

    def __init__(self, mode: ColorMode, colors: Sequence[str]):
        self.mode = mode
        self.colors: List[str] = [validate_color(color) for color in colors]
        self.matches = 0

        if mode is ColorMode.FIXED and len(self.colors) != 1:
            raise ValueError("A fixed color policy takes exactly one color")

    @classmethod
    def fixed(cls, color: str = DEFAULT_COLOR) -> "ColorPolicy":
        return cls(ColorMode.FIXED, [color])

    @classmethod
    def cyclic(cls, colors: Sequence[str]) -> "ColorPolicy":
        return cls(ColorMode.CYCLIC, colors)

    @classmethod
    def exhaustible(cls, colors: Sequence[str]) -> "ColorPolicy":
        return cls(ColorMode.EXHAUSTIBLE, colors)

    @classmethod
    def from_colors(cls, colors: Optional[Sequence[str]], cycle: bool = True) -> "ColorPolicy":
        """
        Pick a policy for an optional palette.

        Args:
            colors: The palette; None selects the single default color
            cycle: Wrap around the palette (True) or fail once it runs out (False)
        """
        if colors is None:
            return cls.fixed()
        return cls.cyclic(colors) if cycle else cls.exhaustible(colors)

    def next_color(self) -> str:
        """
        Return the color for the next match and advance.

        Raises:
            PaletteExhaustedError: If an exhaustible palette has no colors left, or
                a cyclic palette is empty
        """
        index = self.matches
        self.matches += 1

        if self.mode is ColorMode.FIXED:
            return self.colors[0]

        size = len(self.colors)
        if self.mode is ColorMode.CYCLIC:
            if size == 0:
                raise PaletteExhaustedError(self.matches, size)
            return self.colors[index % size]

        if index >= size:
            raise PaletteExhaustedError(self.matches, size)
        return self.colors[index]
