"""Tests for color policies."""

import pytest
from json_highlight_writer.colors import ColorMode, ColorPolicy, PaletteExhaustedError


class TestColorPolicy:
    """Test the color sequences handed out to matches."""

    def test_fixed_defaults_to_red(self):
        policy = ColorPolicy.fixed()

        assert [policy.next_color() for _ in range(3)] == ["red", "red", "red"]

    def test_cyclic_wraps(self):
        policy = ColorPolicy.cyclic(["yellow", "cyan"])

        assert [policy.next_color() for _ in range(5)] == [
            "yellow", "cyan", "yellow", "cyan", "yellow"
        ]

    def test_exhaustible_raises_after_last_color(self):
        policy = ColorPolicy.exhaustible(["yellow", "cyan"])

        assert policy.next_color() == "yellow"
        assert policy.next_color() == "cyan"
        with pytest.raises(PaletteExhaustedError) as excinfo:
            policy.next_color()

        assert excinfo.value.match_count == 3
        assert excinfo.value.palette_size == 2
        assert isinstance(excinfo.value, ValueError)

    def test_empty_cyclic_palette_fails_on_first_match(self):
        policy = ColorPolicy.cyclic([])

        with pytest.raises(PaletteExhaustedError) as excinfo:
            policy.next_color()

        assert excinfo.value.palette_size == 0

    def test_unknown_color(self):
        with pytest.raises(ValueError, match="Unsupported color"):
            ColorPolicy.cyclic(["red", "ultraviolet"])

    def test_fixed_needs_one_color(self):
        with pytest.raises(ValueError):
            ColorPolicy(ColorMode.FIXED, ["red", "blue"])

    def test_from_colors(self):
        assert ColorPolicy.from_colors(None).mode is ColorMode.FIXED
        assert ColorPolicy.from_colors(["red"]).mode is ColorMode.CYCLIC
        assert ColorPolicy.from_colors(["red"], cycle=False).mode is ColorMode.EXHAUSTIBLE
