"""Tests for rendering segments."""

import pytest
from termcolor import colored

from json_highlight_writer.format import Segment, render


class TestRender:
    """Test joining segments into display text."""

    def test_plain_segments_stay_raw(self):
        assert render([Segment("["), Segment("1"), Segment("]")], force_color=True) == "[1]"

    def test_highlighted_segment(self):
        result = render([Segment("["), Segment("1", "green"), Segment("]")], force_color=True)

        assert result == "[" + colored("1", "green", force_color=True) + "]"

    def test_remainder_applies_only_to_plain(self):
        result = render([Segment("["), Segment("1", "green"), Segment("]")], "blue", force_color=True)

        assert result == (
            colored("[", "blue", force_color=True)
            + colored("1", "green", force_color=True)
            + colored("]", "blue", force_color=True)
        )

    def test_no_color_environment(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")

        assert render([Segment("1", "green")]) == "1"

    def test_unknown_remainder_color(self):
        with pytest.raises(ValueError):
            render([Segment("1")], "ultraviolet")

    def test_empty(self):
        assert render([]) == ""
