"""Tests for the color palette."""

import pytest

from irc_format import RED, GREEN, LIGHTGREY
from palette import DEFAULT_COLOR_NAMES, Palette, color_index


class TestPalette:
    def test_defaults(self):
        palette = Palette()
        assert palette.color_name(0) == "white"
        assert palette.color_name(RED) == "red"
        assert palette.color_name(LIGHTGREY) == "lightgray"
        assert len(palette.color_names()) == 16

    def test_fallback(self):
        palette = Palette()
        assert palette.color_name(16) == "black"
        assert palette.color_name(16, "black") == "black"
        assert palette.color_name(42, "transparent") == "transparent"

    def test_negative_index(self):
        assert Palette().color_name(-1, "fallback") == "fallback"

    def test_set_color_name(self):
        palette = Palette()
        palette.set_color_name(RED, "#ff3333")
        palette.set_color_name(99, "hotpink")
        assert palette.color_name(RED) == "#ff3333"
        assert palette.color_name(99) == "hotpink"

    def test_instances_independent(self):
        a, b = Palette(), Palette()
        a.set_color_name(RED, "crimson")
        assert b.color_name(RED) == "red"
        assert DEFAULT_COLOR_NAMES[RED] == "red"

    def test_color_names_is_copy(self):
        palette = Palette()
        palette.color_names()[RED] = "changed"
        assert palette.color_name(RED) == "red"

    def test_overrides(self):
        palette = Palette({RED: "#f00", "3": "#0f0", "lightgrey": "#ccc"})
        assert palette.color_name(RED) == "#f00"
        assert palette.color_name(GREEN) == "#0f0"
        assert palette.color_name(LIGHTGREY) == "#ccc"


class TestColorIndex:
    def test_int(self):
        assert color_index(7) == 7

    def test_numeric_string(self):
        assert color_index(" 12 ") == 12

    def test_name(self):
        assert color_index("Red") == RED
        assert color_index("gray") == color_index("grey")

    @pytest.mark.parametrize("key", ["nope", "", True, "1.5"])
    def test_invalid(self, key):
        with pytest.raises(ValueError):
            color_index(key)
