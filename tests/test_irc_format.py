"""Tests for the formatted-text builders."""

from irc_format import (
    BOLD, COLOR, CONTROL_CODES, ITALIC, INVERSE, STRIKETHROUGH, UNDERLINE_ALT,
    bold, color, inverse, italic, strikethrough, underline, RED, BLUE,
)


class TestBuilders:
    def test_color(self):
        assert color("x", RED) == f"{COLOR}04x{COLOR}"

    def test_color_background(self):
        assert color("x", RED, BLUE) == f"{COLOR}04,02x{COLOR}"

    def test_styles(self):
        assert bold("x") == f"{BOLD}x{BOLD}"
        assert italic("x") == f"{ITALIC}x{ITALIC}"
        assert underline("x") == f"{UNDERLINE_ALT}x{UNDERLINE_ALT}"
        assert strikethrough("x") == f"{STRIKETHROUGH}x{STRIKETHROUGH}"
        assert inverse("x") == f"{INVERSE}x{INVERSE}"

    def test_control_codes(self):
        assert len(CONTROL_CODES) == 8
        assert all(len(c) == 1 and ord(c) < 0x20 for c in CONTROL_CODES)
