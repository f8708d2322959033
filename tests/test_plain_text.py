"""Tests for stripping IRC formatting."""

import pytest

from irc_format import (
    BOLD, COLOR, CONTROL_CODES, RESET, ITALIC, UNDERLINE, UNDERLINE_ALT, INVERSE,
    STRIKETHROUGH, bold, color, RED, BLUE,
)
from text_format import to_plain_text

SAMPLES = [
    "",
    "plain text",
    f"{BOLD}bold{BOLD} {COLOR}04,12red{COLOR} {UNDERLINE_ALT}u{UNDERLINE_ALT}{RESET}",
    f"{COLOR}{COLOR}12{COLOR}3,4,5",
    f"{ITALIC}{STRIKETHROUGH}{UNDERLINE}{INVERSE}x{RESET}{RESET}",
    f"{COLOR}1,{BOLD}2",
    "a < b > c http://example.com",
    COLOR * 5 + "99,99",
]


class TestToPlainText:
    def test_strip_styles(self):
        text = f"{BOLD}bold{BOLD} {color('red', RED, BLUE)} {ITALIC}i{RESET}"
        assert to_plain_text(text) == "bold red i"

    def test_color_digits_removed(self):
        assert to_plain_text(f"{COLOR}04x") == "x"
        assert to_plain_text(f"{COLOR}4,12x") == "x"

    def test_at_most_two_digits(self):
        assert to_plain_text(f"{COLOR}123") == "3"

    def test_comma_kept_without_background(self):
        assert to_plain_text(f"{COLOR}1,x") == ",x"

    def test_bare_color(self):
        assert to_plain_text(f"a{COLOR}b") == "ab"

    def test_no_escaping(self):
        assert to_plain_text(bold("a<b>")) == "a<b>"

    def test_urls_untouched(self):
        assert to_plain_text("see http://example.com") == "see http://example.com"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_no_control_codes_left(self, text):
        assert not CONTROL_CODES & set(to_plain_text(text))

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = to_plain_text(text)
        assert to_plain_text(once) == once
