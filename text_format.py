"""
Convert IRC-formatted messages to plain text or HTML.

    fmt = TextFormat()
    fmt.palette.set_color_name(irc_format.RED, "#ff3333")
    html  = fmt.to_markup(message)
    plain = to_plain_text(message)

HTML output uses nested <span> elements, either with style attributes
(SPAN_STYLE, usable without a stylesheet) or with class attributes
(SPAN_CLASS, styled externally):

    IRC format          SPAN_STYLE                           SPAN_CLASS
    bold                font-weight: bold                    bold
    color fg            color: fg                            fg
    color fg,bg         color: fg; background-color: bg      fg bg-background
    italic              font-style: italic                   italic
    strikethrough       text-decoration: line-through        line-through
    underline           text-decoration: underline           underline
    inverse             text-decoration: inverse             inverse

Only "<" is escaped. Spans are closed by position, not by kind: a toggle
or a bare color code closes the innermost open span whatever opened it,
and spans still open at the end of the message are left open.
"""

import logging
import re

from irc_format import (
    BOLD, COLOR, RESET, STRIKETHROUGH, UNDERLINE, INVERSE, ITALIC, UNDERLINE_ALT,
)
from links import DEFAULT_URL_PATTERN, compile_pattern, linkify
from palette import BACKGROUND_FALLBACK, FOREGROUND_FALLBACK, Palette

log = logging.getLogger("format")

SPAN_STYLE = "inline-style"
SPAN_CLASS = "named-class"
SPAN_FORMATS = (SPAN_STYLE, SPAN_CLASS)

CLOSE_SPAN = "</span>"

# control code → (class name, style declaration)
_STYLES = {
    BOLD:          ("bold",         "font-weight: bold"),
    ITALIC:        ("italic",       "font-style: italic"),
    STRIKETHROUGH: ("line-through", "text-decoration: line-through"),
    UNDERLINE:     ("underline",    "text-decoration: underline"),
    UNDERLINE_ALT: ("underline",    "text-decoration: underline"),
    INVERSE:       ("inverse",      "text-decoration: inverse"),
}

# \x03FF(,BB)
_COLOR_RE = re.compile(r"(\d{1,2})(?:,(\d{1,2}))?")

_CONTROL_RE = re.compile(
    "[" + "".join(re.escape(c) for c in _STYLES) + re.escape(RESET) + "]"
    "|" + re.escape(COLOR) + r"(?:\d{1,2}(?:,\d{1,2})?)?"
)

_URL_HINTS = ".:/"

# str.isspace() also counts the separators \x1c-\x1f, which include ITALIC
# and UNDERLINE_ALT
_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_SPACE


def to_plain_text(text: str) -> str:
    """Strip all IRC formatting, including color digits."""
    return _CONTROL_RE.sub("", text)


class _SpanState:
    """Open styles and span depth for one conversion."""

    __slots__ = ("styles", "depth")

    def __init__(self):
        self.styles = set()
        self.depth  = 0

    def toggle(self, style: str) -> bool:
        """Flip style; True if it is now open."""
        if style in self.styles:
            self.styles.discard(style)
            self.close()
            return False
        self.styles.add(style)
        self.depth += 1
        return True

    def open(self):
        self.depth += 1

    def close(self):
        self.depth = max(self.depth - 1, 0)

    def reset(self) -> int:
        """Clear everything; returns the number of spans that were open."""
        depth = self.depth
        self.styles.clear()
        self.depth = 0
        return depth


class TextFormat:
    """
    Formatting configuration: palette, URL pattern and span format.

    A TextFormat keeps no state between calls, so one instance can serve
    any number of threads once configured.
    """

    def __init__(self, palette: Palette = None,
                 url_pattern: str = DEFAULT_URL_PATTERN,
                 span_format: str = SPAN_STYLE):
        self.palette     = palette if palette is not None else Palette()
        self.url_pattern = url_pattern
        self.span_format = span_format

    # ── Configuration ─────────────────────────────────────────────────────────

    @property
    def url_pattern(self) -> str:
        return self._url_pattern

    @url_pattern.setter
    def url_pattern(self, pattern: str):
        """An empty pattern disables link detection."""
        pattern = pattern or ""
        self._url_rx = compile_pattern(pattern) if pattern else None
        if not pattern:
            log.debug("URL detection disabled")
        self._url_pattern = pattern

    @property
    def span_format(self) -> str:
        return self._span_format

    @span_format.setter
    def span_format(self, span_format: str):
        if span_format not in SPAN_FORMATS:
            raise ValueError(
                f"Unknown span format {span_format!r}, "
                f"expected one of: {', '.join(SPAN_FORMATS)}")
        self._span_format = span_format

    # ── Span generation ───────────────────────────────────────────────────────

    def _style_span(self, code: str) -> str:
        name, style = _STYLES[code]
        if self._span_format == SPAN_STYLE:
            return f"<span style='{style}'>"
        return f"<span class='{name}'>"

    def _color_span(self, fg: int, bg: int = None) -> str:
        fg_name = self.palette.color_name(fg, FOREGROUND_FALLBACK)
        bg_name = None
        if bg is not None:
            bg_name = self.palette.color_name(bg, BACKGROUND_FALLBACK)

        if self._span_format == SPAN_STYLE:
            styles = [f"color: {fg_name}"]
            if bg_name is not None:
                styles.append(f"background-color: {bg_name}")
            return f"<span style='{'; '.join(styles)}'>"

        classes = [fg_name]
        if bg_name is not None:
            classes.append(f"{bg_name}-background")
        return f"<span class='{' '.join(classes)}'>"

    # ── Conversion ────────────────────────────────────────────────────────────

    def to_markup(self, text: str) -> str:
        """
        Convert IRC formatting to HTML spans, then turn URLs into links
        when the message looks like it might contain one.
        """
        text  = text.replace("<", "&lt;")
        state = _SpanState()
        out   = []
        potential_url = False

        pos  = 0
        size = len(text)
        while pos < size:
            ch = text[pos]

            if ch in _STYLES:
                name = _STYLES[ch][0]
                if state.toggle(name):
                    out.append(self._style_span(ch))
                else:
                    out.append(CLOSE_SPAN)

            elif ch == COLOR:
                m = _COLOR_RE.match(text, pos + 1)
                if m:
                    bg = m.group(2)
                    out.append(self._color_span(
                        int(m.group(1)), int(bg) if bg is not None else None))
                    state.open()
                    pos = m.end()
                    continue
                out.append(CLOSE_SPAN)
                state.close()

            elif ch == RESET:
                depth = state.reset()
                if depth:
                    out.append(CLOSE_SPAN * depth)

            else:
                # ".", ":" or "/" between two non-space characters
                if (not potential_url and ch in _URL_HINTS
                        and out and not _is_space(out[-1][-1])
                        and pos + 1 < size and not _is_space(text[pos + 1])):
                    potential_url = True
                out.append(ch)

            pos += 1

        processed = "".join(out)
        if potential_url and self._url_rx is not None:
            return linkify(processed, self._url_rx)
        return processed

    def to_plain_text(self, text: str) -> str:
        return to_plain_text(text)
