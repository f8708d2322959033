"""URL and e-mail address detection for HTML-formatted messages."""

import logging
import re
import urllib.parse
from typing import NamedTuple

log = logging.getLogger("links")

# Characters left literal when percent-encoding an href
HREF_SAFE = ":/?@%#=+&,"

_QUOTES = "«»“”‘’"

# Group 1 is the whole link, group 2 an explicit scheme ("https://").
DEFAULT_URL_PATTERN = (
    r"\b((?:(?:([a-z][\w\.-]+:/{1,3})|www|ftp\d{0,3}[.]|[a-z0-9.\-]+[.][a-z]{2,4}/)"
    r"(?:[^\s()<>]|\(([^\s()<>]|(\([^\s()<>]+\)))*\))+"
    r"(?:\(([^\s()<>]|(\([^\s()<>]+\)))*\)|\}\]|[^\s`!()\[\]{};:'\".,<>?" + _QUOTES + r"])"
    r"|[a-z0-9.\-+_]+@[a-z0-9.\-]+[.][a-z]{1,5}[^\s/`!()\[\]{};:'\".,<>?" + _QUOTES + r"]))"
)


class LinkMatch(NamedTuple):
    start:    int
    text:     str
    protocol: str

    @property
    def href(self) -> str:
        return self.protocol + urllib.parse.quote(self.text, safe=HREF_SAFE)

    def anchor(self) -> str:
        return f"<a href='{self.href}'>{self.text}</a>"


def compile_pattern(pattern):
    """Compile a URL pattern, raising ValueError if it is not a valid regex."""
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        rx = re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid URL pattern {pattern!r}: {e}") from e
    log.debug("Compiled URL pattern with %d groups", rx.groups)
    return rx


def _protocol(m: re.Match) -> str:
    if m.re.groups >= 2 and m.group(2):
        return ""
    label = (m.group(1) if m.re.groups >= 1 else None) or m.group(0)
    if "@" in label:
        return "mailto:"
    if label.lower().startswith("ftp."):
        return "ftp://"
    return "http://"


def linkify(text: str, pattern) -> str:
    """
    Replace every match of pattern in text with an <a> element.
    Searching resumes after each inserted anchor, so anchors are never
    matched again.
    """
    rx  = compile_pattern(pattern)
    pos = 0
    while pos <= len(text):
        m = rx.search(text, pos)
        if not m:
            break
        if m.end() == m.start():
            pos = m.end() + 1
            continue
        link = LinkMatch(m.start(), m.group(0), _protocol(m))
        replacement = link.anchor()
        log.debug("Link at %d: %s", link.start, link.href)
        text = text[:m.start()] + replacement + text[m.end():]
        pos  = m.start() + len(replacement)
    return text
