"""
ircfmt — convert IRC-formatted messages to HTML or plain text.

Usage:
    ircfmt [-c ircfmt.toml] [TEXT ...]     # HTML, one line per TEXT
    ircfmt --plain < log.txt               # strip formatting from stdin
    ircfmt -e '\\x02bold\\x02 http://example.com'
"""

import argparse
import logging
import sys

try:
    import tomllib
except ImportError:
    try:
        import tomli as tomllib
    except ImportError:
        print("Python < 3.11 detected. Install tomli: pip install tomli",
              file=sys.stderr)
        sys.exit(1)

from links import DEFAULT_URL_PATTERN
from palette import Palette
from text_format import SPAN_FORMATS, SPAN_STYLE, TextFormat

log = logging.getLogger("ircfmt")

DEFAULT_CONFIG = "ircfmt.toml"


def load_config(path: str) -> dict:
    with open(path, "rb") as f:
        return tomllib.load(f)


def build_format(config: dict) -> TextFormat:
    """
    Build a TextFormat from a config dict.

    config keys (all optional):
        span_format  "inline-style" or "named-class"
        url_pattern  regex; "" disables link detection
        palette      table of index or color name → color name
    """
    palette = Palette(config.get("palette", {}))
    return TextFormat(
        palette=palette,
        url_pattern=config.get("url_pattern", DEFAULT_URL_PATTERN),
        span_format=config.get("span_format", SPAN_STYLE),
    )


def _read_config(path: str, explicit: bool) -> dict:
    try:
        return load_config(path)
    except FileNotFoundError:
        if explicit:
            raise
        log.debug("No config file at %s, using defaults", path)
        return {}


def _messages(args):
    if args.text:
        yield from args.text
    else:
        for line in sys.stdin:
            yield line.rstrip("\r\n")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="ircfmt — convert IRC-formatted text to HTML or plain text")
    parser.add_argument("text", nargs="*", metavar="TEXT",
                        help="Messages to convert (default: read lines from stdin)")
    parser.add_argument("-c", "--config", metavar="FILE",
                        help=f"Path to TOML config file (default: {DEFAULT_CONFIG} if present)")
    parser.add_argument("--plain", action="store_true",
                        help="Strip formatting instead of converting to HTML")
    parser.add_argument("--span-format", choices=SPAN_FORMATS,
                        help="HTML span format (overrides config)")
    parser.add_argument("--no-links", action="store_true",
                        help="Disable URL detection")
    parser.add_argument("-e", "--escapes", action="store_true",
                        help="Decode backslash escapes such as \\x02 in the input")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    path = args.config or DEFAULT_CONFIG
    try:
        config = _read_config(path, explicit=args.config is not None)
        if args.span_format:
            config["span_format"] = args.span_format
        if args.no_links:
            config["url_pattern"] = ""
        fmt = build_format(config)
    except FileNotFoundError:
        print(f"Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)

    convert = fmt.to_plain_text if args.plain else fmt.to_markup
    for message in _messages(args):
        if args.escapes:
            try:
                message = message.encode("latin-1", "backslashreplace").decode(
                    "unicode_escape")
            except UnicodeDecodeError as e:
                print(f"Bad escape in input {message!r}: {e.reason}",
                      file=sys.stderr)
                sys.exit(1)
        print(convert(message))


if __name__ == "__main__":
    main()
