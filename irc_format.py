"""IRC formatting control codes and helpers for building formatted text."""

BOLD          = "\x02"
COLOR         = "\x03"
RESET         = "\x0F"
STRIKETHROUGH = "\x13"
UNDERLINE     = "\x15"
INVERSE       = "\x16"
ITALIC        = "\x1D"
UNDERLINE_ALT = "\x1F"

CONTROL_CODES = frozenset((
    BOLD, COLOR, RESET, STRIKETHROUGH, UNDERLINE, INVERSE, ITALIC, UNDERLINE_ALT,
))

# IRC color codes
WHITE      = 0
BLACK      = 1
BLUE       = 2
GREEN      = 3
RED        = 4
BROWN      = 5
PURPLE     = 6
ORANGE     = 7
YELLOW     = 8
LIGHTGREEN = 9
CYAN       = 10
LIGHTCYAN  = 11
LIGHTBLUE  = 12
PINK       = 13
GREY       = 14
LIGHTGREY  = 15

# Lower-case names accepted wherever a color index is expected (config keys)
COLOR_INDEX = {
    "white":      WHITE,
    "black":      BLACK,
    "blue":       BLUE,
    "green":      GREEN,
    "red":        RED,
    "brown":      BROWN,
    "purple":     PURPLE,
    "orange":     ORANGE,
    "yellow":     YELLOW,
    "lightgreen": LIGHTGREEN,
    "cyan":       CYAN,
    "lightcyan":  LIGHTCYAN,
    "lightblue":  LIGHTBLUE,
    "pink":       PINK,
    "grey":       GREY,
    "gray":       GREY,
    "lightgrey":  LIGHTGREY,
    "lightgray":  LIGHTGREY,
}


def color(s: str, fg: int, bg: int = None) -> str:
    if bg is None:
        return f"{COLOR}{fg:02d}{s}{COLOR}"
    return f"{COLOR}{fg:02d},{bg:02d}{s}{COLOR}"


def bold(s: str) -> str:
    return f"{BOLD}{s}{BOLD}"


def italic(s: str) -> str:
    return f"{ITALIC}{s}{ITALIC}"


def underline(s: str) -> str:
    return f"{UNDERLINE_ALT}{s}{UNDERLINE_ALT}"


def strikethrough(s: str) -> str:
    return f"{STRIKETHROUGH}{s}{STRIKETHROUGH}"


def inverse(s: str) -> str:
    return f"{INVERSE}{s}{INVERSE}"
