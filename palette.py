"""Color palette: maps IRC color indices to color names."""

import logging

from irc_format import COLOR_INDEX

log = logging.getLogger("palette")

FOREGROUND_FALLBACK = "black"
BACKGROUND_FALLBACK = "transparent"

DEFAULT_COLOR_NAMES = {
    0:  "white",
    1:  "black",
    2:  "navy",
    3:  "green",
    4:  "red",
    5:  "maroon",
    6:  "purple",
    7:  "olive",
    8:  "yellow",
    9:  "lime",
    10: "darkcyan",
    11: "cyan",
    12: "royalblue",
    13: "magenta",
    14: "gray",
    15: "lightgray",
}


def color_index(key) -> int:
    """
    Resolve a palette key to an index.
    Accepts ints, numeric strings ("4") and IRC color names ("red").
    """
    if isinstance(key, bool):
        raise ValueError(f"Invalid palette key: {key!r}")
    if isinstance(key, int):
        return key
    text = str(key).strip().lower()
    if text.lstrip("-").isdigit():
        return int(text)
    if text in COLOR_INDEX:
        return COLOR_INDEX[text]
    raise ValueError(f"Invalid palette key: {key!r}")


class Palette:
    """
    Sparse index → color name mapping.

    Overrides are a configuration-time operation: apply them before the
    palette is shared with formatters running on other threads.
    """

    def __init__(self, overrides: dict = None):
        self._names = dict(DEFAULT_COLOR_NAMES)
        for key, name in (overrides or {}).items():
            self.set_color_name(color_index(key), name)

    def color_name(self, index: int, fallback: str = FOREGROUND_FALLBACK) -> str:
        if index < 0:
            return fallback
        return self._names.get(index, fallback)

    def set_color_name(self, index: int, name: str):
        log.debug("Palette override: %d → %s", index, name)
        self._names[index] = name

    def color_names(self) -> dict:
        return dict(self._names)

    def __repr__(self):
        return f"Palette({self._names!r})"
