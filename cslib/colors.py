"""Conversion between color names, "#rrggbb" strings and packed RGB integers."""

from __future__ import annotations

import re

from cslib.startup import ErrorException

_COLOR_TABLE: dict[str, int] = {
    "black": 0x000000,
    "darkgray": 0x595959,
    "gray": 0x999999,
    "lightgray": 0xBFBFBF,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "yellow": 0xFFFF00,
    "green": 0x00FF00,
    "cyan": 0x00FFFF,
    "blue": 0x0000FF,
    "magenta": 0xFF00FF,
    "orange": 0xFFC800,
    "pink": 0xFFAFAF,
}

_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)\s*")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def canonical_color_name(name: str) -> str:
    """Lower-case the name and drop whitespace and underscores."""
    return "".join(ch.lower() for ch in name if not ch.isspace() and ch != "_")


def convert_color_to_rgb(color_name: str) -> int:
    """Return the packed RGB value for a color name or "#rrggbb" string.

    The empty string maps to -1, meaning no color.
    """
    if color_name == "":
        return -1
    if color_name.startswith("#"):
        match = _HEX_RE.fullmatch(color_name[1:])
        if match is None:
            raise ErrorException("setColor: Illegal color - " + color_name)
        value = int(match.group(2), 16)
        if match.group(1) == "-":
            value = -value
        if not _INT_MIN <= value <= _INT_MAX:
            raise ErrorException("setColor: Illegal color - " + color_name)
        return value
    name = canonical_color_name(color_name)
    try:
        return _COLOR_TABLE[name]
    except KeyError:
        raise ErrorException("setColor: Undefined color - " + color_name) from None


def convert_rgb_to_color(rgb: int) -> str:
    """Return the "#RRGGBB" form of a packed RGB value, or "" for -1."""
    if rgb == -1:
        return ""
    return "#{:02X}{:02X}{:02X}".format(rgb >> 16 & 0xFF, rgb >> 8 & 0xFF, rgb & 0xFF)