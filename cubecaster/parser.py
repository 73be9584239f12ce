"""Reading of scene descriptions: textures, floor and ceiling colours, map."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Collection, Iterable

from .mapcheck import ConfigError, validate_map
from .xpm import load_xpm

TEXTURE_KEYS = ("NO", "WE", "EA", "SO")
COLOR_KEYS = ("F", "C")
_IDENTIFIERS = TEXTURE_KEYS + COLOR_KEYS

_C_WHITESPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")
_RGB_CHARS = frozenset(", 0123456789")
_ULL = 1 << 64
_LLONG_MAX = (1 << 63) - 1


@dataclass
class Scene:
    """Everything a scene file describes."""

    textures: dict[str, Any] = field(default_factory=dict)
    floor: int = 0
    ceiling: int = 0
    rows: list[str] = field(default_factory=list)


def c_atoi(text: str) -> int:
    """Read a leading integer the way the scene format expects.

    Leading whitespace is skipped; an empty remainder gives -1. Values past
    the 64-bit range give -1 (positive) or 0 (negative), and the result is
    reduced to a signed 32-bit integer.
    """
    rest = text.lstrip(_C_WHITESPACE)
    if not rest:
        return -1
    sign = 1
    if rest[0] in "+-":
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    result = int(digits or "0") % _ULL
    if result > _LLONG_MAX:
        return -1 if sign > 0 else 0
    return ((result * sign + (1 << 31)) % (1 << 32)) - (1 << 31)


def check_extension(path: str) -> None:
    """Require a name longer than four characters ending in ``.cub``."""
    if len(path) <= 4 or not path.endswith(".cub"):
        raise ConfigError("Not valid extension")


def identify_line(line: str, seen: Collection[str]) -> str | None:
    """Name the element a header line defines.

    Returns one of NO, WE, EA, SO, F, C; None for a line holding only
    spaces before its newline. An unknown or repeated element is an error.
    """
    content = line.lstrip(" ")
    if content.startswith("\n"):
        return None
    for key in _IDENTIFIERS:
        if content.startswith(key + " ") and key not in seen:
            return key
    raise ConfigError("Not a valid identifier")


def parse_rgb(value: str) -> int:
    """Turn ``R,G,B`` (the text after F or C) into 0xRRGGBB."""
    body = value.lstrip(" ")
    if body.count(",") != 2:
        raise ConfigError("More or less than 2 comma")
    first_line = body.split("\n", 1)[0]
    if any(char not in _RGB_CHARS for char in first_line):
        raise ConfigError("Not valid RGB 1")
    parts = [part for part in body.split(",") if part]
    if len(parts) != 3:
        raise ConfigError("Not valid RGB 2")
    channels = [c_atoi(part) for part in parts]
    if any(not 0 <= channel <= 255 for channel in channels):
        raise ConfigError("Not valid RGB")
    red, green, blue = channels
    return (red << 16) | (green << 8) | blue


def texture_path(line: str) -> str:
    """Extract the file name from a texture line such as ``NO ./wall.xpm``."""
    body = line.split("\n", 1)[0]
    return body.lstrip(" ")[2:].strip(" ")


def parse_scene(lines: Iterable[str], texture_loader: Callable[[str], Any]) -> Scene:
    """Build a scene from the lines of a scene file, newlines kept.

    The six header elements come first in any order; every line after the
    sixth makes up the map. ``texture_loader`` turns a texture path into
    the texture object stored in the scene.
    """
    source = iter(lines)
    scene = Scene()
    seen: set[str] = set()
    while len(seen) < 6:
        line = next(source, None)
        if line is None:
            break
        key = identify_line(line, seen)
        if key is None:
            continue
        if key in TEXTURE_KEYS:
            try:
                scene.textures[key] = texture_loader(texture_path(line))
            except (OSError, ValueError) as exc:
                raise ConfigError("Texture not valid") from exc
        else:
            color = parse_rgb(line.lstrip(" ")[1:])
            if key == "F":
                scene.floor = color
            else:
                scene.ceiling = color
        seen.add(key)
    if len(seen) != 6:
        raise ConfigError("Missing data")
    scene.rows = validate_map("".join(source))
    return scene


def load_scene(path: str | Path) -> Scene:
    """Read the ``.cub`` file at ``path``, loading its XPM textures."""
    check_extension(str(path))
    try:
        handle = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise ConfigError("Wrong map path") from exc
    with handle:
        return parse_scene(handle, load_xpm)