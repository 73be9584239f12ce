"""Reader for XPM images, the texture format used for the walls."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour ``none``."""

_QUOTED = re.compile(r'"([^"]*)"')
_INT = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")
_HEX = re.compile(r"[\t\n\v\f\r ]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_WORD_SPLIT = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds 0xAARRGGBB values row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _strtol_hex(text: str) -> int:
    match = _HEX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def _words(text: str) -> list[str]:
    return [word for word in _WORD_SPLIT.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    Comments are replaced by spaces so that the text keeps its length.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (start := _find_unquoted(text, opener)) != -1:
            end = text.find(closer, start + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn a colour specification into 0xRRGGBB.

    ``#hex`` is read as a hexadecimal number; otherwise ``name`` (joined to
    ``end`` with a space when given) is looked up among the named colours.
    Unknown names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        return _strtol_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:63]
    color = lookup_color(name)
    return 0 if color is None else color


def _next_line(source: Iterator[str], what: str) -> str:
    try:
        return next(source)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the strings of an XPM file, already unquoted."""
    source = iter(lines)
    header = _words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definitions")
        key = line[:cpp]
        words = _words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        end = words[at + 1] if at + 1 < len(words) else None
        value = text_to_rgb(words[at], end)
        # Short keys overwrite earlier definitions; long keys keep the first.
        if cpp <= 2 or key not in palette:
            palette[key] = value

    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(source, "pixel rows")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the full text of an XPM file."""
    cleaned = strip_comments(text)
    return parse_xpm(match.group(1) for match in _QUOTED.finditer(cleaned))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc.strerror}") from exc
    return parse_xpm_text(data.decode("latin-1"))