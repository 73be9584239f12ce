"""Validation of the map section of a scene description."""

from __future__ import annotations

_BLANKS = "\t\n\v\f\r "
_PLAYER = "NSEW"
_WALKABLE = "0EWNS"


class ConfigError(Exception):
    """Raised when a scene description is invalid; the message says why."""


def check_map_chars(text: str) -> None:
    """Check the characters of the raw map text.

    Leading whitespace is skipped. Only ``0``, ``1``, spaces, newlines and
    exactly one player letter (N, S, E, W) may follow, with no empty lines.
    """
    start = len(text) - len(text.lstrip(_BLANKS))
    if start == len(text):
        raise ConfigError("Invalid map")
    has_player = False
    previous = ""
    for char in text[start:]:
        if char in _PLAYER:
            if has_player:
                raise ConfigError("Player char repeated")
            has_player = True
        elif char not in "01 \n":
            raise ConfigError("Wrong char in map")
        elif char == "\n" and previous == "\n":
            raise ConfigError("Double endl")
        previous = char
    if not has_player:
        raise ConfigError("Player missing")


def check_boundary_line(line: str) -> bool:
    """Tell whether ``line`` holds anything but spaces.

    A line that starts with a wall must consist of walls and spaces only.
    """
    content = line.lstrip(" ")
    if not content:
        return False
    if content[0] == "1" and any(char not in "1 " for char in content):
        raise ConfigError("Up or down invalid wall")
    return True


def find_first_wall_row(rows: list[str]) -> int:
    """Index of the first non-blank row, or ``len(rows)`` if there is none."""
    return next((pos for pos, row in enumerate(rows) if check_boundary_line(row)), len(rows))


def find_last_wall_row(rows: list[str]) -> int:
    """Index of the last non-blank row, or -1 if there is none."""
    for pos in range(len(rows) - 1, -1, -1):
        if check_boundary_line(rows[pos]):
            return pos
    return -1


def check_middle(rows: list[str], first: int, last: int) -> None:
    """Check that the rows strictly between ``first`` and ``last`` are closed."""
    for line_no in range(first + 1, last):
        row = rows[line_no]
        content = row.strip(" ")
        if not content or content[0] != "1" or content[-1] != "1":
            raise ConfigError("Left or right wall broken")
        left = len(row) - len(row.lstrip(" "))
        right = len(row.rstrip(" ")) - 1
        above, below = rows[line_no - 1], rows[line_no + 1]
        for col, char in enumerate(row[left + 1:right], start=left + 1):
            if char not in _WALKABLE:
                continue
            if col >= len(above) or col >= len(below):
                raise ConfigError("Map invalid middle")
            if " " in (above[col], below[col], row[col - 1], row[col + 1]):
                raise ConfigError("Map invalid middle")


def validate_map(text: str) -> list[str]:
    """Validate the map text and return its non-empty rows."""
    check_map_chars(text)
    rows = [row for row in text.split("\n") if row]
    first = find_first_wall_row(rows)
    last = find_last_wall_row(rows)
    check_middle(rows, first, last)
    return rows