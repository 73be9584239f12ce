# cubecaster

Reads and checks `.cub` scene files for a first-person maze explorer. A
scene names four XPM wall textures, a floor colour, a ceiling colour and a
map. The package parses all of it, decodes the textures and rejects invalid
scenes with a one-line reason.

It needs only the standard library.

## Installing

```
pip install .
```

## Scene files

A scene file starts with six identifier lines. They may come in any order
and may be separated by blank lines:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give the XPM texture for each wall face.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each value runs from 0 to 255.

Every line after the sixth identifier belongs to the map. The map uses these
characters:

- `1` is a wall.
- `0` is open floor.
- a space is outside the map.
- `N`, `S`, `E` or `W` marks the player's start. Exactly one of them must appear.

The map must be closed. The first and last non-blank rows may hold only
walls and spaces. Every row between them must begin and end with a wall. No
open cell or player cell may touch a space or the ragged end of a
neighbouring row. Empty lines inside the map are rejected.

```
        1111111111111
        1000000000001
111111111011000001101
100000000011000001001
10110000011100000000111
100100000000000000001
11111111110110N0011111
1111    1110101 1001
        11111111111
```

## Usage

```python
from cubecaster.parser import load_scene
from cubecaster.mapcheck import ConfigError

try:
    scene = load_scene("maps/demo.cub")
except ConfigError as exc:
    print("Error")
    print(exc)
else:
    print(hex(scene.floor), hex(scene.ceiling))
    print(scene.textures["NO"].width, scene.textures["NO"].height)
    print("\n".join(scene.rows))
```

### `cubecaster.parser`

- `load_scene(path)` checks that the name ends in `.cub`, reads the file and
  loads each texture with `load_xpm`. It returns a `Scene`.
- `parse_scene(lines, texture_loader)` does the same work on lines that you
  supply, with their newlines kept. `texture_loader` turns a texture path
  into whatever object you want stored. If the loader raises `OSError` or
  `ValueError`, the error is reported as `"Texture not valid"`.
- `Scene` has the fields `textures` (keyed by `NO`, `WE`, `EA`, `SO`),
  `floor` and `ceiling` (as `0xRRGGBB`) and `rows` (the map rows).
- Helpers:
  - `check_extension(path)`
  - `identify_line(line, seen)`
  - `texture_path(line)`
  - `parse_rgb(value)`
  - `c_atoi(text)` reads the leading integer of a colour component.

### `cubecaster.mapcheck`

- `validate_map(text)` checks the raw map text and returns its non-empty rows.
- The individual checks are also available:
  - `check_map_chars`
  - `check_boundary_line`
  - `find_first_wall_row`
  - `find_last_wall_row`
  - `check_middle`
- `ConfigError` is raised for every invalid scene. Its message is the reason,
  for example `"Missing data"`, `"Player missing"` or
  `"Left or right wall broken"`.

### `cubecaster.xpm`

- `load_xpm(path)` reads an XPM file.
- `parse_xpm_text(text)` decodes the full text of an XPM file.
- `parse_xpm(lines)` decodes already-unquoted strings.
- Each of these returns an `XpmImage` with `width`, `height` and `pixels`.
  `pixel(x, y)` gives one `0xAARRGGBB` value.
- Colours may be `#hex` values or X11 colour names. The colour `none` is
  stored as `TRANSPARENT`.
- Bad data raises `XpmError`, which is a subclass of `ValueError`.
- `strip_comments(text)` and `text_to_rgb(name, end)` are available on their own.

### `cubecaster.colors`

- `lookup_color(name)` resolves an X11 colour name, ignoring case, to
  `0xRRGGBB`.
- It returns `-1` for `none` and `None` for an unknown name.

## What it does not do

This package has no game window, no raycasting, no wall or minimap drawing
and no keyboard or mouse handling. It installs no command. It stops at a
validated `Scene` with decoded textures, which a renderer can then use.

## Running the tests

```
pip install .[test]
pytest
```