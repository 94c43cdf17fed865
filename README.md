# cubparse

`cubparse` reads `.cub` scene files. This is the small text format that
describes a raycasting level. A scene file gives four wall textures, the
floor and ceiling colours, and then a grid map.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

## How a file is read

- The file name must end in `.cub`. If it does not, `ConfigError("Not a valid extension")` is raised.
- Empty lines are skipped.
- Every other line is split on whitespace into fields. Lines that do not have exactly two fields are ignored.
- The six elements are:
  - `NO`, `SO`, `WE` and `EA`, each followed by a texture path.
  - `F` and `C`, each followed by a colour written as `R,G,B`.

  The elements may come in any order.
- The following raise `ConfigError`:
  - a second `F`: "Duplicate Floor"
  - a second `C`: "Duplicate Ceiling"
  - a texture direction that is already set: "Duplicate direction"
  - an identifier that is not one of the six: "wrong identifier"
- A colour has to have three comma-separated components, each from 0 to 255. If it does not, that line is not counted as an element, and no error is raised for it.
- Map reading starts once all six elements are set. If the file ends before that, `ConfigError("Invalide number of cfg element")` is raised.
- The map begins at the first line that starts with `1` or a space:
  - The height is the number of lines from that point to the end of the file.
  - The width is the length of the longest of those lines, with its newline counted.
  - Each row is cut to this width, or padded with spaces up to it.
  - Rows that were never filled hold `"\0"` characters.
- A file that cannot be opened raises `OSError`.

## Command line

```
pip install .
cubparse level.cub
```

The command prints:

1. The map height and width.
2. Each texture slot, with its direction number and path. An unset slot is shown as `path=(null)`.
3. The floor and ceiling colours.
4. The map, one row per line.

If the file is invalid, it prints `Error` and the reason, then exits with status 1. It also exits with status 1, after printing a usage line, if it is not given exactly one argument.

## Library

```python
from cubparse.parser import ConfigError, format_config, read_config

try:
    config = read_config("level.cub")
except ConfigError as err:
    print(err)
else:
    print(config.floor_color)      # Color(red=220, green=100, blue=0)
    for row in config.map.rows():
        print(row)
    print(format_config(config))
```

### `cubparse.parser`

- `read_config(path)`: parses a scene file and returns a `Config`.
- `format_config(config)`: returns the report the command prints, without the size line.
- `has_cub_extension(path)`: checks the file name.
- `parse_color(text)`: returns a `Color`. It raises `ValueError` for bad input.
- `map_dimensions(lines)`: returns `(width, height)` for a list of lines.
- `main(argv=None)`: the command entry point.

### `cubparse.config`

This module holds the data classes:

- `Direction` is an `IntEnum` with members `NO`, `SO`, `WE` and `EA`.
- `Color`
- `Texture`
- `GameMap`, which has a `rows()` method.
- `Config`, which has:
  - `textures`, indexed by `Direction`
  - `floor_color` and `ceiling_color`
  - `map`
  - `have_floor` and `have_ceiling`
  - `element_count()`

### `cubparse.textutil`

- `atoi(text)`: parses a leading integer.
- `split(text, delims)`: splits on any of the delimiter characters and drops empty tokens.

## What it does not do

`cubparse` only reads and reports a scene file:

- It does not render the scene, and it does not run a game.
- It does not check the map itself. It does not look for closed walls, for valid cell characters, or for a single player start. `Config.player_set` is never set by the parser.
- It does not check that the texture files exist.

## Tests

```
pip install .[test]
pytest
```