"""Reading and validating ``.cub`` scene description files."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from cubparse.config import Color, Config, Direction, GameMap, Texture
from cubparse.textutil import atoi, split

_WHITESPACE = " \t\n\v\f\r"
_EXTENSION = ".cub"
_ELEMENT_TOTAL = 6
_UNFILLED = "\0"


class ConfigError(Exception):
    """Raised when a scene file is malformed."""


def has_cub_extension(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` ends with the ``.cub`` extension."""
    name = os.fspath(path)
    return len(name) >= len(_EXTENSION) and name.endswith(_EXTENSION)


def parse_color(text: str) -> Color:
    """Parse ``R,G,B`` into a Color; raise ValueError if it is not valid."""
    parts = split(text, ",")
    if len(parts) != 3:
        raise ValueError(f"expected three colour components, got {len(parts)}")
    red, green, blue = (atoi(part) for part in parts)
    for component in (red, green, blue):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component {component} is outside 0..255")
    return Color(red, green, blue)


def _starts_map(line: str) -> bool:
    return line[:1] in ("1", " ")


def map_dimensions(lines: Iterable[str]) -> tuple[int, int]:
    """Return ``(width, height)`` of the map section of the given lines.

    The map begins at the first line starting with ``1`` or a space; from
    there on every line counts towards the height, and the width is the
    length of the longest such line including its line terminator.
    """
    width = 0
    height = 0
    started = False
    for line in lines:
        if not started and _starts_map(line):
            started = True
        if started:
            width = max(width, len(line))
            height += 1
    return width, height


def _read_lines(path: str) -> list[str]:
    """Read a file as lines that keep their trailing newline."""
    text = Path(path).read_bytes().decode("latin-1")
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def _apply_element(config: Config, fields: list[str]) -> bool:
    """Record one configuration element; return True if it was accepted."""
    if len(fields) != 2:
        return False
    key, value = fields
    if key == "F":
        if config.floor_color is not None:
            raise ConfigError("Duplicate Floor")
        try:
            config.floor_color = parse_color(value)
        except ValueError:
            return False
        return True
    if key == "C":
        if config.ceiling_color is not None:
            raise ConfigError("Duplicate Ceiling")
        try:
            config.ceiling_color = parse_color(value)
        except ValueError:
            return False
        return True
    if key in Direction.__members__:
        direction = Direction[key]
        if config.textures[direction] is not None:
            raise ConfigError("Duplicate direction")
        config.textures[direction] = Texture(direction, value)
        return True
    raise ConfigError("wrong identifier")


def _read_grid(lines: Iterator[str], width: int, height: int) -> list[list[str]]:
    grid = [[_UNFILLED] * width for _ in range(height)]
    filled = 0
    started = False
    for line in lines:
        if filled >= height:
            break
        if not started and _starts_map(line):
            started = True
        if not started:
            continue
        content = line[:-1] if line.endswith("\n") else line
        grid[filled] = list(content[:width].ljust(width))
        filled += 1
    return grid


def read_config(path: str | os.PathLike[str]) -> Config:
    """Parse the scene file at ``path``.

    Raises ConfigError for malformed content and OSError if the file
    cannot be read.
    """
    name = os.fspath(path)
    if not has_cub_extension(name):
        raise ConfigError("Not a valid extension")
    lines = _read_lines(name)
    width, height = map_dimensions(lines)
    config = Config(map=GameMap(width=width, height=height))

    remaining = iter(lines)
    for line in remaining:
        if line[:1] in ("\n", ""):
            continue
        _apply_element(config, split(line, _WHITESPACE))
        if config.element_count() == _ELEMENT_TOTAL:
            config.map.grid = _read_grid(remaining, width, height)
            return config
    raise ConfigError("Invalide number of cfg element")


def format_config(config: Config) -> str:
    """Render a parsed configuration as a human-readable report."""
    out = ["Textures:"]
    for index, texture in enumerate(config.textures):
        if texture is None:
            out.append(f" {index}: id=0 path=(null)")
        else:
            out.append(f" {index}: id={int(texture.id)} path={texture.path}")
    if config.floor_color is not None:
        c = config.floor_color
        out.append(f"Floor color: R={c.red} G={c.green} B={c.blue}")
    if config.ceiling_color is not None:
        c = config.ceiling_color
        out.append(f"Ceiling color: R={c.red} G={c.green} B={c.blue}")
    out.append("MAP:")
    out.extend(config.map.rows())
    return "\n".join(out) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Parse the scene file named on the command line and print it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: cubparse <file.cub>")
        return 1
    try:
        config = read_config(args[0])
    except ConfigError as err:
        print(f"Error\n{err}")
        return 1
    except OSError as err:
        print(f"Error\n: {err.strerror or err}", file=sys.stderr)
        print("Failed to parse config.", file=sys.stderr)
        return 1
    print(f"H= {config.map.height}\n W={config.map.width}")
    sys.stdout.write(format_config(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())