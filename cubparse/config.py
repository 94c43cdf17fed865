"""Data model of a parsed scene description."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

TEXTURE_COUNT = 4
FOV_PLANE = 0.66


class Direction(IntEnum):
    """Wall orientation a texture is used for."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3


@dataclass
class Color:
    """An RGB colour with components in 0..255."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass
class Texture:
    """A wall texture and the file it is loaded from."""

    id: Direction
    path: str


@dataclass
class GameMap:
    """A rectangular grid of map cells, one character per cell."""

    width: int = 0
    height: int = 0
    grid: list[list[str]] = field(default_factory=list)

    def rows(self) -> list[str]:
        """Return each grid row as a string."""
        return ["".join(row) for row in self.grid]


@dataclass
class Config:
    """Everything a scene file declares."""

    textures: list[Texture | None] = field(
        default_factory=lambda: [None] * TEXTURE_COUNT
    )
    floor_color: Color | None = None
    ceiling_color: Color | None = None
    map: GameMap = field(default_factory=GameMap)
    player_set: bool = False

    @property
    def have_floor(self) -> bool:
        return self.floor_color is not None

    @property
    def have_ceiling(self) -> bool:
        return self.ceiling_color is not None

    def element_count(self) -> int:
        """Number of configuration elements set: textures plus both colours."""
        textures = sum(texture is not None for texture in self.textures)
        return textures + self.have_floor + self.have_ceiling