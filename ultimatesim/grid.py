"""The tile map: biomes, per-tile wear and resource deposits."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Biome(IntEnum):
    OCEAN = 0
    GRASSLAND = 1
    MOUNTAIN = 2


@dataclass
class TileData:
    biome_id: int = Biome.OCEAN


@dataclass
class TileState:
    foot_traffic: int = 0


@dataclass
class ResourceDepot:
    wood_value: int = 0
    food_value: int = 0


@dataclass
class MapGrid:
    """A row-major grid; index of (x, y) is ``y * width + x``."""

    width: int
    height: int
    tiles: list[TileData] = field(init=False)
    tile_states: list[TileState] = field(init=False)
    resources: list[ResourceDepot] = field(init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("map dimensions must be positive")
        size = self.width * self.height
        self.tiles = [TileData() for _ in range(size)]
        self.tile_states = [TileState() for _ in range(size)]
        self.resources = [ResourceDepot() for _ in range(size)]

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside a {self.width}x{self.height} map")
        return y * self.width + x

    def get_tile(self, x: int, y: int) -> TileData:
        return self.tiles[self._index(x, y)]

    def set_tile(self, x: int, y: int, tile: TileData) -> None:
        self.tiles[self._index(x, y)] = tile