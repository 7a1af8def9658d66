"""Attrition systems: rust, food spoilage and storm damage to ships."""

from __future__ import annotations

import random

from .components import Payload, Position, ShipComponent, StorageComponent
from .ecs import World
from .grid import Biome, MapGrid

_RUST_INTERVAL = 50
_RUST_KEEP_PERCENT = 98
_RUST_GOODS = ("iron", "wood", "stone")

_SPOILAGE_INTERVAL = 10
_SPOILAGE_KEEP_PERCENT = 95
_SPOILAGE_GOODS = ("food",)

_DEFAULT_STORM_CHANCE = 0.05
_STORM_DAMAGE = 10


def _decay(holder: object, goods: tuple[str, ...], keep_percent: int) -> None:
    """Scale each listed integer stock down to ``keep_percent`` percent, rounding down."""
    for good in goods:
        amount = getattr(holder, good)
        if amount > 0:
            setattr(holder, good, (amount * keep_percent) // 100)


def _decay_holdings(world: World, goods: tuple[str, ...], keep_percent: int) -> None:
    """Decay the listed goods in every storage and payload of the world."""
    for component_type in (StorageComponent, Payload):
        for entity in world.query(component_type):
            _decay(world.get(entity, component_type), goods, keep_percent)


class RustSystem:
    """Every 50 ticks, iron, wood and stone lose 2% to rust and rot."""

    def __init__(self) -> None:
        self.ticks = 0

    def update(self, world: World) -> None:
        self.ticks += 1
        if self.ticks % _RUST_INTERVAL != 0:
            return
        _decay_holdings(world, _RUST_GOODS, _RUST_KEEP_PERCENT)


class SpoilageSystem:
    """Every 10 ticks, stored and carried food loses 5% to spoilage."""

    def __init__(self) -> None:
        self.ticks = 0

    def update(self, world: World) -> None:
        self.ticks += 1
        if self.ticks % _SPOILAGE_INTERVAL != 0:
            return
        _decay_holdings(world, _SPOILAGE_GOODS, _SPOILAGE_KEEP_PERCENT)


class StormSystem:
    """Storms randomly damage ships on ocean tiles and sink wrecked ones."""

    def __init__(
        self,
        grid: MapGrid | None,
        rng: random.Random | None = None,
        storm_chance: float = _DEFAULT_STORM_CHANCE,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.storm_chance = storm_chance

    def _on_ocean(self, pos: Position) -> bool:
        grid = self.grid
        idx = int(pos.y) * grid.width + int(pos.x)
        return 0 <= idx < len(grid.tiles) and grid.tiles[idx].biome_id == Biome.OCEAN

    def update(self, world: World) -> None:
        if self.grid is None:
            return

        sunk = []
        for entity in world.query(ShipComponent, Position):
            if not self._on_ocean(world.get(entity, Position)):
                continue
            if self.rng.random() >= self.storm_chance:
                continue
            ship = world.get(entity, ShipComponent)
            if ship.hull <= _STORM_DAMAGE:
                ship.hull = 0
                sunk.append(entity)
            else:
                ship.hull -= _STORM_DAMAGE

        for entity in sunk:
            world.remove_entity(entity)