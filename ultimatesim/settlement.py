"""Settlement life cycle: genesis spawning, founding villages and ruin."""

from __future__ import annotations

import dataclasses
import logging
import random

from .components import (
    NPC,
    Affiliation,
    GenomeComponent,
    Identity,
    Legacy,
    MarketComponent,
    Needs,
    Path,
    PopulationComponent,
    Position,
    RuinComponent,
    SettlementLogic,
    StorageComponent,
    Velocity,
    Village,
)
from .ecs import World
from .grid import Biome, MapGrid

logger = logging.getLogger(__name__)

_UINT32_MASK = 0xFFFFFFFF
_SETTLE_TICKS = 1000
_SETTLE_MIN_RESOURCES = 50
_FAMILY_COUNT = 20
_FAMILY_SIZE = 5
_CLAN_COUNT = 100


class RuinTransformationSystem:
    """Turns settlements whose population reached zero into ruins."""

    def update(self, world: World) -> None:
        abandoned = [
            entity
            for entity in world.query(PopulationComponent)
            if world.get(entity, PopulationComponent).count == 0
        ]

        for entity in abandoned:
            former_name = (
                world.get(entity, Identity).name if world.has(entity, Identity) else ""
            )
            world.remove(entity, PopulationComponent)
            if world.has(entity, Needs):
                world.remove(entity, Needs)
            world.add(entity, RuinComponent(decay=0, former_name=former_name))


class SettlementRuleSystem:
    """Founds a village where an NPC has stood still for 1000 ticks on rich land.

    The NPC stays alive and becomes a resident of the new village.
    """

    def __init__(self, map_grid: MapGrid) -> None:
        self.map_grid = map_grid

    def _is_rich(self, pos: Position) -> bool:
        grid = self.map_grid
        x, y = int(pos.x), int(pos.y)
        if not (0 <= x < grid.width and 0 <= y < grid.height):
            return False
        depot = grid.resources[y * grid.width + x]
        return depot.wood_value + depot.food_value > _SETTLE_MIN_RESOURCES

    def update(self, world: World) -> None:
        settlers = []
        for entity in world.query(NPC, SettlementLogic, Position, Velocity):
            vel = world.get(entity, Velocity)
            logic = world.get(entity, SettlementLogic)
            if vel.x == 0 and vel.y == 0:
                logic.ticks_at_zero_velocity += 1
            else:
                logic.ticks_at_zero_velocity = 0

            if logic.ticks_at_zero_velocity >= _SETTLE_TICKS and self._is_rich(
                world.get(entity, Position)
            ):
                settlers.append(entity)

        for entity in settlers:
            self._found_village(world, entity)

    @staticmethod
    def _inherited(world: World, entity: int, component_type: type):
        if world.has(entity, component_type):
            return dataclasses.replace(world.get(entity, component_type))
        return component_type()

    def _found_village(self, world: World, settler: int) -> None:
        identity = self._inherited(world, settler, Identity)
        genome = self._inherited(world, settler, GenomeComponent)
        legacy = self._inherited(world, settler, Legacy)
        pos = world.get(settler, Position)

        if world.has(settler, SettlementLogic):
            world.get(settler, SettlementLogic).ticks_at_zero_velocity = 0

        world.new_entity(
            Village(),
            Position(x=pos.x, y=pos.y),
            StorageComponent(wood=100, food=100, stone=0, iron=0),
            PopulationComponent(count=1),
            MarketComponent(food_price=1.0, wood_price=1.0, stone_price=1.0, iron_price=1.0),
            identity,
            genome,
            legacy,
        )

        if world.has(settler, Affiliation):
            world.get(settler, Affiliation).city_id = identity.id & _UINT32_MASK


class NPCSpawnerSystem:
    """Spawns the first 20 families of 5 NPCs on random land tiles, once."""

    def __init__(self, map_grid: MapGrid, rng: random.Random | None = None) -> None:
        self.map_grid = map_grid
        self.rng = rng if rng is not None else random.Random()
        self.has_spawned = False
        self._next_id = 1
        self._next_family_id = 1

    def _rand(self) -> int:
        return self.rng.getrandbits(63)

    def _trait_score(self) -> int:
        return (self._rand() % 101 + self._rand() % 101 + self._rand() % 101) // 3

    def _habitable_tiles(self) -> list[tuple[int, int]]:
        grid = self.map_grid
        return [
            (x, y)
            for y in range(grid.height)
            for x in range(grid.width)
            if grid.get_tile(x, y).biome_id != Biome.OCEAN
        ]

    def update(self, world: World) -> None:
        if self.has_spawned:
            return

        habitable = self._habitable_tiles()
        if not habitable:
            logger.warning("No habitable tiles found. Genesis spawning aborted.")
            return

        for _ in range(_FAMILY_COUNT):
            x, y = habitable[self._rand() % len(habitable)]
            family_id = self._next_family_id
            self._next_family_id += 1
            clan_id = self._rand() % _CLAN_COUNT

            for _ in range(_FAMILY_SIZE):
                self._spawn_member(world, x, y, family_id, clan_id)

        self.has_spawned = True

    def _spawn_member(self, world: World, x: int, y: int, family_id: int, clan_id: int) -> None:
        npc_id = self._next_id
        self._next_id += 1

        identity = Identity(
            id=npc_id,
            name=f"NPC-{npc_id}",
            base_traits=self._rand() & _UINT32_MASK,
            age=20 + self._rand() % 30,
        )
        genome = GenomeComponent(
            strength=self._trait_score(),
            beauty=self._trait_score(),
            health=self._trait_score(),
            intellect=self._trait_score(),
            dominant=self._rand() & _UINT32_MASK,
            recessive=self._rand() & _UINT32_MASK,
        )

        world.new_entity(
            Position(x=float(x), y=float(y)),
            Velocity(x=0.0, y=0.0),
            identity,
            genome,
            Legacy(prestige=0, inherited_debt=0),
            Needs(food=1000.0, rest=100.0, safety=100.0, wealth=100.0),
            Path(has_path=False),
            NPC(),
            SettlementLogic(ticks_at_zero_velocity=0),
            Affiliation(family_id=family_id, clan_id=clan_id),
        )