"""Naval systems: piracy targeting and turning caravans into ships at ports."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .components import (
    NPC,
    Affiliation,
    Caravan,
    PassengerComponent,
    Path,
    Payload,
    PortComponent,
    Position,
    ShipComponent,
    Velocity,
    Village,
)
from .ecs import World

_UINT32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class _TargetShip:
    entity: int
    x: float
    y: float
    wealth: int


def _cargo_value(payload: Payload) -> int:
    return (payload.food + payload.wood + payload.stone + payload.iron) & _UINT32_MASK


class NavalPiracySystem:
    """Points rogue NPCs (no city) at the ship with the best wealth-to-distance ratio.

    A ship scores ``wealth / distance²``; a ship on the pirate's own spot
    counts as distance 1.
    """

    def _target_ships(self, world: World) -> list[_TargetShip]:
        ships = []
        for entity in world.query(ShipComponent, Position, Payload):
            wealth = _cargo_value(world.get(entity, Payload))
            if wealth > 0:
                pos = world.get(entity, Position)
                ships.append(_TargetShip(entity=entity, x=pos.x, y=pos.y, wealth=wealth))
        return ships

    @staticmethod
    def _best_target(ships: list[_TargetShip], pos: Position) -> tuple[_TargetShip | None, float]:
        best: _TargetShip | None = None
        best_score = -1.0
        for ship in ships:
            dx = ship.x - pos.x
            dy = ship.y - pos.y
            dist_sq = dx * dx + dy * dy
            if dist_sq == 0:
                dist_sq = 1.0
            score = ship.wealth / dist_sq
            if score > best_score:
                best_score = score
                best = ship
        return best, best_score

    def update(self, world: World) -> None:
        ships = self._target_ships(world)
        if not ships:
            return

        for entity in world.query(NPC, Affiliation, Position, Path):
            if world.get(entity, Affiliation).city_id != 0:
                continue
            best, score = self._best_target(ships, world.get(entity, Position))
            if best is not None and score > 0:
                path = world.get(entity, Path)
                path.target_x = best.x
                path.target_y = best.y


class NavalSpawningSystem:
    """Replaces caravans that have stopped on a port tile with ships carrying their payload."""

    @staticmethod
    def _tile_key(pos: Position) -> tuple[int, int]:
        return int(pos.x), int(pos.y)

    def update(self, world: World) -> None:
        ports = {
            self._tile_key(world.get(entity, Position))
            for entity in world.query(Village, PortComponent, Position)
        }

        arrived = []
        for entity in world.query(Caravan, Position, Velocity, Payload):
            vel = world.get(entity, Velocity)
            if vel.x != 0 or vel.y != 0:
                continue
            if self._tile_key(world.get(entity, Position)) in ports:
                arrived.append(entity)

        for caravan in arrived:
            pos = world.get(caravan, Position)
            payload = world.get(caravan, Payload)
            world.new_entity(
                ShipComponent(),
                Position(x=pos.x, y=pos.y),
                Velocity(x=0.0, y=0.0),
                dataclasses.replace(payload),
                PassengerComponent(passengers=[]),
                Path(nodes=[], has_path=False),
            )
            world.remove_entity(caravan)