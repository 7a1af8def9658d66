"""Ideology systems: preachers, state propaganda, traumatic traditions and xenophobia."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .components import (
    BELIEF_XENOPHOBIA,
    NPC,
    Affiliation,
    Belief,
    BeliefComponent,
    CultureComponent,
    Identity,
    Job,
    JobComponent,
    JurisdictionComponent,
    Ledger,
    LedgerComponent,
    Needs,
    Position,
    RuinComponent,
    SecretComponent,
)
from .ecs import World

_PREACH_INTERVAL = 50
_PREACH_RADIUS_SQ = 400.0
_PREACH_BOOST = 5
_PREACH_SUPPRESSION = 1

_PROPAGANDA_INTERVAL = 20
_ERASURE_MAX_AGE = 30
_EXECUTION_MIN_AGE = 60

_TRAUMA_INTERVAL = 50
_TRAUMA_THRESHOLD = 10
_TRAUMA_BELIEF_WEIGHT = 100

_XENOPHOBIA_INTERVAL = 10
_XENOPHOBIA_MIN_WEIGHT = 50
_XENOPHOBIA_RADIUS_SQ = 10.0
_GRUDGE_THRESHOLD = -50
_GRUDGE_DELTA = -100


class HookGraph(Protocol):
    """Directed relationship scores between entity ids."""

    def get_hook(self, source: int, target: int) -> int: ...

    def add_hook(self, source: int, target: int, delta: int) -> None: ...


def _dist_sq(ax: float, ay: float, bx: float, by: float) -> float:
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


class PreacherSystem:
    """Every 50 ticks, preachers push their strongest belief onto everyone within radius 20."""

    def __init__(self) -> None:
        self.tick_counter = 0

    def update(self, world: World) -> None:
        self.tick_counter += 1
        if self.tick_counter % _PREACH_INTERVAL != 0:
            return

        nodes = [
            (
                entity,
                world.get(entity, Position),
                world.get(entity, JobComponent) if world.has(entity, JobComponent) else None,
                world.get(entity, BeliefComponent),
            )
            for entity in world.query(Position, BeliefComponent, without=(RuinComponent,))
        ]

        for preacher, p_pos, job, p_beliefs in nodes:
            if job is None or job.job_id != Job.PREACHER or not p_beliefs.beliefs:
                continue

            strongest_id = 0
            max_weight = -1
            for belief in p_beliefs.beliefs:
                if belief.weight > max_weight:
                    max_weight = belief.weight
                    strongest_id = belief.belief_id
            if strongest_id == 0:
                continue

            for target, t_pos, _, t_beliefs in nodes:
                if target == preacher:
                    continue
                if _dist_sq(p_pos.x, p_pos.y, t_pos.x, t_pos.y) >= _PREACH_RADIUS_SQ:
                    continue
                self._convert(t_beliefs, strongest_id)

    @staticmethod
    def _convert(beliefs: BeliefComponent, belief_id: int) -> None:
        found = False
        for belief in beliefs.beliefs:
            if belief.belief_id == belief_id:
                belief.weight += _PREACH_BOOST
                found = True
            elif belief.weight > 0:
                belief.weight -= _PREACH_SUPPRESSION
        if not found:
            beliefs.beliefs.append(Belief(belief_id=belief_id, weight=_PREACH_BOOST))


@dataclass(frozen=True)
class _Zone:
    x: float
    y: float
    radius_squared: float
    banned_secret_id: int


class PropagandaSystem:
    """Every 20 ticks, jurisdictions erase a banned secret.

    The young (under 30) forget it, elders (60 and over) who hold it are
    starved for execution, and ledgers recording it are burned.
    """

    def __init__(self) -> None:
        self.tick_counter = 0

    @staticmethod
    def _zones(world: World) -> list[_Zone]:
        zones = []
        for entity in world.query(JurisdictionComponent, Position):
            jur = world.get(entity, JurisdictionComponent)
            if jur.banned_secret_id == 0:
                continue
            pos = world.get(entity, Position)
            zones.append(_Zone(pos.x, pos.y, jur.radius_squared, jur.banned_secret_id))
        return zones

    @staticmethod
    def _banned_at(zones: list[_Zone], pos: Position) -> int:
        for zone in zones:
            if _dist_sq(pos.x, pos.y, zone.x, zone.y) <= zone.radius_squared:
                return zone.banned_secret_id
        return 0

    def update(self, world: World) -> None:
        self.tick_counter += 1
        if self.tick_counter % _PROPAGANDA_INTERVAL != 0:
            return

        zones = self._zones(world)
        if not zones:
            return

        for entity in world.query(NPC, Identity, Position, SecretComponent, Needs):
            secrets = world.get(entity, SecretComponent).secrets
            if not secrets:
                continue
            banned = self._banned_at(zones, world.get(entity, Position))
            if banned == 0:
                continue
            index = next(
                (i for i, secret in enumerate(secrets) if secret.secret_id == banned), None
            )
            if index is None:
                continue

            age = world.get(entity, Identity).age
            if age < _ERASURE_MAX_AGE:
                secrets[index] = secrets[-1]
                secrets.pop()
            elif age >= _EXECUTION_MIN_AGE:
                world.get(entity, Needs).food = 0

        burned = []
        for entity in world.query(Ledger, LedgerComponent, Position):
            banned = self._banned_at(zones, world.get(entity, Position))
            if banned > 0 and banned in world.get(entity, LedgerComponent).secrets:
                burned.append(entity)

        for entity in burned:
            if world.alive(entity):
                world.remove_entity(entity)


class TraumaticTraditionsSystem:
    """Every 50 ticks, survivors in a heavily traumatised jurisdiction turn xenophobic.

    Trauma above 10 triggers the belief; every jurisdiction's trauma then
    decays by one.
    """

    def __init__(self) -> None:
        self.tick_counter = 0

    def update(self, world: World) -> None:
        self.tick_counter += 1
        if self.tick_counter % _TRAUMA_INTERVAL != 0:
            return

        traumas: list[tuple[float, float, JurisdictionComponent]] = []
        for entity in world.query(JurisdictionComponent, Position):
            jur = world.get(entity, JurisdictionComponent)
            if jur.trauma > _TRAUMA_THRESHOLD:
                pos = world.get(entity, Position)
                traumas.append((pos.x, pos.y, jur))
            if jur.trauma > 0:
                jur.trauma -= 1

        if not traumas:
            return

        for entity in world.query(Position, BeliefComponent, Affiliation):
            pos = world.get(entity, Position)
            beliefs = world.get(entity, BeliefComponent).beliefs
            for x, y, jur in traumas:
                if _dist_sq(pos.x, pos.y, x, y) <= jur.radius_squared:
                    if not any(b.belief_id == BELIEF_XENOPHOBIA for b in beliefs):
                        beliefs.append(
                            Belief(belief_id=BELIEF_XENOPHOBIA, weight=_TRAUMA_BELIEF_WEIGHT)
                        )
                    break


@dataclass(frozen=True)
class _Person:
    id: int
    x: float
    y: float
    language_id: int
    xenophobe: bool


class XenophobiaSystem:
    """Every 10 ticks, xenophobes near a foreign speaker form a deep grudge against them.

    ``hooks`` is any object with ``get_hook(source, target)`` and
    ``add_hook(source, target, delta)``.
    """

    def __init__(self, hooks: HookGraph) -> None:
        self.hooks = hooks
        self.tick_counter = 0

    @staticmethod
    def _is_xenophobe(beliefs: BeliefComponent) -> bool:
        return any(
            b.belief_id == BELIEF_XENOPHOBIA and b.weight >= _XENOPHOBIA_MIN_WEIGHT
            for b in beliefs.beliefs
        )

    def update(self, world: World) -> None:
        self.tick_counter += 1
        if self.tick_counter % _XENOPHOBIA_INTERVAL != 0:
            return

        people = []
        for entity in world.query(Position, Identity, BeliefComponent, CultureComponent):
            pos = world.get(entity, Position)
            people.append(
                _Person(
                    id=world.get(entity, Identity).id,
                    x=pos.x,
                    y=pos.y,
                    language_id=world.get(entity, CultureComponent).language_id,
                    xenophobe=self._is_xenophobe(world.get(entity, BeliefComponent)),
                )
            )

        for i, actor in enumerate(people):
            if not actor.xenophobe:
                continue
            for j, target in enumerate(people):
                if i == j or actor.language_id == target.language_id:
                    continue
                if _dist_sq(actor.x, actor.y, target.x, target.y) >= _XENOPHOBIA_RADIUS_SQ:
                    continue
                if self.hooks.get_hook(actor.id, target.id) > _GRUDGE_THRESHOLD:
                    self.hooks.add_hook(actor.id, target.id, _GRUDGE_DELTA)