"""Workplaces: sending employees to work and crediting their productivity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .components import (
    NPC,
    BusinessComponent,
    GenomeComponent,
    Identity,
    Job,
    JobComponent,
    Path,
    Position,
    TreasuryComponent,
    WorkplaceComponent,
)
from .ecs import World

_WORK_CYCLE_TICKS = 3600
_AT_WORK_DIST_SQ = 1.0
_PRODUCTIVITY_PER_POINT = 0.01


@dataclass(frozen=True)
class PathRequest:
    """A request to route an entity from a start point to a target."""

    entity_id: int
    start_x: float
    start_y: float
    target_x: float
    target_y: float
    is_naval: bool = False


@dataclass
class BusinessData:
    """A business's workplace and, if it has one, its treasury."""

    workplace: WorkplaceComponent
    treasury: TreasuryComponent | None = None


class WorkplaceSystem:
    """Sends employees to their workplace every 3600 ticks and pays for their presence.

    ``path_queue`` is any object with a ``put(request)`` method, such as
    :class:`queue.Queue`; it receives :class:`PathRequest` values.
    """

    def __init__(self, path_queue: Any) -> None:
        self.path_queue = path_queue
        self.tick_stamp = 0

    @staticmethod
    def _businesses(world: World) -> dict[int, BusinessData]:
        businesses = {}
        for entity in world.query(BusinessComponent, WorkplaceComponent, Identity):
            treasury = (
                world.get(entity, TreasuryComponent)
                if world.has(entity, TreasuryComponent)
                else None
            )
            businesses[world.get(entity, Identity).id] = BusinessData(
                workplace=world.get(entity, WorkplaceComponent), treasury=treasury
            )
        return businesses

    def update(self, world: World) -> None:
        self.tick_stamp += 1
        businesses = self._businesses(world)
        is_work_cycle = self.tick_stamp % _WORK_CYCLE_TICKS == 0

        for entity in world.query(NPC, JobComponent, Position, Path, GenomeComponent, Identity):
            job = world.get(entity, JobComponent)
            if job.employer_id == 0 or job.job_id == Job.NONE:
                continue
            business = businesses.get(job.employer_id)
            if business is None:
                continue

            pos = world.get(entity, Position)
            workplace = business.workplace
            dx = pos.x - workplace.x
            dy = pos.y - workplace.y
            at_work = dx * dx + dy * dy <= _AT_WORK_DIST_SQ

            if is_work_cycle and not at_work:
                self.path_queue.put(
                    PathRequest(
                        entity_id=world.get(entity, Identity).id,
                        start_x=pos.x,
                        start_y=pos.y,
                        target_x=workplace.x,
                        target_y=workplace.y,
                    )
                )
                path = world.get(entity, Path)
                path.has_path = True
                path.target_x = workplace.x
                path.target_y = workplace.y

            if at_work and business.treasury is not None:
                genome = world.get(entity, GenomeComponent)
                business.treasury.wealth += (
                    genome.strength * _PRODUCTIVITY_PER_POINT
                    + genome.intellect * _PRODUCTIVITY_PER_POINT
                )