"""Component data types attached to simulation entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Velocity:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Path:
    nodes: list[Position] = field(default_factory=list)
    has_path: bool = False
    target_x: float = 0.0
    target_y: float = 0.0


class Trait(IntFlag):
    """Personality bits stored in ``Identity.base_traits``."""

    NONE = 0
    CAUTIOUS = 1
    RISK_TAKER = 2


@dataclass
class Identity:
    id: int = 0
    name: str = ""
    base_traits: int = 0
    age: int = 0


@dataclass
class Needs:
    food: float = 0.0
    rest: float = 0.0
    safety: float = 0.0
    wealth: float = 0.0


@dataclass
class Affiliation:
    city_id: int = 0
    country_id: int = 0
    family_id: int = 0
    clan_id: int = 0


@dataclass
class StorageComponent:
    food: int = 0
    wood: int = 0
    stone: int = 0
    iron: int = 0


@dataclass
class Payload:
    food: int = 0
    wood: int = 0
    stone: int = 0
    iron: int = 0


@dataclass
class MarketComponent:
    food_price: float = 0.0
    wood_price: float = 0.0
    stone_price: float = 0.0
    iron_price: float = 0.0
    wage_rate: float = 0.0


@dataclass
class PopulationComponent:
    count: int = 0


@dataclass
class TreasuryComponent:
    wealth: float = 0.0


@dataclass
class CountryComponent:
    debasement: float = 0.0


@dataclass
class CapitalComponent:
    """Marks a village as a country's capital."""


@dataclass
class Village:
    """Marks a settlement entity."""


@dataclass
class CoinEntity:
    """Marks a physical coin."""


@dataclass
class CurrencyComponent:
    issuer_id: int = 0
    value: float = 0.0
    debasement: float = 0.0


class UnionType(IntEnum):
    NONE = 0
    CURRENCY = 1


@dataclass
class UnionEntity:
    """Marks a union of cities."""


@dataclass
class UnionComponent:
    union_type: UnionType = UnionType.NONE
    member_ids: list[int] = field(default_factory=list)


@dataclass
class ShipComponent:
    hull: int = 0


@dataclass
class PortComponent:
    """Marks a village with a harbour."""


@dataclass
class Caravan:
    """Marks an overland trade caravan."""


@dataclass
class PassengerComponent:
    passengers: list = field(default_factory=list)


@dataclass
class NPC:
    """Marks a non-player character."""


@dataclass
class SettlementLogic:
    ticks_at_zero_velocity: int = 0


@dataclass
class GenomeComponent:
    strength: int = 0
    beauty: int = 0
    health: int = 0
    intellect: int = 0
    dominant: int = 0
    recessive: int = 0


@dataclass
class Legacy:
    prestige: int = 0
    inherited_debt: int = 0


@dataclass
class RuinComponent:
    decay: int = 0
    former_name: str = ""


class Job(IntEnum):
    NONE = 0
    GUARD = 1
    PREACHER = 2
    ARTISAN = 3


@dataclass
class JobComponent:
    job_id: Job = Job.NONE
    employer_id: int = 0


BELIEF_XENOPHOBIA = 900


@dataclass
class Belief:
    belief_id: int = 0
    weight: int = 0


@dataclass
class BeliefComponent:
    beliefs: list[Belief] = field(default_factory=list)


@dataclass
class JurisdictionComponent:
    radius_squared: float = 0.0
    banned_secret_id: int = 0
    trauma: int = 0
    corruption: int = 0
    illegal_action_ids: int = 0


@dataclass
class Secret:
    secret_id: int = 0


@dataclass
class SecretComponent:
    secrets: list[Secret] = field(default_factory=list)


@dataclass
class Ledger:
    """Marks a physical ledger item."""


@dataclass
class LedgerComponent:
    secrets: list[int] = field(default_factory=list)


@dataclass
class CultureComponent:
    language_id: int = 0


@dataclass
class BusinessComponent:
    """Marks a business entity."""


@dataclass
class WorkplaceComponent:
    x: float = 0.0
    y: float = 0.0