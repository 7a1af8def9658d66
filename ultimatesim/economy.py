"""Market, currency and taxation systems for cities and countries."""

from __future__ import annotations

from dataclasses import dataclass

from .components import (
    Affiliation,
    CapitalComponent,
    CoinEntity,
    CountryComponent,
    CurrencyComponent,
    MarketComponent,
    PopulationComponent,
    Position,
    StorageComponent,
    TreasuryComponent,
    UnionComponent,
    UnionEntity,
    UnionType,
    Village,
)
from .ecs import World

_MINT_INTERVAL = 100
_TAX_INTERVAL = 100
_BASE_IRON_COST = 100.0
_COIN_NOMINAL_VALUE = 100.0
_IDEAL_POPULATION = 100.0


@dataclass(frozen=True)
class _CoinSpawn:
    x: float
    y: float
    issuer_id: int
    debasement: float


class MintingSystem:
    """Capital cities turn stored iron into physical coins every 100 ticks."""

    def __init__(self, world: World) -> None:
        self.world = world
        self._ticks = 0

    @staticmethod
    def _iron_cost(debasement: float) -> int:
        return max(1, int(_BASE_IRON_COST * (1.0 - debasement)))

    def update(self) -> None:
        """Advance one tick; mint on every hundredth."""
        self._ticks += 1
        if self._ticks % _MINT_INTERVAL != 0:
            return

        world = self.world
        to_spawn: list[_CoinSpawn] = []
        for entity in world.query(
            Village, CapitalComponent, CountryComponent, StorageComponent, Affiliation, Position
        ):
            storage = world.get(entity, StorageComponent)
            country = world.get(entity, CountryComponent)
            cost = self._iron_cost(country.debasement)
            if storage.iron < cost:
                continue
            storage.iron -= cost
            pos = world.get(entity, Position)
            to_spawn.append(
                _CoinSpawn(
                    x=pos.x,
                    y=pos.y,
                    issuer_id=world.get(entity, Affiliation).city_id,
                    debasement=country.debasement,
                )
            )

        for spawn in to_spawn:
            world.new_entity(
                CoinEntity(),
                Position(x=spawn.x, y=spawn.y),
                CurrencyComponent(
                    issuer_id=spawn.issuer_id,
                    value=_COIN_NOMINAL_VALUE,
                    debasement=spawn.debasement,
                ),
            )


class PriceDiscoverySystem:
    """Sets each village's prices from population demand against stored supply."""

    _DEMAND_PER_HEAD = (
        ("food", 10.0),
        ("wood", 5.0),
        ("stone", 2.0),
        ("iron", 1.0),
    )

    def update(self, world: World) -> None:
        for entity in world.query(Village, StorageComponent, PopulationComponent, MarketComponent):
            storage = world.get(entity, StorageComponent)
            count = float(world.get(entity, PopulationComponent).count)
            market = world.get(entity, MarketComponent)

            for good, per_head in self._DEMAND_PER_HEAD:
                demand = count * per_head
                supply = float(getattr(storage, good))
                # One unit is added to supply so an empty store never divides by zero.
                setattr(market, f"{good}_price", 1.0 * (demand / (supply + 1.0)))

            market.wage_rate = 1.0 * (_IDEAL_POPULATION / (count + 1.0))


class PriceNormalizationSystem:
    """Averages market prices across the members of each currency union."""

    _PRICES = ("wood_price", "stone_price", "iron_price", "food_price")

    def __init__(self, world: World) -> None:
        self.world = world

    def update(self) -> None:
        world = self.world
        city_markets: dict[int, MarketComponent] = {
            world.get(entity, Affiliation).city_id: world.get(entity, MarketComponent)
            for entity in world.query(Village, Affiliation, MarketComponent)
        }
        if not city_markets:
            return

        for entity in world.query(UnionEntity, UnionComponent):
            union = world.get(entity, UnionComponent)
            if union.union_type != UnionType.CURRENCY or not union.member_ids:
                continue

            members = [city_markets[m] for m in union.member_ids if m in city_markets]
            if not members:
                continue

            averages = {
                name: sum(getattr(market, name) for market in members) / len(members)
                for name in self._PRICES
            }
            for market in members:
                for name, value in averages.items():
                    setattr(market, name, value)


class TaxationSystem:
    """Moves tax from villages to their country capital's treasury every 100 ticks."""

    def __init__(self, world: World) -> None:
        self.world = world
        self._ticks = 0

    def update(self) -> None:
        self._ticks += 1
        if self._ticks % _TAX_INTERVAL != 0:
            return

        world = self.world
        country_treasuries: dict[int, TreasuryComponent] = {
            world.get(entity, Affiliation).country_id: world.get(entity, TreasuryComponent)
            for entity in world.query(
                CountryComponent, CapitalComponent, Affiliation, TreasuryComponent
            )
        }
        if not country_treasuries:
            return

        for entity in world.query(Village, Affiliation, MarketComponent, TreasuryComponent):
            country_treasury = country_treasuries.get(world.get(entity, Affiliation).country_id)
            if country_treasury is None:
                continue

            market = world.get(entity, MarketComponent)
            treasury = world.get(entity, TreasuryComponent)
            tax = (
                market.food_price + market.wood_price + market.stone_price + market.iron_price
            ) * 1.0

            if treasury.wealth >= tax:
                treasury.wealth -= tax
                country_treasury.wealth += tax
            else:
                country_treasury.wealth += treasury.wealth
                treasury.wealth = 0.0