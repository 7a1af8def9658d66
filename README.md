# ultimatesim

A deterministic, tick-driven world simulation built on a small
entity-component store. Entities are collections of component
dataclasses kept in a `World`. Systems are objects whose `update` method
advances the simulation by one tick.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `ultimatesim.ecs.World` is the entity store. `new_entity(*components)`
  takes component classes or instances and returns an integer id. Ids are
  never reused. It also has `add`, `remove`, `get`, `has`, `alive` and
  `remove_entity`. `query(*types, without=())` returns the ids that hold
  every given type and none of the excluded ones, in creation order.
  `get` and `remove` raise `KeyError` when the component is missing, and
  `add` raises `ValueError` when a component of that type is already
  present.
- `ultimatesim.components` holds the component dataclasses, for example
  `Position`, `Velocity`, `Path`, `Identity`, `Needs`, `Affiliation`,
  `StorageComponent`, `Payload`, `MarketComponent`, `TreasuryComponent`,
  `ShipComponent`, `BeliefComponent`, `JurisdictionComponent` and
  `SecretComponent`. It also holds the enums `Job`, `UnionType` and
  `Trait`.
- `ultimatesim.grid.MapGrid(width, height)` is a row-major map with
  `tiles`, `tile_states` and `resources` layers, plus `get_tile` and
  `set_tile`. Those two raise `IndexError` for coordinates outside the
  map. The biomes are in the `Biome` enum: `OCEAN`, `GRASSLAND` and
  `MOUNTAIN`.
- `ultimatesim.noise.Perlin(seed)` gives seeded 2D Perlin noise. The seed
  is bytes (at most 32, zero-padded) or an int. `noise2d(x, y)` returns
  values roughly within [-1, 1].
- `ultimatesim.hpa.AbstractGrid(map_width, map_height, region_size)`
  splits a map into `Cluster`s, with edge clusters trimmed to fit.
  `build_nav_mesh(grid_tiles, map_width)` builds `Gateway`s of ocean
  tiles (biome 0) on the boundaries between adjacent clusters.

## Systems

| Module | System | Constructor | `update` | Period |
|---|---|---|---|---|
| `economy` | `MintingSystem` | `(world)` | `update()` | every 100 ticks |
| `economy` | `PriceDiscoverySystem` | `()` | `update(world)` | every tick |
| `economy` | `PriceNormalizationSystem` | `(world)` | `update()` | every tick |
| `economy` | `TaxationSystem` | `(world)` | `update()` | every 100 ticks |
| `attrition` | `RustSystem` | `()` | `update(world)` | every 50 ticks |
| `attrition` | `SpoilageSystem` | `()` | `update(world)` | every 10 ticks |
| `attrition` | `StormSystem` | `(grid, rng=None, storm_chance=0.05)` | `update(world)` | every tick |
| `settlement` | `RuinTransformationSystem` | `()` | `update(world)` | every tick |
| `settlement` | `SettlementRuleSystem` | `(map_grid)` | `update(world)` | every tick |
| `settlement` | `NPCSpawnerSystem` | `(map_grid, rng=None)` | `update(world)` | once |
| `naval` | `NavalPiracySystem` | `()` | `update(world)` | every tick |
| `naval` | `NavalSpawningSystem` | `()` | `update(world)` | every tick |
| `workplace` | `WorkplaceSystem` | `(path_queue)` | `update(world)` | paths every 3600 ticks |
| `beliefs` | `PreacherSystem` | `()` | `update(world)` | every 50 ticks |
| `beliefs` | `PropagandaSystem` | `()` | `update(world)` | every 20 ticks |
| `beliefs` | `TraumaticTraditionsSystem` | `()` | `update(world)` | every 50 ticks |
| `beliefs` | `XenophobiaSystem` | `(hooks)` | `update(world)` | every 10 ticks |

Periodic systems count their own calls to `update`, so call each system
once per tick.

`StormSystem` and `NPCSpawnerSystem` draw from the `random.Random` they
are given. To get repeatable runs, pass one with a fixed seed.

## Example

```python
from ultimatesim.ecs import World
from ultimatesim.components import (
    Village, StorageComponent, PopulationComponent, MarketComponent,
)
from ultimatesim.economy import PriceDiscoverySystem

world = World()
village = world.new_entity(
    Village(),
    StorageComponent(food=50, wood=100, stone=20, iron=0),
    PopulationComponent(count=10),
    MarketComponent(),
)

PriceDiscoverySystem().update(world)
market = world.get(village, MarketComponent)
print(market.food_price)  # demand 100 over supply 51
```

## What the package does not do

- **No movement and no route finding.** Nothing moves entities by their
  `Velocity` or walks a `Path`. `WorkplaceSystem` only creates
  `workplace.PathRequest` values and `put`s them on the `path_queue` you
  supply, for example a `queue.Queue`. Solving those routes is up to you.
- **No relationship store.** `XenophobiaSystem` needs a `hooks` object
  that provides `get_hook(source, target)` and
  `add_hook(source, target, delta)`. The package does not provide one.
- **No death handling.** `PropagandaSystem` sets an elder's `Needs.food`
  to 0. Removing starved entities is left to the caller.
- **No scheduler, command or display.** You build the world and call the
  systems yourself. There is no command-line program and no rendering.