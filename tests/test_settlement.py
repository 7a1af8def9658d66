import random
from collections import Counter

from ultimatesim.components import (
    NPC,
    Affiliation,
    GenomeComponent,
    Identity,
    Legacy,
    MarketComponent,
    Needs,
    PopulationComponent,
    Position,
    RuinComponent,
    SettlementLogic,
    StorageComponent,
    Velocity,
    Village,
)
from ultimatesim.ecs import World
from ultimatesim.grid import Biome, MapGrid, ResourceDepot, TileData
from ultimatesim.settlement import (
    NPCSpawnerSystem,
    RuinTransformationSystem,
    SettlementRuleSystem,
)


# Ruin transformation


def test_ruin_transformation_e2e():
    world = World()
    living = world.new_entity(
        PopulationComponent(count=10), Needs(food=100), Identity(name="LivingCity")
    )
    dead = world.new_entity(
        PopulationComponent(count=0), Needs(food=50), Identity(name="DeadCity")
    )

    RuinTransformationSystem().update(world)

    assert world.has(living, PopulationComponent)
    assert world.has(living, Needs)
    assert not world.has(living, RuinComponent)

    assert not world.has(dead, PopulationComponent)
    assert not world.has(dead, Needs)
    ruin = world.get(dead, RuinComponent)
    assert ruin.former_name == "DeadCity"
    assert ruin.decay == 0


def test_ruin_without_identity_has_empty_name():
    world = World()
    entity = world.new_entity(PopulationComponent(count=0))
    RuinTransformationSystem().update(world)
    assert world.get(entity, RuinComponent).former_name == ""


def test_ruin_transformation_deterministic_count():
    def run():
        world = World()
        for i in range(1000):
            world.new_entity(PopulationComponent(count=i % 5))
        RuinTransformationSystem().update(world)
        return len(world.query(RuinComponent))

    first = run()
    assert first == 200
    assert run() == first


# Settlement rule


def _settlement_setup(with_affiliation=True):
    world = World()
    grid = MapGrid(10, 10)
    grid.resources[5 * 10 + 5] = ResourceDepot(wood_value=30, food_value=30)
    components = [
        Position(x=5, y=5),
        Velocity(x=0, y=0),
        NPC(),
        SettlementLogic(),
        Identity(id=123),
    ]
    if with_affiliation:
        components.append(Affiliation(city_id=0))
    entity = world.new_entity(*components)
    return world, grid, entity


def test_settlement_rule_e2e():
    world, grid, entity = _settlement_setup()
    system = SettlementRuleSystem(grid)

    for _ in range(999):
        system.update(world)
    assert world.alive(entity)
    assert world.query(Village) == []

    system.update(world)
    assert world.alive(entity)
    assert world.get(entity, Affiliation).city_id == 123

    villages = world.query(Village, Position, StorageComponent, PopulationComponent, MarketComponent)
    assert len(villages) == 1
    village = villages[0]
    pos = world.get(village, Position)
    assert (pos.x, pos.y) == (5, 5)
    storage = world.get(village, StorageComponent)
    assert (storage.wood, storage.food) == (100, 100)
    assert world.get(village, PopulationComponent).count == 1
    assert world.get(village, MarketComponent).food_price == 1.0
    assert world.get(entity, SettlementLogic).ticks_at_zero_velocity == 0


def test_settlement_rule_deterministic_inheritance():
    def run():
        rng = random.Random(42)
        world, grid, entity = _settlement_setup(with_affiliation=False)
        world.get(entity, Identity).base_traits = rng.getrandbits(32)
        system = SettlementRuleSystem(grid)
        for _ in range(1000):
            system.update(world)
        return [world.get(v, Identity).base_traits for v in world.query(Village, Identity)]

    first = run()
    assert len(first) == 1
    assert first == run()


def test_village_copies_identity_genome_and_legacy():
    world, grid, entity = _settlement_setup()
    world.add(entity, GenomeComponent(strength=70), Legacy(prestige=9))
    system = SettlementRuleSystem(grid)
    for _ in range(1000):
        system.update(world)
    (village,) = world.query(Village)
    assert world.get(village, Identity).id == 123
    assert world.get(village, GenomeComponent).strength == 70
    assert world.get(village, Legacy).prestige == 9
    assert world.get(village, Identity) is not world.get(entity, Identity)


def test_moving_npc_resets_counter_and_poor_tile_does_not_settle():
    world, grid, entity = _settlement_setup()
    system = SettlementRuleSystem(grid)
    for _ in range(500):
        system.update(world)
    world.get(entity, Velocity).x = 1.0
    system.update(world)
    assert world.get(entity, SettlementLogic).ticks_at_zero_velocity == 0

    world.get(entity, Velocity).x = 0.0
    world.get(entity, Position).x = 1
    for _ in range(1500):
        system.update(world)
    assert world.query(Village) == []
    assert world.get(entity, SettlementLogic).ticks_at_zero_velocity == 1500


# NPC spawner


def _island_grid():
    grid = MapGrid(20, 20)
    for y in range(5, 15):
        for x in range(5, 15):
            grid.set_tile(x, y, TileData(biome_id=Biome.GRASSLAND))
    return grid


def test_npc_spawner_e2e():
    world = World()
    grid = _island_grid()
    spawner = NPCSpawnerSystem(grid, random.Random(1234))
    spawner.update(world)

    entities = world.query(Position, Velocity, Identity, GenomeComponent, Legacy, Needs, NPC, Affiliation)
    assert len(entities) == 100
    for entity in entities:
        pos = world.get(entity, Position)
        assert grid.get_tile(int(pos.x), int(pos.y)).biome_id != Biome.OCEAN
        assert world.get(entity, Identity).id != 0
        assert world.get(entity, Needs).food == 1000.0
        assert world.get(entity, GenomeComponent).strength <= 100
        assert world.get(entity, Affiliation).family_id != 0

    spawner.update(world)
    assert len(world.query(Position)) == 100


def test_npc_spawner_families_ids_and_names():
    world = World()
    NPCSpawnerSystem(_island_grid(), random.Random(7)).update(world)
    entities = world.query(Identity, Affiliation)
    ids = sorted(world.get(e, Identity).id for e in entities)
    assert ids == list(range(1, 101))
    names = {world.get(e, Identity).name for e in entities}
    assert "NPC-1" in names and "NPC-100" in names
    families = Counter(world.get(e, Affiliation).family_id for e in entities)
    assert set(families) == set(range(1, 21))
    assert all(size == 5 for size in families.values())
    for entity in entities:
        age = world.get(entity, Identity).age
        assert 20 <= age < 50
        assert 0 <= world.get(entity, Affiliation).clan_id < 100


def test_npc_spawner_deterministic():
    def run():
        world = World()
        grid = MapGrid(20, 20)
        for y in range(20):
            for x in range(20):
                grid.set_tile(x, y, TileData(biome_id=Biome.GRASSLAND))
        NPCSpawnerSystem(grid, random.Random(42)).update(world)
        return [world.get(e, Position).x for e in world.query(Position)]

    first = run()
    assert len(first) == 100
    assert all(0 <= x <= 19 for x in first)
    assert run() == first


def test_npc_spawner_all_ocean_spawns_nothing_and_retries():
    world = World()
    grid = MapGrid(4, 4)
    spawner = NPCSpawnerSystem(grid, random.Random(5))
    spawner.update(world)
    assert world.query(NPC) == []
    assert spawner.has_spawned is False

    grid.set_tile(1, 1, TileData(biome_id=Biome.GRASSLAND))
    spawner.update(world)
    npcs = world.query(NPC)
    assert len(npcs) == 100
    assert all(
        (world.get(e, Position).x, world.get(e, Position).y) == (1.0, 1.0) for e in npcs
    )