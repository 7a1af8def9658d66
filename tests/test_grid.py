import pytest

from ultimatesim.grid import Biome, MapGrid, TileData


def test_sizes_match_dimensions():
    grid = MapGrid(7, 3)
    assert len(grid.tiles) == 7 * 3
    assert len(grid.tile_states) == 7 * 3
    assert len(grid.resources) == 7 * 3


def test_default_tiles_are_ocean():
    grid = MapGrid(4, 4)
    assert all(t.biome_id == Biome.OCEAN for t in grid.tiles)
    assert all(s.foot_traffic == 0 for s in grid.tile_states)


def test_set_get_round_trip():
    grid = MapGrid(20, 20)
    grid.set_tile(5, 9, TileData(biome_id=Biome.GRASSLAND))
    assert grid.get_tile(5, 9).biome_id == Biome.GRASSLAND
    assert grid.tiles[9 * 20 + 5].biome_id == Biome.GRASSLAND
    assert grid.get_tile(9, 5).biome_id == Biome.OCEAN


def test_tiles_are_independent_objects():
    grid = MapGrid(3, 3)
    grid.tiles[0].biome_id = Biome.MOUNTAIN
    assert grid.tiles[1].biome_id == Biome.OCEAN


@pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (10, 0), (0, 10)])
def test_out_of_bounds(coord):
    grid = MapGrid(10, 10)
    with pytest.raises(IndexError):
        grid.get_tile(*coord)
    with pytest.raises(IndexError):
        grid.set_tile(*coord, TileData())


@pytest.mark.parametrize("dims", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_dimensions(dims):
    with pytest.raises(ValueError):
        MapGrid(*dims)