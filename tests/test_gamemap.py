import pytest

from dungeonkit.gamemap import EnvironmentType, GameMap, TerrainData, TerrainType
from dungeonkit.geometry import IVec2

GROUND = TerrainData(TerrainType.GROUND)
WALL = TerrainData(TerrainType.WALL)


def test_default_map_ground_area():
    game_map = GameMap.default_map()
    assert game_map.tiles[IVec2(4, 1)] == GROUND
    assert game_map.tiles[IVec2(19, 19)] == GROUND


def test_default_map_ground_wins_over_walls():
    game_map = GameMap.default_map()
    assert game_map.tiles[IVec2(10, 19)] == GROUND


def test_default_map_walls():
    game_map = GameMap.default_map()
    assert game_map.tiles[IVec2(0, 0)] == WALL
    assert game_map.tiles[IVec2(10, 21)] == WALL
    assert game_map.tiles[IVec2(4, 0)] == WALL


def test_default_map_outside_is_absent():
    game_map = GameMap.default_map()
    assert IVec2(20, 1) not in game_map.tiles
    assert IVec2(11, 0) not in game_map.tiles
    assert IVec2(-1, 0) not in game_map.tiles


def test_default_map_has_no_entities():
    assert GameMap.default_map().tiles_lookup == {}


def test_neighbors_interior_has_eight_and_excludes_self():
    game_map = GameMap.default_map()
    position = IVec2(10, 10)
    neighbors = game_map.neighbors(position)
    assert len(neighbors) == 8
    assert position not in neighbors
    assert all(abs(p.x - 10) <= 1 and abs(p.y - 10) <= 1 for p in neighbors)


def test_neighbors_corner_only_existing_tiles():
    game_map = GameMap.default_map()
    neighbors = game_map.neighbors(IVec2(0, 0))
    assert set(neighbors) == {IVec2(1, 0), IVec2(0, 1), IVec2(1, 1)}
    assert all(t == WALL for t in neighbors.values())


def test_neighbors_of_empty_map():
    assert GameMap().neighbors(IVec2(0, 0)) == {}


def test_neighbors_reports_terrain():
    game_map = GameMap(tiles={IVec2(0, 0): GROUND, IVec2(1, 0): WALL})
    assert game_map.neighbors(IVec2(0, 0)) == {IVec2(1, 0): WALL}


def test_associate_entity_to_tile():
    game_map = GameMap.default_map()
    game_map.associate_entity_to_tile(7, IVec2(5, 5))
    game_map.associate_entity_to_tile(8, IVec2(5, 5))
    assert game_map.tiles_lookup == {IVec2(5, 5): 8}


def test_environment_terrain_equality():
    water = TerrainData(TerrainType.ENVIRONMENT, EnvironmentType.WATER)
    lava = TerrainData(TerrainType.ENVIRONMENT, EnvironmentType.LAVA)
    assert water != lava
    assert water == TerrainData(TerrainType.ENVIRONMENT, EnvironmentType.WATER)


def test_environment_terrain_requires_environment():
    with pytest.raises(ValueError):
        TerrainData(TerrainType.ENVIRONMENT)


def test_plain_terrain_rejects_environment():
    with pytest.raises(ValueError):
        TerrainData(TerrainType.WALL, EnvironmentType.LAVA)