import pytest

from dungeonkit.geometry import (
    TILE_SIZE,
    IVec2,
    Orientation,
    find_path,
    world_position,
)


def grid(width, height):
    return {IVec2(x, y) for x in range(width) for y in range(height)}


def test_magnitude_of_axis_vector_is_its_length():
    assert IVec2(0, 7).magnitude() == pytest.approx(7.0)


@pytest.mark.parametrize(
    "x, y, expected_x, expected_y",
    [
        (0, 5, 0, 1),
        (0, -3, 0, -1),
        (-4, 0, -1, 0),
        (9, 0, 1, 0),
    ],
)
def test_normalized_orthogonal_vectors(x, y, expected_x, expected_y):
    assert IVec2(x, y).normalized() == IVec2(expected_x, expected_y)


def test_normalized_zero_is_zero():
    assert IVec2(0, 0).normalized() == IVec2(0, 0)


def test_manhattan_symmetric_and_zero_to_self():
    a, b = IVec2(3, -2), IVec2(-1, 4)
    assert a.manhattan(b) == b.manhattan(a)
    assert a.manhattan(a) == 0


def test_ordering_is_x_then_y():
    points = [IVec2(1, 0), IVec2(0, 5), IVec2(0, 1)]
    assert sorted(points) == [IVec2(0, 1), IVec2(0, 5), IVec2(1, 0)]


def test_orientation_from_scaled_orthogonal_vector():
    assert Orientation.from_vector(IVec2.UP * 4) is Orientation.NORTH
    assert Orientation.from_vector(IVec2.LEFT * 2) is Orientation.WEST


def test_orientation_from_zero_falls_back_to_south():
    assert Orientation.from_vector(IVec2(0, 0)) is Orientation.SOUTH


def test_find_path_shortest_and_contiguous():
    start, end = IVec2(0, 0), IVec2(3, 2)
    path = find_path(start, end, grid(5, 5), set())
    assert path is not None
    assert len(path) == start.manhattan(end)
    assert path[-1] == end
    assert start not in path
    steps = [start] + path
    assert all(a.manhattan(b) == 1 for a, b in zip(steps, steps[1:]))


def test_find_path_avoids_blockers():
    tiles = grid(3, 3)
    blockers = {IVec2(1, 0), IVec2(1, 1)}
    path = find_path(IVec2(0, 0), IVec2(2, 0), tiles, blockers)
    assert path is not None
    assert not blockers & set(path)
    assert path[-1] == IVec2(2, 0)


def test_find_path_allows_blocked_target():
    path = find_path(IVec2(0, 0), IVec2(1, 0), grid(2, 1), {IVec2(1, 0)})
    assert path == [IVec2(1, 0)]


def test_find_path_unreachable_returns_none():
    tiles = grid(3, 1)
    assert find_path(IVec2(0, 0), IVec2(2, 0), tiles, {IVec2(1, 0)}) is None


def test_find_path_to_self_returns_none():
    assert find_path(IVec2(1, 1), IVec2(1, 1), grid(3, 3), set()) is None


def test_world_position_scales_by_tile_size():
    assert TILE_SIZE == 24.0
    assert world_position(IVec2(2, -1), 5.0) == (2 * TILE_SIZE, -TILE_SIZE, 5.0)