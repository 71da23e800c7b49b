"""Integer grid vectors, orientations, path finding and world coordinates."""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

TILE_Z = 0.0
TILE_SIZE = 24.0

POKEMON_Z = 10.0
EFFECT_Z = 15.0
SHADOW_POKEMON_Z = -1.0  # relative to POKEMON_Z

WALK_SPEED = 1.43
PROJECTILE_SPEED = 1.8
POSITION_TOLERANCE = 0.1

FRAME_DURATION_MILLIS = 25


@dataclass(frozen=True, order=True)
class IVec2:
    """A two-dimensional integer vector, ordered by x then y."""

    x: int
    y: int

    def __add__(self, other: IVec2) -> IVec2:
        return IVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IVec2) -> IVec2:
        return IVec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> IVec2:
        return IVec2(-self.x, -self.y)

    def __mul__(self, factor: int) -> IVec2:
        return IVec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x**2 + self.y**2)

    def normalized(self) -> IVec2:
        """Unit-length direction with components truncated toward zero."""
        mag = self.magnitude()
        if mag == 0.0:
            return IVec2(0, 0)
        return IVec2(int(self.x / mag), int(self.y / mag))

    def manhattan(self, other: IVec2) -> int:
        """Manhattan distance to another vector."""
        return abs(self.x - other.x) + abs(self.y - other.y)


IVec2.UP = IVec2(0, 1)
IVec2.DOWN = IVec2(0, -1)
IVec2.LEFT = IVec2(-1, 0)
IVec2.RIGHT = IVec2(1, 0)

ORTHO_DIRECTIONS: tuple[IVec2, ...] = (IVec2.UP, IVec2.DOWN, IVec2.LEFT, IVec2.RIGHT)


class Orientation(Enum):
    """One of the eight facing directions; the value is its unit vector."""

    SOUTH = (0, -1)
    SOUTH_EAST = (1, -1)
    EAST = (1, 0)
    NORTH_EAST = (1, 1)
    NORTH = (0, 1)
    NORTH_WEST = (-1, 1)
    WEST = (-1, 0)
    SOUTH_WEST = (-1, -1)

    @classmethod
    def from_vector(cls, direction: IVec2) -> Orientation:
        """Orientation of a direction vector, falling back to south."""
        n = direction.normalized()
        try:
            return cls((n.x, n.y))
        except ValueError:
            logger.warning("unable to get orientation from %r", direction)
            return cls.SOUTH

    def to_vector(self) -> IVec2:
        """Unit vector pointing in this orientation."""
        return IVec2(*self.value)


def find_path(
    start: IVec2,
    end: IVec2,
    tiles: Iterable[IVec2],
    blockers: Iterable[IVec2],
) -> list[IVec2] | None:
    """Shortest orthogonal path from start to end over tiles.

    The returned path excludes start and includes end. The end tile may be a
    blocker. Returns None when no path exists or start equals end.
    """
    tile_set = set(tiles)
    blocker_set = set(blockers)

    queue: list[tuple[int, tuple[int, int], IVec2]] = [(0, (-start.x, -start.y), start)]
    visited: dict[IVec2, int] = {start: 0}
    came_from: dict[IVec2, IVec2] = {}

    while queue:
        cost, _, v = heapq.heappop(queue)
        if v == end:
            break
        new_cost = cost + 1
        for direction in ORTHO_DIRECTIONS:
            n = v + direction
            if n not in tile_set:
                continue
            if n in blocker_set and n != end:
                continue
            known = visited.get(n)
            if known is not None and known <= new_cost:
                continue
            visited[n] = new_cost
            heapq.heappush(queue, (new_cost, (-n.x, -n.y), n))
            came_from[n] = v

    path: list[IVec2] = []
    current = end
    while current in came_from:
        path.append(current)
        current = came_from[current]
        if current == start:
            path.reverse()
            return path
    return None


def world_position(position: IVec2, z: float) -> tuple[float, float, float]:
    """World coordinates of the centre of a grid tile at depth z."""
    return (TILE_SIZE * position.x, TILE_SIZE * position.y, z)