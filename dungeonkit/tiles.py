"""Choosing the tile sheet sprite from the shape of neighbouring tiles."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from dungeonkit.gamemap import TerrainData, TerrainType
from dungeonkit.geometry import IVec2

logger = logging.getLogger(__name__)

ROW = 21

X = 0  # tile must be absent or of another terrain
O = 1  # tile must be of the same terrain
U = 2  # either

DEFAULT_INDEX = 4 + ROW * 4

# Each pattern lists rows from top (y + 1) to bottom (y - 1), columns left to right.
PATTERNS: tuple[tuple[tuple[tuple[int, int, int], ...], int], ...] = (
    # row 0
    (((U, X, U), (X, O, O), (U, O, O)), 0),
    (((U, X, U), (O, O, O), (O, O, O)), 1),
    (((U, X, U), (O, O, X), (O, O, U)), 2),
    # row 1
    (((U, O, O), (X, O, O), (U, O, O)), ROW),
    (((O, O, O), (O, O, O), (O, O, O)), 1 + ROW),
    (((O, O, U), (O, O, X), (O, O, U)), 2 + ROW),
    # row 2
    (((U, O, O), (X, O, O), (U, X, U)), ROW * 2),
    (((O, O, O), (O, O, O), (U, X, U)), 1 + ROW * 2),
    (((O, O, U), (O, O, X), (U, X, U)), 2 + ROW * 2),
    # row 3
    (((X, X, U), (X, O, O), (U, O, X)), ROW * 3),
    (((U, X, U), (O, O, O), (U, X, U)), 1 + ROW * 3),
    (((U, X, X), (O, O, X), (X, O, U)), 2 + ROW * 3),
    # row 4
    (((U, O, U), (X, O, X), (U, O, U)), ROW * 4),
    (((U, X, U), (X, O, X), (U, X, U)), 1 + ROW * 4),
    # row 5
    (((U, O, X), (X, O, O), (X, X, U)), ROW * 5),
    (((X, O, U), (O, O, X), (U, X, X)), 2 + ROW * 5),
    # row 6
    (((X, X, X), (X, O, X), (U, O, U)), 1 + ROW * 6),
    # row 7
    (((X, X, U), (X, O, O), (X, X, U)), ROW * 7),
    (((X, O, X), (O, O, O), (X, O, X)), 1 + ROW * 7),
    (((U, X, X), (O, O, X), (U, X, X)), 2 + ROW * 7),
    # row 8
    (((U, O, U), (X, O, X), (X, X, X)), 1 + ROW * 8),
    # row 9
    (((X, X, X), (O, O, O), (X, O, X)), 1 + ROW * 9),
    # row 10
    (((X, O, U), (X, O, O), (X, O, X)), ROW * 10),
    (((U, O, X), (O, O, X), (X, O, X)), 2 + ROW * 10),
    # row 11
    (((X, O, X), (O, O, O), (X, X, X)), 1 + ROW * 11),
    # row 12
    (((O, O, O), (O, O, O), (X, O, X)), 1 + ROW * 12),
    # row 13
    (((O, O, X), (O, O, O), (O, O, X)), ROW * 13),
    (((X, O, O), (O, O, O), (X, O, O)), 2 + ROW * 13),
    # row 14
    (((X, O, X), (O, O, O), (O, O, O)), 1 + ROW * 14),
    # row 15
    (((O, O, O), (O, O, O), (O, O, X)), ROW * 15),
    (((O, O, O), (O, O, O), (X, O, O)), 1 + ROW * 15),
    # row 16
    (((O, O, X), (O, O, O), (O, O, O)), ROW * 16),
    (((X, O, O), (O, O, O), (O, O, O)), 1 + ROW * 16),
    # row 17
    (((U, O, O), (X, O, O), (U, O, X)), ROW * 17),
    (((O, O, U), (O, O, X), (X, O, U)), 1 + ROW * 17),
    # row 18
    (((U, O, X), (X, O, O), (U, O, O)), ROW * 18),
    (((X, O, U), (O, O, X), (O, O, U)), 1 + ROW * 18),
    # row 19
    (((U, X, X), (O, O, O), (O, O, X)), ROW * 19),
    (((X, X, U), (O, O, O), (X, O, O)), 1 + ROW * 19),
    # row 20
    (((O, O, X), (O, O, O), (U, X, X)), ROW * 20),
    (((X, O, O), (O, O, O), (X, X, U)), 1 + ROW * 20),
    # row 21
    (((X, O, X), (O, O, O), (X, O, O)), ROW * 21),
    (((X, O, X), (O, O, O), (O, O, X)), 1 + ROW * 21),
    # row 22
    (((X, O, O), (O, O, O), (X, O, X)), ROW * 22),
    (((O, O, X), (O, O, O), (X, O, X)), 1 + ROW * 22),
    # row 23
    (((X, O, O), (O, O, O), (O, O, X)), ROW * 23),
    (((O, O, X), (O, O, O), (X, O, O)), 1 + ROW * 23),
)


def _matches(
    pattern: tuple[tuple[int, int, int], ...],
    position: IVec2,
    terrain: TerrainData,
    tiles: Mapping[IVec2, TerrainData],
) -> bool:
    for dy, row in enumerate(pattern):
        for dx, expected in enumerate(row):
            neighbor = IVec2(position.x + dx - 1, position.y - dy + 1)
            same = tiles.get(neighbor) == terrain
            if (expected == O and not same) or (expected == X and same):
                return False
    return True


def find_sprite_index_tile(position: IVec2, tiles: Mapping[IVec2, TerrainData]) -> int:
    """Sprite index of the first neighbourhood pattern the tile matches.

    Raises KeyError when there is no tile at the position.
    """
    terrain = tiles[position]

    for pattern, index in PATTERNS:
        if _matches(pattern, position, terrain, tiles):
            return index

    logger.warning("Unable to find tile index for %r %r", position, terrain)
    if logger.isEnabledFor(logging.DEBUG):
        grid = "\n".join(
            " ".join(
                "O" if tiles.get(IVec2(position.x + dx, position.y + dy)) == terrain else "X"
                for dx in (-1, 0, 1)
            )
            for dy in (-1, 0, 1)
        )
        logger.debug("neighbourhood:\n%s", grid)
    return DEFAULT_INDEX


def tile_map_index(
    position: IVec2,
    terrain: TerrainData | TerrainType,
    tiles: Mapping[IVec2, TerrainData],
) -> int:
    """Index in the tile sheet, offset to the column block of the terrain type."""
    terrain_type = terrain.type if isinstance(terrain, TerrainData) else terrain
    base = find_sprite_index_tile(position, tiles)
    if terrain_type is TerrainType.GROUND:
        return base + 4 * 3
    if terrain_type is TerrainType.WALL:
        return base + 3
    return base + 8 * 3