"""Terrain types and the tile map of a dungeon floor."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum, auto

from dungeonkit.geometry import IVec2


class EnvironmentType(Enum):
    WATER = auto()
    LAVA = auto()


class TerrainType(Enum):
    GROUND = auto()
    WALL = auto()
    ENVIRONMENT = auto()


@dataclass(frozen=True)
class TerrainData:
    """Terrain of one tile; environment terrain names its environment."""

    type: TerrainType
    environment: EnvironmentType | None = None

    def __post_init__(self) -> None:
        if self.type is TerrainType.ENVIRONMENT and self.environment is None:
            raise ValueError("environment terrain needs an environment type")
        if self.type is not TerrainType.ENVIRONMENT and self.environment is not None:
            raise ValueError(f"{self.type.name} terrain takes no environment type")


@dataclass
class GameMap:
    """Tiles of the floor and the entity drawn for each of them."""

    tiles: dict[IVec2, TerrainData] = field(default_factory=dict)
    tiles_lookup: dict[IVec2, Hashable] = field(default_factory=dict)

    @classmethod
    def default_map(cls) -> GameMap:
        """The fixed test floor: a ground area bordered on the left by walls."""
        tiles: dict[IVec2, TerrainData] = {}
        ground = TerrainData(TerrainType.GROUND)
        wall = TerrainData(TerrainType.WALL)

        for x in range(4, 20):
            for y in range(1, 20):
                tiles[IVec2(x, y)] = ground

        for x in range(0, 11):
            for y in range(0, 22):
                tiles.setdefault(IVec2(x, y), wall)

        return cls(tiles=tiles)

    def neighbors(self, position: IVec2) -> dict[IVec2, TerrainData]:
        """Existing tiles among the eight surrounding a position."""
        result: dict[IVec2, TerrainData] = {}
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                neighbor = IVec2(position.x + dx, position.y + dy)
                terrain = self.tiles.get(neighbor)
                if terrain is not None:
                    result[neighbor] = terrain
        return result

    def associate_entity_to_tile(self, entity: Hashable, position: IVec2) -> None:
        """Remember which entity renders the tile at a position."""
        self.tiles_lookup[position] = entity