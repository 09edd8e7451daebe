"""The world grid: directions, tiles, objects on tiles and pheromones."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, ClassVar, Sequence

from antworld.clock import TimedElement

if TYPE_CHECKING:
    from antworld.entities import Ant


class Direction(IntEnum):
    """The eight compass directions, clockwise from north."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7

    def opposite(self) -> Direction:
        """The direction pointing the other way."""
        return Direction((self.value + 4) % 8)

    def offset(self) -> tuple[int, int]:
        """The (row, column) step taken when moving this way."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.NORTH_EAST: (-1, 1),
    Direction.EAST: (0, 1),
    Direction.SOUTH_EAST: (1, 1),
    Direction.SOUTH: (1, 0),
    Direction.SOUTH_WEST: (1, -1),
    Direction.WEST: (0, -1),
    Direction.NORTH_WEST: (-1, -1),
}

_BY_OFFSET: dict[tuple[int, int], Direction] = {off: d for d, off in _OFFSETS.items()}


def direction_with_offset(dx: int, dy: int) -> Direction:
    """Return the direction of a one-step (row, column) offset."""
    try:
        return _BY_OFFSET[(dx, dy)]
    except KeyError:
        raise ValueError(f"invalid direction offset: ({dx}, {dy})") from None


class ObjectType(Enum):
    ROCK = 0
    FOOD = 1
    VOID = 2
    COLONY = 3


@dataclass(frozen=True)
class WorldObject:
    """What occupies a tile; decides how many ants the tile can hold."""

    object_type: ClassVar[ObjectType]
    max_ants: ClassVar[int]


@dataclass(frozen=True)
class Rock(WorldObject):
    object_type: ClassVar[ObjectType] = ObjectType.ROCK
    max_ants: ClassVar[int] = 0


@dataclass(frozen=True)
class Food(WorldObject):
    object_type: ClassVar[ObjectType] = ObjectType.FOOD
    max_ants: ClassVar[int] = 12


@dataclass(frozen=True)
class Void(WorldObject):
    object_type: ClassVar[ObjectType] = ObjectType.VOID
    max_ants: ClassVar[int] = 12


@dataclass(frozen=True)
class Colony(WorldObject):
    object_type: ClassVar[ObjectType] = ObjectType.COLONY
    max_ants: ClassVar[int] = 100


@dataclass(eq=False)
class Pheromone(TimedElement):
    """A scent trace that fades by one unit each tick."""

    quantity: int
    genetic_marker: int

    def update(self) -> None:
        self.quantity -= 1


@dataclass(eq=False)
class Tile:
    """One cell of the world grid."""

    x: int
    y: int
    object: WorldObject
    ants: list[Ant] = field(default_factory=list)
    pheromones: list[Pheromone] = field(default_factory=list)
    discovered: bool = False

    def add_ant(self, ant: Ant) -> None:
        """Place an ant here; the tile becomes discovered."""
        self.discovered = True
        self.ants.append(ant)

    def remove_ant(self, ant: Ant) -> None:
        """Remove every occurrence of the ant; absent ants are ignored."""
        self.ants[:] = [a for a in self.ants if a is not ant]

    def add_pheromone(self, pheromone: Pheromone) -> None:
        self.pheromones.append(pheromone)

    def remove_pheromone(self, pheromone: Pheromone) -> None:
        """Remove every occurrence of the pheromone; absent ones are ignored."""
        self.pheromones[:] = [p for p in self.pheromones if p is not pheromone]


class WorldMap:
    """A rectangular grid of tiles indexed by (row, column)."""

    BOARD_WIDTH: ClassVar[int] = 211
    BOARD_HEIGHT: ClassVar[int] = 201

    def __init__(self, tiles: Sequence[Sequence[Tile]]) -> None:
        rows = [list(row) for row in tiles]
        if not rows or not rows[0]:
            raise ValueError("a world map needs at least one tile")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows of a world map must have the same length")
        self._tiles = rows

    @property
    def height(self) -> int:
        return len(self._tiles)

    @property
    def width(self) -> int:
        return len(self._tiles[0])

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.height and 0 <= y < self.width

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at row x, column y."""
        if not self._in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self._tiles[x][y]

    def ants(self) -> list[Ant]:
        """Every ant on the map, row by row."""
        return [ant for row in self._tiles for tile in row for ant in tile.ants]

    def pheromone_map(self, x: int, y: int, need_discovered: bool) -> dict[Direction, list[Pheromone]]:
        """Pheromones of each enterable neighbour of (x, y), keyed by direction.

        A neighbour is left out if it is off the map, is full for its object,
        or is undiscovered while discovery is required. Keys are in direction order.
        """
        result: dict[Direction, list[Pheromone]] = {}
        for direction in Direction:
            dx, dy = direction.offset()
            nx, ny = x + dx, y + dy
            if not self._in_bounds(nx, ny):
                continue
            neighbour = self._tiles[nx][ny]
            if need_discovered and not neighbour.discovered:
                continue
            if len(neighbour.ants) >= neighbour.object.max_ants:
                continue
            result[direction] = list(neighbour.pheromones)
        return result