"""World map factories: build a populated map ready for simulation."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from antworld.clock import Clock
from antworld.entities import AntQueen
from antworld.world import Colony, Food, Rock, Tile, Void, WorldMap, WorldObject


class WorldMapFactory(ABC):
    """Something that can produce a fresh world map."""

    @abstractmethod
    def generate_map(self) -> WorldMap:
        """Build and return a new world map."""


class RandomMapFactory(WorldMapFactory):
    """Fills every tile at random with rock, food or empty ground.

    A queen is placed on the centre tile of the generated map.
    """

    def __init__(
        self,
        *,
        height: int = WorldMap.BOARD_HEIGHT,
        width: int = WorldMap.BOARD_WIDTH,
        rng: random.Random | None = None,
        clock: Clock | None = None,
    ) -> None:
        if height < 1 or width < 1:
            raise ValueError("map dimensions must be positive")
        self.height = height
        self.width = width
        self.rng = random.Random() if rng is None else rng
        self.clock = clock

    def generate_map(self) -> WorldMap:
        tiles = [
            [Tile(x, y, self.generate_object(x, y)) for y in range(self.width)]
            for x in range(self.height)
        ]
        world = WorldMap(tiles)
        queen = AntQueen(clock=self.clock, rng=self.rng)
        queen.x, queen.y = self.height // 2, self.width // 2
        world.tile(queen.x, queen.y).add_ant(queen)
        return world

    def generate_object(self, x: int, y: int) -> WorldObject:
        """Pick the object for tile (x, y): 30% rock, 2% food, the rest empty.

        The colony is reserved for the position (height, width).
        """
        if x == self.height and y == self.width:
            return Colony()
        roll = self.rng.randint(0, 100)
        if roll < 30:
            return Rock()
        if roll < 32:
            return Food()
        return Void()