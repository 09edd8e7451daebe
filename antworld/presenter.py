"""JSON view of the simulation for the HTTP API."""

from __future__ import annotations

import threading
from typing import Any, ClassVar

from antworld.mapgen import RandomMapFactory
from antworld.simulator import Simulator
from antworld.world import ObjectType, Tile

_TYPE_CODES: dict[ObjectType, int] = {
    ObjectType.ROCK: 0,
    ObjectType.COLONY: 1,
}
_OTHER_CODE = 2


def tile_repr(tile: Tile) -> dict[str, int]:
    """JSON form of a tile: type 0 for rock, 1 for colony, 2 otherwise."""
    return {"type": _TYPE_CODES.get(tile.object.object_type, _OTHER_CODE)}


class AntApiPresenter:
    """Exposes a simulator's map as a JSON-ready structure."""

    _instance: ClassVar[AntApiPresenter | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, simulator: Simulator | None = None) -> None:
        if simulator is None:
            simulator = Simulator()
            simulator.init_simulation(RandomMapFactory())
        self.simulator = simulator

    @classmethod
    def instance(cls) -> AntApiPresenter:
        """Return the shared presenter, creating it on first use."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def expose(self) -> dict[str, Any]:
        """The map as {"tiles": rows of tile representations}."""
        world = self.simulator.world_map
        if world is None:
            raise RuntimeError("simulation has not been initialised")
        rows = [
            [tile_repr(world.tile(x, y)) for y in range(world.width)]
            for x in range(world.height)
        ]
        return {"tiles": rows}