"""Turn-based driver that collects ant actions and applies them."""

from __future__ import annotations

from antworld.clock import Clock
from antworld.entities import AntAction
from antworld.mapgen import WorldMapFactory
from antworld.world import WorldMap


class SimulatorSequencer:
    """Queues actions for the current turn and runs them in order."""

    def __init__(self) -> None:
        self._batches: list[list[AntAction]] = [[]]

    @property
    def index(self) -> int:
        """Number of turns whose actions have been executed."""
        return len(self._batches) - 1

    @property
    def pending(self) -> list[AntAction]:
        """Actions queued for the next execution, in order."""
        return list(self._batches[-1])

    @property
    def history(self) -> list[list[AntAction]]:
        """Actions of every executed turn, oldest first."""
        return [list(batch) for batch in self._batches[:-1]]

    def add_action(self, action: AntAction) -> None:
        self._batches[-1].append(action)

    def execute_actions(self, world_map: WorldMap) -> None:
        """Run the queued actions on the map and start a new turn."""
        for action in self._batches[-1]:
            action.execute(world_map)
        self._batches.append([])


class Simulator:
    """Owns the world map and advances it one turn at a time."""

    def __init__(self, *, clock: Clock | None = None) -> None:
        self.clock = Clock.instance() if clock is None else clock
        self.world_map: WorldMap | None = None
        self.sequencer = SimulatorSequencer()

    def init_simulation(self, factory: WorldMapFactory) -> None:
        """Create the world map with the given factory."""
        self.world_map = factory.generate_map()

    def turn(self) -> None:
        """Gather every ant's actions, execute them, then tick the clock."""
        if self.world_map is None:
            raise RuntimeError("simulation has not been initialised")
        for ant in self.world_map.ants():
            for action in ant.actions():
                self.sequencer.add_action(action)
        self.sequencer.execute_actions(self.world_map)
        self.clock.tick()