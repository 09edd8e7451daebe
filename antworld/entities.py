"""Ants, their life stages, and the actions they take on the world map."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from antworld.clock import Clock, TimedElement
from antworld.world import Direction, Pheromone, WorldMap

_CHAR_MAX = 127


class LifeStage(Enum):
    LARVA = 0
    MINOR = 1
    ADULT = 2
    DEAD = 3


class AntType(Enum):
    QUEEN = 0
    WORKER = 1
    SOLDIER = 2
    SCOUT = 3


class AntState(ABC):
    """A life stage of one ant; may move the ant on to the next stage."""

    stage: ClassVar[LifeStage]

    def __init__(self, ant: Ant) -> None:
        self.ant = ant

    @abstractmethod
    def update(self) -> None:
        """React to the ant having aged by one tick."""


class LarvaState(AntState):
    stage = LifeStage.LARVA

    def update(self) -> None:
        pass


class MinorState(AntState):
    """Young ant; becomes adult once it is two ticks old."""

    stage = LifeStage.MINOR

    def update(self) -> None:
        if self.ant.age >= 2:
            self.ant.change_state(AdultState(self.ant))


class AdultState(AntState):
    """Grown ant; dies when it reaches exactly one hundred ticks."""

    stage = LifeStage.ADULT

    def update(self) -> None:
        if self.ant.age == 100:
            self.ant.change_state(DeadState(self.ant))


class DeadState(AntState):
    stage = LifeStage.DEAD

    def update(self) -> None:
        pass


class Ant(TimedElement):
    """An ant on the map; subscribes itself to the clock when created."""

    ant_type: ClassVar[AntType]

    def __init__(self, *, clock: Clock | None = None, rng: random.Random | None = None) -> None:
        self.clock = Clock.instance() if clock is None else clock
        self.rng = random.Random() if rng is None else rng
        self.genetic_marker = 0
        self.hp = 0
        self.ep = 0
        self.age = 0
        self.x = 0
        self.y = 0
        self.pheromone_map: dict[Direction, list[Pheromone]] = {}
        self.move_list: list[Move] = []
        self.state: AntState = LarvaState(self)
        self.clock.subscribe(self)

    @property
    def stage(self) -> LifeStage:
        return self.state.stage

    def change_state(self, state: AntState) -> None:
        self.state = state

    @abstractmethod
    def actions(self) -> list[AntAction]:
        """The actions this ant wants to take this turn."""

    @abstractmethod
    def update(self) -> None:
        """Age the ant by one tick."""


class AntQueen(Ant):
    """The colony's queen: lays a new ant on most turns."""

    ant_type = AntType.QUEEN
    MAX_HP: ClassVar[int] = 100
    MAX_EP: ClassVar[int] = 100

    def __init__(self, *, clock: Clock | None = None, rng: random.Random | None = None) -> None:
        super().__init__(clock=clock, rng=rng)
        self.genetic_marker = self.generate_genetic_marker()
        self.hp = self.MAX_HP
        self.ep = self.MAX_EP
        self.turn_counter = 0
        self.state = AdultState(self)

    @staticmethod
    def generate_genetic_marker() -> int:
        """A marker in [0, 127) seeded from the current second."""
        return random.Random(int(time.time())).getrandbits(32) % _CHAR_MAX

    def actions(self) -> list[AntAction]:
        self.turn_counter += 1
        if self.turn_counter % 12 == 0:
            return []
        if self.age == 0:
            return [Procreate(self, AntType.SCOUT)]
        roll = self.rng.randint(0, 100)
        if roll < 80:
            ant_type = AntType.WORKER
        elif roll < 95:
            ant_type = AntType.SCOUT
        else:
            ant_type = AntType.SOLDIER
        return [Procreate(self, ant_type)]

    def update(self) -> None:
        self.age += 1
        self.state.update()


class _Forager(Ant):
    """An ant that wanders at random once it is no longer minor."""

    def __init__(self, *, clock: Clock | None = None, rng: random.Random | None = None) -> None:
        super().__init__(clock=clock, rng=rng)
        self.state = MinorState(self)

    def _random_direction(self) -> Direction:
        if not self.pheromone_map:
            raise RuntimeError("no pheromone map")
        return self.rng.choice(list(self.pheromone_map))

    def _wander(self) -> list[AntAction]:
        if self.stage is LifeStage.MINOR:
            return []
        try:
            move = Move(self, self._random_direction())
        except RuntimeError:
            return []
        self.move_list.append(move)
        return [move]

    def _age_and_tire(self) -> None:
        self.age += 1
        self.ep -= 1


class AntWorker(_Forager):
    """Worker; wanders over discovered tiles."""

    ant_type = AntType.WORKER

    def choose_random_direction(self) -> Direction:
        """Pick one of the enterable neighbouring directions uniformly."""
        return self._random_direction()

    def actions(self) -> list[AntAction]:
        return self._wander()

    def update(self) -> None:
        self._age_and_tire()


class AntSoldier(_Forager):
    """Soldier; wanders over discovered tiles."""

    ant_type = AntType.SOLDIER

    def choose_random_direction(self) -> Direction:
        """Pick one of the enterable neighbouring directions uniformly."""
        return self._random_direction()

    def actions(self) -> list[AntAction]:
        return self._wander()

    def update(self) -> None:
        self._age_and_tire()


class AntScout(_Forager):
    """Explorer; the only kind of ant that may enter undiscovered tiles."""

    ant_type = AntType.SCOUT

    def choose_random_direction(self) -> Direction:
        """Pick one of the enterable neighbouring directions uniformly."""
        return self._random_direction()

    def actions(self) -> list[AntAction]:
        return self._wander()

    def update(self) -> None:
        self._age_and_tire()
        self.state.update()


class AntAction(ABC):
    """Something an ant does to the world during a turn."""

    @abstractmethod
    def execute(self, world_map: WorldMap) -> None:
        """Apply the action to the map."""


def _needs_discovered(ant: Ant) -> bool:
    return ant.ant_type is not AntType.SCOUT


@dataclass(eq=False)
class Move(AntAction):
    """Step an ant one tile in a direction."""

    ant: Ant
    direction: Direction

    def execute(self, world_map: WorldMap) -> None:
        dx, dy = self.direction.offset()
        new_x, new_y = self.ant.x + dx, self.ant.y + dy
        old_tile = world_map.tile(self.ant.x, self.ant.y)
        new_tile = world_map.tile(new_x, new_y)
        old_tile.remove_ant(self.ant)
        self.ant.x, self.ant.y = new_x, new_y
        self.ant.pheromone_map = world_map.pheromone_map(
            new_tile.x, new_tile.y, _needs_discovered(self.ant)
        )
        new_tile.add_ant(self.ant)

    def opposite(self) -> Move:
        """The move that would undo this one."""
        return Move(self.ant, self.direction.opposite())


_BREEDS: dict[AntType, type[Ant]] = {
    AntType.WORKER: AntWorker,
    AntType.SCOUT: AntScout,
    AntType.SOLDIER: AntSoldier,
}


@dataclass(eq=False)
class Procreate(AntAction):
    """The queen lays a new ant of a given type on her own tile."""

    queen: AntQueen
    ant_type: AntType

    def execute(self, world_map: WorldMap) -> None:
        try:
            breed = _BREEDS[self.ant_type]
        except KeyError:
            raise ValueError("cannot procreate a queen") from None
        ant = breed(clock=self.queen.clock)
        ant.x, ant.y = self.queen.x, self.queen.y
        ant.pheromone_map = world_map.pheromone_map(ant.x, ant.y, _needs_discovered(ant))
        world_map.tile(self.queen.x, self.queen.y).add_ant(ant)