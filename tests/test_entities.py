import random

import pytest

from antworld.clock import Clock
from antworld.entities import (
    AdultState,
    AntQueen,
    AntScout,
    AntSoldier,
    AntType,
    AntWorker,
    DeadState,
    LarvaState,
    LifeStage,
    MinorState,
    Move,
    Procreate,
)
from antworld.world import Direction, Pheromone, Tile, Void, WorldMap


def make_map(height=3, width=3):
    return WorldMap([[Tile(x, y, Void()) for y in range(width)] for x in range(height)])


class FixedRng(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def randint(self, a, b):
        return self.value


def adult(ant):
    ant.change_state(AdultState(ant))
    return ant


def test_minor_becomes_adult_at_age_two():
    clock = Clock()
    scout = AntScout(clock=clock)
    assert scout.stage is LifeStage.MINOR
    clock.tick()
    assert scout.stage is LifeStage.MINOR
    clock.tick()
    assert scout.stage is LifeStage.ADULT
    assert scout.age == 2
    assert scout.ep == -2


def test_worker_update_does_not_advance_stage():
    clock = Clock()
    worker = AntWorker(clock=clock)
    for _ in range(5):
        clock.tick()
    assert worker.age == 5
    assert worker.stage is LifeStage.MINOR


def test_soldier_update_ages_and_tires():
    soldier = AntSoldier(clock=Clock())
    soldier.update()
    soldier.update()
    assert (soldier.age, soldier.ep) == (2, -2)
    assert soldier.stage is LifeStage.MINOR


def test_queen_dies_at_age_hundred():
    clock = Clock()
    queen = AntQueen(clock=clock)
    for _ in range(99):
        clock.tick()
    assert queen.stage is LifeStage.ADULT
    clock.tick()
    assert queen.stage is LifeStage.DEAD


def test_adult_state_only_dies_at_exact_age():
    worker = AntWorker(clock=Clock())
    worker.age = 101
    state = AdultState(worker)
    worker.change_state(state)
    state.update()
    assert worker.stage is LifeStage.ADULT


def test_larva_and_dead_states_are_stable():
    worker = AntWorker(clock=Clock())
    worker.age = 100
    for state_cls, stage in ((LarvaState, LifeStage.LARVA), (DeadState, LifeStage.DEAD)):
        state = state_cls(worker)
        worker.change_state(state)
        state.update()
        assert worker.state is state
        assert worker.stage is stage


def test_minor_state_update_switches_once_old_enough():
    worker = AntWorker(clock=Clock())
    worker.age = 3
    worker.change_state(MinorState(worker))
    worker.state.update()
    assert worker.stage == LifeStage.ADULT


def test_ants_subscribe_to_their_clock():
    clock = Clock()
    queen = AntQueen(clock=clock)
    worker = AntWorker(clock=clock)
    assert clock.elements == [queen, worker]


def test_queen_initial_values():
    queen = AntQueen(clock=Clock())
    assert queen.hp == AntQueen.MAX_HP
    assert queen.ep == AntQueen.MAX_EP
    assert queen.ant_type is AntType.QUEEN
    assert 0 <= queen.genetic_marker < 127


def test_generate_genetic_marker_in_range():
    assert all(0 <= AntQueen.generate_genetic_marker() < 127 for _ in range(10))


def test_queen_first_action_lays_scout():
    queen = AntQueen(clock=Clock())
    [action] = queen.actions()
    assert isinstance(action, Procreate)
    assert action.ant_type is AntType.SCOUT
    assert action.queen is queen


def test_queen_rests_every_twelfth_turn():
    queen = AntQueen(clock=Clock())
    results = [queen.actions() for _ in range(24)]
    empty = [i for i, r in enumerate(results, start=1) if not r]
    assert empty == [12, 24]


@pytest.mark.parametrize(
    "roll, expected",
    [(0, AntType.WORKER), (79, AntType.WORKER), (80, AntType.SCOUT),
     (94, AntType.SCOUT), (95, AntType.SOLDIER), (100, AntType.SOLDIER)],
)
def test_queen_caste_by_roll(roll, expected):
    queen = AntQueen(clock=Clock(), rng=FixedRng(roll))
    queen.age = 1
    [action] = queen.actions()
    assert action.ant_type is expected


@pytest.mark.parametrize("cls", [AntWorker, AntScout, AntSoldier])
def test_choose_direction_without_map_raises(cls):
    ant = cls(clock=Clock())
    with pytest.raises(RuntimeError):
        ant.choose_random_direction()


@pytest.mark.parametrize("cls", [AntWorker, AntScout, AntSoldier])
def test_choose_direction_picks_a_key(cls):
    ant = cls(clock=Clock(), rng=random.Random(7))
    ant.pheromone_map = {Direction.EAST: [], Direction.SOUTH: []}
    picks = {ant.choose_random_direction() for _ in range(50)}
    assert picks <= {Direction.EAST, Direction.SOUTH}
    assert len(picks) >= 1


@pytest.mark.parametrize("cls", [AntWorker, AntScout, AntSoldier])
def test_minor_forager_has_no_actions(cls):
    ant = cls(clock=Clock())
    ant.pheromone_map = {Direction.NORTH: []}
    assert ant.actions() == []
    assert ant.move_list == []


@pytest.mark.parametrize("cls", [AntWorker, AntScout, AntSoldier])
def test_adult_forager_without_map_has_no_actions(cls):
    ant = adult(cls(clock=Clock()))
    assert ant.actions() == []


@pytest.mark.parametrize("cls", [AntWorker, AntScout, AntSoldier])
def test_adult_forager_moves(cls):
    ant = adult(cls(clock=Clock()))
    ant.pheromone_map = {Direction.WEST: []}
    [action] = ant.actions()
    assert isinstance(action, Move)
    assert action.direction is Direction.WEST
    assert action.ant is ant
    assert ant.move_list == [action]


def test_move_execute_relocates_ant():
    world = make_map()
    worker = AntWorker(clock=Clock())
    worker.x, worker.y = 1, 1
    world.tile(1, 1).add_ant(worker)
    Move(worker, Direction.EAST).execute(world)
    assert (worker.x, worker.y) == (1, 2)
    assert world.tile(1, 1).ants == []
    assert world.tile(1, 2).ants == [worker]
    assert world.tile(1, 2).discovered
    assert list(worker.pheromone_map) == [Direction.WEST]


def test_move_scout_ignores_discovery():
    world = make_map()
    scout = AntScout(clock=Clock())
    scout.x, scout.y = 1, 1
    world.tile(1, 1).add_ant(scout)
    marker = Pheromone(5, 1)
    world.tile(1, 1).add_pheromone(marker)
    Move(scout, Direction.SOUTH).execute(world)
    assert (scout.x, scout.y) == (2, 1)
    assert scout.pheromone_map == world.pheromone_map(2, 1, False)
    assert scout.pheromone_map[Direction.NORTH] == [marker]


def test_move_then_opposite_returns_home():
    world = make_map()
    worker = AntWorker(clock=Clock())
    worker.x, worker.y = 1, 1
    world.tile(1, 1).add_ant(worker)
    move = Move(worker, Direction.NORTH_EAST)
    move.execute(world)
    back = move.opposite()
    assert back.direction is Direction.SOUTH_WEST
    assert back.ant is worker
    back.execute(world)
    assert (worker.x, worker.y) == (1, 1)
    assert world.tile(1, 1).ants == [worker]
    assert world.ants() == [worker]


def test_move_off_map_raises():
    world = make_map()
    worker = AntWorker(clock=Clock())
    world.tile(0, 0).add_ant(worker)
    with pytest.raises(IndexError):
        Move(worker, Direction.NORTH).execute(world)


def test_procreate_queen_raises():
    world = make_map()
    queen = AntQueen(clock=Clock())
    with pytest.raises(ValueError):
        Procreate(queen, AntType.QUEEN).execute(world)


@pytest.mark.parametrize(
    "ant_type, cls",
    [(AntType.WORKER, AntWorker), (AntType.SCOUT, AntScout), (AntType.SOLDIER, AntSoldier)],
)
def test_procreate_places_new_ant_on_queen_tile(ant_type, cls):
    world = make_map()
    clock = Clock()
    queen = AntQueen(clock=clock)
    queen.x, queen.y = 1, 1
    world.tile(1, 1).add_ant(queen)
    Procreate(queen, ant_type).execute(world)
    tile_ants = world.tile(1, 1).ants
    assert tile_ants[0] is queen
    [child] = tile_ants[1:]
    assert isinstance(child, cls)
    assert child.ant_type is ant_type
    assert (child.x, child.y) == (1, 1)
    assert child.stage is LifeStage.MINOR
    assert clock.elements == [queen, child]


def test_procreate_pheromone_map_depends_on_type():
    world = make_map()
    queen = AntQueen(clock=Clock())
    queen.x, queen.y = 1, 1
    world.tile(1, 1).add_ant(queen)
    Procreate(queen, AntType.SCOUT).execute(world)
    Procreate(queen, AntType.WORKER).execute(world)
    scout, worker = world.tile(1, 1).ants[1:]
    assert set(scout.pheromone_map) == set(Direction)
    assert worker.pheromone_map == {}