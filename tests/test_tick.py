import math
import random

import pytest
from pytest import approx

from conftest import make_predator, make_prey, quiet_config
from flocksim.core.config import SimulationConfig
from flocksim.core.geometry import signed_angle_diff
from flocksim.core.integrator import ManualCommand
from flocksim.core.world import World
from flocksim.simulation.population import create_population
from flocksim.simulation.tick import advance_simulation, controlled_prey, render_state


def _random_world(seed, prey=40, predators=3, **overrides):
    config = SimulationConfig(screenWidth=300, screenHeight=200, preyCount=prey,
                              predatorCount=predators, seed=seed, **overrides)
    world = World.from_config(config)
    flock, hunters = create_population(config, world, random.Random(seed))
    return config, world, flock, hunters


def _trajectory(flock, predators):
    return (
        [(p.id, round(p.position.x, 9), round(p.position.y, 9), round(p.heading, 9)) for p in flock],
        [(p.id, round(p.position.x, 9), round(p.position.y, 9), round(p.heading, 9)) for p in predators],
    )


def test_invariants_hold_every_tick():
    config, world, flock, predators = _random_world(seed=21)

    for _ in range(200):
        before = {id(c): c.heading for c in flock + predators}
        advance_simulation(flock, predators, config, world)
        for creature in flock + predators:
            assert creature.velocity.length() == approx(creature.speed)
            assert 0 <= creature.position.x < world.width
            assert 0 <= creature.position.y < world.height
            assert -math.pi < creature.heading <= math.pi
            turned = signed_angle_diff(before[id(creature)], creature.heading)
            assert abs(turned) <= creature.max_turn_angle + 1e-9


def test_deterministic_trajectories():
    config_a, world_a, flock_a, predators_a = _random_world(seed=1234)
    config_b, world_b, flock_b, predators_b = _random_world(seed=1234)

    for _ in range(150):
        advance_simulation(flock_a, predators_a, config_a, world_a)
        advance_simulation(flock_b, predators_b, config_b, world_b)

    assert _trajectory(flock_a, predators_a) == _trajectory(flock_b, predators_b)


def test_result_independent_of_list_order():
    config, world, flock_a, predators_a = _random_world(seed=8)
    _, _, flock_b, predators_b = _random_world(seed=8)
    flock_b.reverse()
    predators_b.reverse()

    for _ in range(60):
        advance_simulation(flock_a, predators_a, config, world)
        advance_simulation(flock_b, predators_b, config, world)

    traj_a = _trajectory(flock_a, predators_a)
    traj_b = _trajectory(sorted(flock_b, key=lambda p: p.id), sorted(predators_b, key=lambda p: p.id))
    assert traj_a == traj_b


def test_spatial_grid_does_not_change_outcome():
    config, world, flock_a, predators_a = _random_world(seed=17, prey=60)
    grid_config, _, flock_b, predators_b = _random_world(seed=17, prey=60, useSpatialGrid=True,
                                                         gridCellSize=30.0)

    for _ in range(60):
        advance_simulation(flock_a, predators_a, config, world)
        advance_simulation(flock_b, predators_b, grid_config, world)

    assert _trajectory(flock_a, predators_a) == _trajectory(flock_b, predators_b)


def test_separation_pushes_adjacent_prey_apart(world):
    config = quiet_config(separationWeight=1.0)
    a = make_prey(0, 50, 50, heading=math.pi / 2)
    b = make_prey(1, 55, 50, heading=math.pi / 2)
    flock = [a, b]
    before = world.distance(a.position, b.position)

    advance_simulation(flock, [], config, world)

    assert world.distance(a.position, b.position) > before


def test_prey_turns_away_from_predator_ahead(world):
    config = quiet_config(fleeWeight=1.0)
    prey = make_prey(0, 50, 50, heading=0.0, max_turn=0.3)
    predator = make_predator(0, 70, 55, speed=0.0, max_turn=0.0)

    flee_angle = math.atan2(50 - 55, 50 - 70)
    gap_before = abs(signed_angle_diff(prey.heading, flee_angle))

    advance_simulation([prey], [predator], config, world)

    assert prey.heading != approx(0.0)
    assert abs(signed_angle_diff(prey.heading, flee_angle)) < gap_before
    assert prey.heading == approx(-0.3)


def test_capture_removes_prey_for_good(world):
    config = quiet_config(killDistance=6.0)
    predator = make_predator(0, 50, 50, heading=0.0, speed=2.5)
    victim = make_prey(5, 54, 50, heading=0.0, speed=2.0)
    other = make_prey(6, 10, 10, heading=0.0, speed=2.0)
    flock = [victim, other]

    result = advance_simulation(flock, [predator], config, world)

    assert result.captured_ids == (5,)
    assert result.targets == {0: 5}
    assert [p.id for p in flock] == [6]

    for _ in range(20):
        advance_simulation(flock, [predator], config, world)
        assert 5 not in {p.id for p in flock}


def test_captured_prey_still_steers_this_tick(world):
    # A prey caught this tick is still part of this tick's neighbor snapshot.
    config = quiet_config(separationWeight=1.0, killDistance=6.0)
    predator = make_predator(0, 50, 50, heading=0.0)
    victim = make_prey(0, 54, 50, heading=math.pi / 2)
    neighbor = make_prey(1, 60, 50, heading=math.pi / 2)

    result = advance_simulation([victim, neighbor], [predator], config, world)

    assert result.captured_ids == (0,)
    assert neighbor.heading == approx(math.pi / 2 - 0.5)


def test_two_predators_same_prey_removed_once(world):
    config = quiet_config(killDistance=6.0)
    predators = [make_predator(0, 50, 50, heading=0.0), make_predator(1, 58, 50, heading=math.pi)]
    flock = [make_prey(0, 54, 50, heading=math.pi / 2), make_prey(1, 10, 90)]

    result = advance_simulation(flock, predators, config, world)

    assert result.captured_ids == (0,)
    assert [p.id for p in flock] == [1]


def test_predators_hold_heading_with_empty_flock(world):
    predator = make_predator(0, 50, 50, heading=1.0)
    result = advance_simulation([], [predator], quiet_config(), world)

    assert predator.heading == approx(1.0)
    assert result.targets == {0: None}


def test_thousand_empty_ticks():
    config = SimulationConfig(preyCount=0, predatorCount=0)
    world = World.from_config(config)
    flock, predators = [], []
    for _ in range(1000):
        result = advance_simulation(flock, predators, config, world)
    assert result.captured_ids == ()
    assert flock == [] and predators == []


def test_manual_command_overrides_steering(world):
    config = quiet_config(separationWeight=5.0, preyMaxTurnAngle=0.2, manualTurnIncrement=0.2)
    manual = make_prey(0, 50, 50, heading=0.0, max_turn=0.2, manual=True)
    nearby = make_prey(1, 50, 55, heading=0.0, max_turn=0.2)

    advance_simulation([manual, nearby], [], config, world, ManualCommand.TURN_RIGHT)

    assert manual.heading == approx(0.2)


def test_manual_command_respects_turn_limit(world):
    config = quiet_config(manualTurnIncrement=1.0)
    manual = make_prey(0, 50, 50, heading=0.0, max_turn=0.1, manual=True)

    advance_simulation([manual], [], config, world, ManualCommand.TURN_LEFT)

    assert manual.heading == approx(-0.1)


def test_no_command_means_automatic_steering(world):
    config = quiet_config(separationWeight=1.0)
    manual = make_prey(0, 50, 50, heading=math.pi / 2, manual=True)
    other = make_prey(1, 55, 50, heading=math.pi / 2)

    advance_simulation([manual, other], [], config, world, ManualCommand.NONE)

    assert manual.heading > math.pi / 2


def test_command_ignored_without_manual_prey(world):
    prey = make_prey(0, 50, 50, heading=0.3)
    advance_simulation([prey], [], quiet_config(), world, ManualCommand.TURN_LEFT)
    assert prey.heading == approx(0.3)


def test_controlled_prey_lowest_id_wins():
    flock = [make_prey(4, 1, 1, manual=True), make_prey(2, 2, 2, manual=True)]
    assert controlled_prey(flock).id == 2
    assert controlled_prey([make_prey(0, 1, 1)]) is None


def test_out_of_range_config_is_clamped(world):
    config = quiet_config(separationWeight=1000.0, killDistance=-5.0)
    flock = [make_prey(0, 50, 50), make_prey(1, 52, 50)]
    predators = [make_predator(0, 51, 50)]

    result = advance_simulation(flock, predators, config, world)

    assert result.captured_ids == ()
    assert config.separationWeight == 1000.0


def test_render_state_is_read_only_snapshot(world):
    flock = [make_prey(0, 10, 20, heading=0.5, manual=True)]
    predators = [make_predator(3, 30, 40, heading=-1.0)]

    state = render_state(flock, predators)

    assert state.prey[0].x == approx(10)
    assert state.prey[0].manual is True
    assert state.predators[0].id == 3
    assert state.predators[0].kind == "predator"
    with pytest.raises(AttributeError):
        state.prey[0].x = 99
