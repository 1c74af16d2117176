import random

import pygame
from pytest import approx

from conftest import make_predator, make_prey
from flocksim.core.neighbors import NeighborThresholds, build_neighbor_index, nearest_threat
from flocksim.core.spatial_grid import SpatialGrid
from flocksim.core.world import World

THRESHOLDS = NeighborThresholds(min_separation=10.0, flock_radius=30.0, predator_sight_radius=50.0)


def test_close_and_flock_sets_respect_radii(world):
    flock = [
        make_prey(0, 50, 50),
        make_prey(1, 55, 50),   # close and in flock
        make_prey(2, 70, 50),   # flock only
        make_prey(3, 90, 50),   # out of range
    ]
    index = build_neighbor_index(flock, [], world, THRESHOLDS)

    record = index[0]
    assert [n.prey_id for n in record.close] == [1]
    assert [m.prey_id for m in record.flock] == [1, 2]
    assert record.threat is None


def test_close_delta_points_away_from_neighbor(world):
    flock = [make_prey(0, 50, 50), make_prey(1, 55, 50)]
    index = build_neighbor_index(flock, [], world, THRESHOLDS)

    away = index[0].close[0].away
    assert away.x == approx(-5)
    assert away.y == approx(0)
    assert index[1].close[0].away.x == approx(5)


def test_neighbors_across_the_edge(world):
    flock = [make_prey(0, 2, 50), make_prey(1, 97, 50)]
    index = build_neighbor_index(flock, [], world, THRESHOLDS)

    assert [n.prey_id for n in index[0].close] == [1]
    offset = index[0].flock[0].offset
    assert offset.x == approx(-5)


def test_radius_is_strict(world):
    flock = [make_prey(0, 50, 50), make_prey(1, 60, 50)]
    index = build_neighbor_index(flock, [], world, THRESHOLDS)

    assert index[0].close == ()
    assert len(index[0].flock) == 1


def test_flock_member_carries_pre_tick_heading(world):
    flock = [make_prey(0, 50, 50), make_prey(1, 60, 50, heading=1.25)]
    index = build_neighbor_index(flock, [], world, THRESHOLDS)
    assert index[0].flock[0].heading == approx(1.25)


def test_nearest_threat_within_sight(world):
    flock = [make_prey(0, 50, 50)]
    predators = [make_predator(0, 90, 50), make_predator(1, 70, 50)]
    index = build_neighbor_index(flock, predators, world, THRESHOLDS)

    threat = index[0].threat
    assert threat.predator_id == 1
    assert threat.away.x == approx(-20)


def test_threat_ties_go_to_lowest_id(world):
    predators = [make_predator(4, 60, 50), make_predator(2, 40, 50)]
    threat = nearest_threat(pygame.Vector2(50, 50), predators, world, 50.0)
    assert threat.predator_id == 2


def test_predator_out_of_sight_is_ignored(world):
    predators = [make_predator(0, 0, 0)]
    assert nearest_threat(pygame.Vector2(50, 50), predators, world, 50.0) is None


def test_index_independent_of_flock_order(world):
    rng = random.Random(11)
    flock = [make_prey(i, rng.uniform(0, 100), rng.uniform(0, 100), rng.uniform(-3, 3))
             for i in range(30)]
    predators = [make_predator(0, 10, 10)]

    forward = build_neighbor_index(flock, predators, world, THRESHOLDS)
    backward = build_neighbor_index(list(reversed(flock)), predators, world, THRESHOLDS)

    assert forward == backward


def test_spatial_grid_matches_full_scan():
    world = World(230, 170)
    rng = random.Random(5)
    flock = [make_prey(i, rng.uniform(0, 230), rng.uniform(0, 170)) for i in range(80)]
    predators = [make_predator(0, 5, 5), make_predator(1, 200, 150)]

    naive = build_neighbor_index(flock, predators, world, THRESHOLDS)
    grid = SpatialGrid(world, cell_size=25.0)
    gridded = build_neighbor_index(flock, predators, world, THRESHOLDS, grid)

    assert naive == gridded


def test_spatial_grid_query_wraps_edges():
    world = World(100, 100)
    grid = SpatialGrid(world, cell_size=20.0)
    flock = [make_prey(0, 1, 1), make_prey(1, 99, 99), make_prey(2, 50, 50)]
    grid.rebuild(flock)

    found = grid.get_neighbors(pygame.Vector2(1, 1), 5.0)
    assert [p.id for p in found] == [0, 1]


def test_empty_flock_gives_empty_index(world):
    assert build_neighbor_index([], [make_predator(0, 1, 1)], world, THRESHOLDS) == {}
