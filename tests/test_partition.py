# tests/test_partition.py
import pytest

from dungen.cells import FLOOR, STONE, WALL
from dungen.grid import Grid
from dungen.mapgen.partition import rooms_split, split_rect
from dungen.rng import RandomSource

def overlaps(a, b):
    return a.x < b.x + b.w and b.x < a.x + a.w and a.y < b.y + b.h and b.y < a.y + a.h

@pytest.mark.parametrize("w,h,seed", [(13, 13, 1), (20, 7, 2), (40, 25, 3), (80, 80, 4), (7, 30, 5)])
def test_rooms_stay_inside_and_exist(w, h, seed):
    g = Grid(w, h, seed=seed)
    rooms_split(g)
    assert g.rooms, "expected at least one room"
    for r in g.rooms:
        assert 0 <= r.x and 0 <= r.y and r.w > 0 and r.h > 0
        assert r.x + r.w <= w and r.y + r.h <= h
    for i, a in enumerate(g.rooms):
        for b in g.rooms[i + 1:]:
            assert not overlaps(a, b)

def test_small_grid_is_a_single_room():
    g = Grid(8, 8, seed=1)
    rooms_split(g)
    assert [r.as_tuple() for r in g.rooms] == [(0, 0, 7, 7)]

def test_rooms_are_walled_floor_with_stone_between():
    g = Grid(50, 40, seed=7)
    rooms_split(g)
    in_room = set()
    for r in g.rooms:
        assert all(g.get(x, y) == WALL for x, y in r.ring())
        assert all(g.get(x, y) == FLOOR for x, y in r.interior())
        in_room.update(r.cells())
    for y in range(g.height):
        for x in range(g.width):
            if (x, y) not in in_room:
                assert g.get(x, y) == STONE

def test_split_replaces_previous_rooms():
    g = Grid(60, 40, seed=11)
    rooms_split(g)
    rooms_split(g)
    # both partitions cover the whole grid, so leftovers would overlap
    for i, a in enumerate(g.rooms):
        for b in g.rooms[i + 1:]:
            assert not overlaps(a, b)

def test_leaves_tile_the_rectangle():
    rng = RandomSource.seeded(17)
    leaves = split_rect(rng, (0, 0, 70, 45), 6)
    assert sum(w * h for _, _, w, h in leaves) == 70 * 45
    for x, y, w, h in leaves:
        assert w >= 6 and h >= 6
        # a leaf stops once neither side can be cut
        assert w < 12 and h < 12

def test_same_seed_same_rooms():
    a, b = Grid(64, 48, seed=5), Grid(64, 48, seed=5)
    rooms_split(a)
    rooms_split(b)
    assert a.rooms == b.rooms and a.cells == b.cells
