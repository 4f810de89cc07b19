# tests/test_automata.py
from dataclasses import replace

import pytest

from dungen.cells import FLOOR, STONE, WALL
from dungen.config import DEFAULTS
from dungen.grid import Grid
from dungen.mapgen.automata import blur, forest, life, life_like, smooth
from dungen.mapgen.transforms import fill, noise

def floors(grid):
    return {(x, y) for y in range(grid.height) for x in range(grid.width) if grid.get(x, y) == FLOOR}

def test_life_on_stone_stays_stone():
    g = Grid(12, 9, seed=1)
    life(g)
    assert set(g.cells) == {STONE}
    assert g.generations == 1

def test_life_full_5x5_keeps_only_corners():
    # corners see 3 live neighbours, edges 5, the interior 8
    g = Grid(5, 5, seed=1)
    fill(g, FLOOR)
    life(g)
    assert floors(g) == {(0, 0), (4, 0), (0, 4), (4, 4)}
    assert set(g.cells) == {STONE, FLOOR}

def test_life_blinker_oscillates():
    g = Grid(5, 5, seed=1)
    for x in (1, 2, 3):
        g.set(x, 2, FLOOR)
    life(g)
    assert floors(g) == {(2, 1), (2, 2), (2, 3)}
    life(g)
    assert floors(g) == {(1, 2), (2, 2), (3, 2)}
    assert g.generations == 2

def test_life_turns_dead_walls_to_stone():
    g = Grid(6, 6, seed=1)
    fill(g, WALL)
    life(g, turns=2)
    assert set(g.cells) == {STONE}

def test_life_like_custom_rule():
    # B1/S: every lone live cell seeds its whole neighbourhood and dies
    g = Grid(5, 5, seed=1)
    g.set(2, 2, FLOOR)
    life_like(g, birth={1}, survive=set())
    assert floors(g) == {(x, y) for x in (1, 2, 3) for y in (1, 2, 3)} - {(2, 2)}

def test_blur_removes_a_lone_cell():
    g = Grid(3, 3, seed=1)
    g.set(1, 1, FLOOR)
    blur(g)
    assert set(g.cells) == {STONE}

def test_blur_ties_keep_the_current_kind():
    g = Grid(3, 1, seed=1)
    g.set(1, 0, FLOOR)
    g.set(2, 0, WALL)
    blur(g)
    # the middle sees one stone and one wall (a tie); the ends each see only floor
    assert [g.get(x, 0) for x in range(3)] == [FLOOR, FLOOR, FLOOR]

def test_smooth_converts_an_isolated_cell():
    g = Grid(5, 5, seed=1)
    fill(g, FLOOR)
    g.set(2, 2, WALL)
    g.set(0, 0, STONE)
    smooth(g)
    assert set(g.cells) == {FLOOR}

def test_smooth_below_threshold_keeps_kind():
    g = Grid(3, 3, seed=1)
    fill(g, FLOOR)
    for x, y in [(0, 0), (1, 0), (2, 0)]:
        g.set(x, y, WALL)
    g.set(1, 1, STONE)
    smooth(g)
    # centre: 5 floor, 3 wall of 8 -> neither reaches 6 of 8
    assert g.get(1, 1) == STONE

def test_smooth_passes_count_generations():
    g = Grid(10, 10, seed=3)
    noise(g)
    start = g.generations
    smooth(g, passes=3)
    assert g.generations == start + 3

def test_smoothing_a_uniform_grid_changes_nothing():
    for fn in (blur, smooth):
        g = Grid(8, 8, seed=1)
        fill(g, WALL)
        fn(g)
        assert set(g.cells) == {WALL}

def test_forest_is_seeded_and_two_kinds():
    cfg = replace(DEFAULTS, forest_passes=3)
    a, b = Grid(30, 20, seed=9, config=cfg), Grid(30, 20, seed=9, config=cfg)
    forest(a)
    forest(b)
    assert a.cells == b.cells
    assert set(a.cells) <= {STONE, FLOOR}
    assert a.count(FLOOR) > 0
    assert a.generations == 1 + 3

@pytest.mark.parametrize("run", [
    lambda g: blur(g, passes=0),
    lambda g: smooth(g, passes=0),
    lambda g: life(g, turns=0),
    lambda g: life_like(g, {3}, {2, 3}, turns=-1),
])
def test_zero_passes_are_rejected(run):
    g = Grid(6, 6, seed=2)
    noise(g)
    before = (g.snapshot(), g.generations)
    with pytest.raises(ValueError):
        run(g)
    assert (g.snapshot(), g.generations) == before
