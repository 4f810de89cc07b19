# tests/test_voronoi.py
from dungen.cells import FLOOR, STONE, WALL
from dungen.grid import Grid
from dungen.mapgen.transforms import fill
from dungen.mapgen.voronoi import nearest_kind, scatter_seeds, voronoi

def test_voronoi_overwrites_everything():
    g = Grid(40, 30, seed=10)
    fill(g, STONE)
    voronoi(g)
    assert set(g.cells) <= {WALL, FLOOR}
    assert STONE not in g.cells

def test_ties_go_to_the_earlier_seed():
    seeds = [(0, 0, WALL), (2, 0, FLOOR)]
    assert nearest_kind(seeds, 1, 0) == WALL
    assert nearest_kind(list(reversed(seeds)), 1, 0) == FLOOR
    assert nearest_kind(seeds, 2, 1) == FLOOR

def test_single_seed_paints_the_whole_grid():
    g = Grid(12, 8, seed=2)
    voronoi(g, k=1)
    assert len(set(g.cells)) == 1

def test_seed_cells_take_their_own_kind():
    g = Grid(16, 16, seed=4)
    seeds = scatter_seeds(g, g.rng, 6)
    assert all(g.in_bounds(x, y) and k in (WALL, FLOOR) for x, y, k in seeds)
    for x, y, _ in seeds:
        first = next(s for s in seeds if s[:2] == (x, y))
        assert nearest_kind(seeds, x, y) == first[2]

def test_voronoi_is_seeded_and_counts_a_generation():
    a, b = Grid(24, 24, seed=8), Grid(24, 24, seed=8)
    voronoi(a)
    voronoi(b)
    assert a.cells == b.cells
    assert a.generations == 1
    assert a.steps == 24
