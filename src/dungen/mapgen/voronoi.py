# src/dungen/mapgen/voronoi.py
# Nearest-seed carving: scatter k seeds tagged wall or floor, then every cell
# takes the kind of its closest seed (squared distance, earliest seed on ties).

import logging
from typing import List, Optional, Tuple

from ..cells import CellKind, FLOOR, WALL
from ..grid import Grid
from ..rng import RandomSource
from .base import cancellable, random_cell, rng_for

logger = logging.getLogger(__name__)

Seed = Tuple[int, int, CellKind]


def scatter_seeds(grid: Grid, rng: RandomSource, k: int) -> List[Seed]:
    seeds = []
    for _ in range(k):
        x, y = random_cell(grid, rng)
        seeds.append((x, y, FLOOR if rng.coinflip(2) else WALL))
    return seeds


def nearest_kind(seeds: List[Seed], x: int, y: int) -> CellKind:
    best_d = None
    best_kind = seeds[0][2]
    for sx, sy, kind in seeds:
        d = (sx - x) * (sx - x) + (sy - y) * (sy - y)
        if best_d is None or d < best_d:
            best_d = d
            best_kind = kind
    return best_kind


@cancellable
def voronoi(grid: Grid, rng: Optional[RandomSource] = None, k: Optional[int] = None) -> None:
    """Overwrite the whole grid with wall/floor Voronoi regions."""
    rng = rng_for(grid, rng)
    if k is None:
        k = max(2, (grid.width * grid.height) // grid.config.voronoi_area_per_seed)
    k = max(1, k)
    seeds = scatter_seeds(grid, rng, k)
    w = grid.width
    for y in range(grid.height):
        for x in range(w):
            grid.cells[x + y * w] = nearest_kind(seeds, x, y)
        grid.step()
    grid.generations += 1
    logger.debug("voronoi: %d seeds", k)
