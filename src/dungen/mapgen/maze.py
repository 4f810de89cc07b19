# src/dungen/mapgen/maze.py
# Randomized depth-first carving with an explicit backtracking stack.
# Moves jump two cells; the cell jumped over is carved too.

import logging
from typing import Callable, Iterable, List, Optional, Set, Tuple

from ..cells import FLOOR, STONE
from ..grid import Grid
from ..rng import DIAGONALS, DIRS4, Direction, RandomSource
from .base import cancellable, random_cell, rng_for

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def _pick_start(grid: Grid, rng: RandomSource, ok: Callable[[int, int], bool]) -> Optional[Cell]:
    # A few random probes first, then a full scan from a random offset.
    for _ in range(16):
        x, y = random_cell(grid, rng)
        if ok(x, y):
            return x, y
    n = grid.width * grid.height
    off = rng.rnd_range(0, n - 1)
    for j in range(n):
        i = (off + j) % n
        x, y = i % grid.width, i // grid.width
        if ok(x, y):
            return x, y
    return None


def carve_dfs(
    grid: Grid,
    rng: RandomSource,
    start: Cell,
    dirs: Iterable[Direction],
    can_enter: Callable[[int, int], bool],
) -> int:
    """Run the backtracking walk from ``start``; returns the number of lattice cells visited."""
    dirs = list(dirs)
    visited: Set[Cell] = {start}
    stack: List[Cell] = [start]
    grid.set(start[0], start[1], FLOOR)
    grid.step()
    while stack:
        x, y = stack[-1]
        options = []
        for dx, dy in dirs:
            tx, ty = x + 2 * dx, y + 2 * dy
            if (tx, ty) not in visited and grid.in_bounds(tx, ty) and can_enter(tx, ty):
                options.append((dx, dy))
        if not options:
            stack.pop()
            continue
        dx, dy = rng.choice(options)
        tx, ty = x + 2 * dx, y + 2 * dy
        visited.add((tx, ty))
        grid.set(x + dx, y + dy, FLOOR)
        grid.set(tx, ty, FLOOR)
        grid.step()
        stack.append((tx, ty))
    return len(visited)


@cancellable
def maze(grid: Grid, rng: Optional[RandomSource] = None, start: Optional[Cell] = None) -> None:
    """
    Orthogonal maze. Existing floor is never carved over: a floor cell counts
    as already visited, so corridors wind around earlier rooms. A jump whose
    middle cell is floor joins the maze onto that floor.
    """
    rng = rng_for(grid, rng)

    def can_enter(x: int, y: int) -> bool:
        return grid.get(x, y) != FLOOR

    if start is None:
        start = _pick_start(grid, rng, lambda x, y: grid.get(x, y) == STONE)
        if start is None:
            start = _pick_start(grid, rng, can_enter)
    elif not can_enter(*start):
        start = None
    if start is None:
        logger.debug("maze: no carvable cell")
        return

    visited = carve_dfs(grid, rng, start, DIRS4, can_enter)
    logger.debug("maze: %d lattice cells from %s", visited, start)


@cancellable
def maze_diagonal(grid: Grid, rng: Optional[RandomSource] = None, start: Optional[Cell] = None) -> None:
    """Diagonal passages. Ignores existing state and may overwrite anything."""
    rng = rng_for(grid, rng)
    if start is None:
        start = random_cell(grid, rng)
    visited = carve_dfs(grid, rng, start, DIAGONALS, lambda x, y: True)
    logger.debug("maze_diagonal: %d lattice cells from %s", visited, start)
