# src/dungen/mapgen/worms.py
"""
Worm tunnelling: a handful of biased random-walk agents that eat floor out of
the grid. A worm may split off a child worm that starts where it stands with
its own heading and half the parent's remaining budget; the parent keeps its
own budget untouched. Agents live on one explicit stack; the top worm always
runs, so a child finishes before its parent moves again, and the walk ends
when the stack is empty.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..cells import FLOOR
from ..grid import Grid, NEIGHBORS4
from ..rng import Direction, RandomSource
from .base import cancellable, random_cell, rng_for

logger = logging.getLogger(__name__)


@dataclass
class Worm:
    x: int
    y: int
    dir: Direction
    ticks: int
    dead: bool = False
    failed_moves: int = 0
    depth: int = 0


def worm_create(grid: Grid, rng: RandomSource) -> Worm:
    cfg = grid.config
    span = max(grid.width, grid.height)
    x, y = random_cell(grid, rng)
    ticks = rng.rnd_range(cfg.worm_min_ticks * span, cfg.worm_max_ticks * span)
    return Worm(x=x, y=y, dir=rng.dir_rnd(), ticks=max(1, ticks))


def worm_eat(grid: Grid, w: Worm, rng: RandomSource) -> None:
    # Carve where we stand; sometimes also one orthogonal neighbour for a wider tunnel.
    grid.set(w.x, w.y, FLOOR)
    if rng.coinflip(grid.config.worm_widen_chance):
        dx, dy = rng.choice(NEIGHBORS4)
        if grid.in_bounds(w.x + dx, w.y + dy):
            grid.set(w.x + dx, w.y + dy, FLOOR)
    grid.step()


def worm_split(w: Worm, rng: RandomSource) -> Optional[Worm]:
    budget = w.ticks // 2
    if budget < 1:
        return None
    return Worm(x=w.x, y=w.y, dir=rng.dir_rnd(), ticks=budget, depth=w.depth + 1)


def worm_burrow(grid: Grid, w: Worm, rng: RandomSource) -> None:
    """Advance one cell. The edge of the grid blocks the move and forces a turn."""
    if rng.coinflip(grid.config.worm_turn_chance):
        w.dir = rng.dir_change(w.dir)
    nx, ny = w.x + w.dir[0], w.y + w.dir[1]
    if grid.in_bounds(nx, ny):
        w.x, w.y = nx, ny
        w.failed_moves = 0
    else:
        w.dir = rng.dir_change(w.dir)
        w.failed_moves += 1


def worm_tick(grid: Grid, w: Worm, rng: RandomSource) -> Optional[Worm]:
    """One tick of life; returns a freshly split child, if any."""
    cfg = grid.config
    worm_eat(grid, w, rng)
    child = worm_split(w, rng) if rng.coinflip(cfg.worm_split_chance) else None
    worm_burrow(grid, w, rng)
    w.ticks -= 1
    if w.ticks <= 0 or w.failed_moves >= cfg.worm_max_failed_moves:
        w.dead = True
    return child


def simulate(grid: Grid, population: List[Worm], rng: RandomSource) -> int:
    """Run every worm (and every child) to death; returns the total ticks spent."""
    stack = list(reversed(population))
    spent = 0
    spawned = 0
    while stack:
        w = stack[-1]
        if w.dead:
            stack.pop()
            continue
        child = worm_tick(grid, w, rng)
        spent += 1
        if child is not None:
            stack.append(child)
            spawned += 1
    logger.debug("worms: %d ticks, %d splits", spent, spawned)
    return spent


@cancellable
def worms(grid: Grid, rng: Optional[RandomSource] = None, count: Optional[int] = None) -> None:
    """Carve random wormy passageways. Ignores existing state."""
    rng = rng_for(grid, rng)
    n = grid.config.worm_count if count is None else count
    population = [worm_create(grid, rng) for _ in range(max(0, n))]
    simulate(grid, population, rng)
