# src/dungen/mapgen/automata.py
"""
Neighbour-count cellular automata.

Every pass reads the current cells as a frozen snapshot and writes the next
generation into a fresh array that replaces the grid in one go, so no cell
ever sees a half-updated neighbourhood. A rule receives the cell's kind, the
per-kind neighbour counts (indexed by CellKind) and the number of in-bounds
neighbours, and returns the next kind.
"""

import logging
from typing import AbstractSet, Callable, List, Optional

from ..cells import ALL_KINDS, CellKind, FLOOR, STONE
from ..grid import Grid
from ..rng import RandomSource
from .base import cancellable, rng_for

logger = logging.getLogger(__name__)

Rule = Callable[[CellKind, List[int], int], CellKind]


def _require_passes(name: str, n: int) -> None:
    # each call has to advance the generation at least once
    if n < 1:
        raise ValueError(f"{name} needs at least one pass, got {n}")


def automaton_pass(grid: Grid, rule: Rule) -> int:
    """Apply ``rule`` to every cell at once; returns how many cells changed."""
    w = grid.width
    cur = grid.cells
    nxt = list(cur)
    changed = 0
    for y in range(grid.height):
        for x in range(w):
            i = x + y * w
            counts, total = grid.neighbor_counts(x, y)
            k = rule(cur[i], counts, total)
            if k != cur[i]:
                nxt[i] = k
                changed += 1
    grid.commit(nxt)
    grid.step()
    return changed


def blur_rule(kind: CellKind, counts: List[int], total: int) -> CellKind:
    # Strict plurality wins; any tie at the top keeps the current kind.
    top = max(counts)
    winners = [k for k in ALL_KINDS if counts[k] == top]
    if len(winners) != 1 or top == 0:
        return kind
    return winners[0]


def make_smooth_rule(num: int, den: int) -> Rule:
    def rule(kind: CellKind, counts: List[int], total: int) -> CellKind:
        if total == 0:
            return kind
        for k in ALL_KINDS:
            if k != kind and counts[k] * den >= num * total:
                return k
        return kind
    return rule


def make_life_rule(birth: AbstractSet[int], survive: AbstractSet[int]) -> Rule:
    # floor is alive, every other kind is dead; the dead become stone
    def rule(kind: CellKind, counts: List[int], total: int) -> CellKind:
        alive = counts[FLOOR]
        if kind == FLOOR:
            return FLOOR if alive in survive else STONE
        return FLOOR if alive in birth else STONE
    return rule


@cancellable
def blur(grid: Grid, passes: int = 1) -> None:
    """Cells take on the most common kind around them."""
    _require_passes("blur", passes)
    for _ in range(passes):
        changed = automaton_pass(grid, blur_rule)
        logger.debug("blur: %d cells changed (generation %d)", changed, grid.generations)


@cancellable
def smooth(grid: Grid, passes: int = 1) -> None:
    """Remove isolated anomalies: a cell mostly surrounded by one other kind converts."""
    _require_passes("smooth", passes)
    cfg = grid.config
    rule = make_smooth_rule(cfg.smooth_num, cfg.smooth_den)
    for _ in range(passes):
        changed = automaton_pass(grid, rule)
        logger.debug("smooth: %d cells changed (generation %d)", changed, grid.generations)


@cancellable
def life_like(grid: Grid, birth: AbstractSet[int], survive: AbstractSet[int], turns: int = 1) -> None:
    _require_passes("life_like", turns)
    rule = make_life_rule(frozenset(birth), frozenset(survive))
    for _ in range(turns):
        automaton_pass(grid, rule)


@cancellable
def life(grid: Grid, turns: int = 1) -> None:
    """Conway's rules, floor alive. Needs some floor to do anything interesting."""
    _require_passes("life", turns)
    cfg = grid.config
    rule = make_life_rule(cfg.life_birth, cfg.life_survive)
    for _ in range(turns):
        changed = automaton_pass(grid, rule)
        logger.debug("life: %d cells changed (generation %d)", changed, grid.generations)


@cancellable
def forest(grid: Grid, rng: Optional[RandomSource] = None) -> None:
    """Open maze-like pattern grown from random floor seeds. Ignores existing state."""
    rng = rng_for(grid, rng)
    cfg = grid.config
    seeded = [FLOOR if rng.coinflip(cfg.forest_seed_chance) else STONE for _ in grid.cells]
    grid.commit(seeded)
    grid.step()
    rule = make_life_rule(cfg.forest_birth, cfg.forest_survive)
    for _ in range(cfg.forest_passes):
        automaton_pass(grid, rule)
    logger.debug("forest: %d floor cells after %d passes", grid.count(FLOOR), cfg.forest_passes)
