# src/dungen/mapgen/partition.py
# Uneven binary space partition. Leaves become rooms: wall border, floor
# interior, with a one-cell stone gutter on the right and bottom of each leaf
# so neighbouring rooms stay separated by stone.

import logging
from typing import List, Optional, Tuple

from ..cells import FLOOR, STONE, WALL
from ..grid import Grid
from ..rng import RandomSource
from ..rooms import Room
from .base import cancellable, rng_for

logger = logging.getLogger(__name__)

Rect = Tuple[int, int, int, int]


def _cut_offset(rng: RandomSource, size: int, min_size: int, draws: int) -> int:
    # Draw several candidate offsets in [min_size, size - min_size] and keep
    # the one farthest from the midpoint (earliest draw on ties).
    best = rng.rnd_range(min_size, size - min_size)
    for _ in range(draws - 1):
        cand = rng.rnd_range(min_size, size - min_size)
        if abs(2 * cand - size) > abs(2 * best - size):
            best = cand
    return best


def split_rect(rng: RandomSource, rect: Rect, min_size: int, draws: int = 2) -> List[Rect]:
    """Return the leaf rectangles of a recursive uneven split of ``rect``."""
    leaves: List[Rect] = []
    stack = [rect]
    while stack:
        x, y, w, h = stack.pop()
        can_w = w >= 2 * min_size
        can_h = h >= 2 * min_size
        if not can_w and not can_h:
            leaves.append((x, y, w, h))
            continue
        if can_w and can_h:
            # cut across the longer side; squares pick at random
            vertical = w > h or (w == h and rng.coinflip(2))
        else:
            vertical = can_w
        if vertical:
            cut = _cut_offset(rng, w, min_size, draws)
            parts = [(x, y, cut, h), (x + cut, y, w - cut, h)]
        else:
            cut = _cut_offset(rng, h, min_size, draws)
            parts = [(x, y, w, cut), (x, y + cut, w, h - cut)]
        # second half pushed first so leaves come out top-left first
        stack.append(parts[1])
        stack.append(parts[0])
    return leaves


def carve_room(grid: Grid, room: Room) -> None:
    for x, y in room.interior():
        grid.set(x, y, FLOOR)
    for x, y in room.ring():
        grid.set(x, y, WALL)


@cancellable
def rooms_split(grid: Grid, rng: Optional[RandomSource] = None, min_size: Optional[int] = None) -> None:
    """
    Discard existing rooms and cells, then partition the whole grid into new
    rooms. A grid smaller than twice the minimum size in both directions yields a
    single room covering the usable area.
    """
    rng = rng_for(grid, rng)
    cfg = grid.config
    min_size = max(2, cfg.min_room_size if min_size is None else min_size)

    grid.rooms.clear()
    grid.cells[:] = [STONE] * len(grid.cells)
    leaves = split_rect(rng, (0, 0, grid.width, grid.height), min_size, max(1, cfg.split_draws))
    for x, y, w, h in leaves:
        rw, rh = w - 1, h - 1
        # a 1-wide grid leaves nothing once the gutter is taken
        if rw < 1 or rh < 1:
            continue
        room = Room(x, y, rw, rh)
        grid.rooms.append(room)
        carve_room(grid, room)
        grid.step()
    logger.debug("rooms_split: %d rooms from %d leaves", len(grid.rooms), len(leaves))
