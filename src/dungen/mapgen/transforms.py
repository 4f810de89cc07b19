# src/dungen/mapgen/transforms.py
# Single-pass cell rewrites: fill, fill_border, noise, randomwalk, replace_all,
# shrink and fill_rooms.

import logging
from typing import Optional

from ..cells import ALL_KINDS, CellKind, FLOOR, WALL
from ..grid import Grid, NEIGHBORS4
from ..rng import RandomSource
from ..rooms import Room
from .base import cancellable, random_cell, rng_for

logger = logging.getLogger(__name__)


@cancellable
def fill(grid: Grid, kind: int) -> None:
    """Overwrite every cell with ``kind``."""
    kind = CellKind(kind)
    w = grid.width
    for y in range(grid.height):
        grid.cells[y * w:(y + 1) * w] = [kind] * w
        grid.step()
    grid.generations += 1


@cancellable
def fill_border(grid: Grid, x: int, y: int, w: int, h: int, kind: int) -> None:
    """
    Overwrite the perimeter of the rectangle (x, y, w, h). Parts outside the
    grid are clipped away; a rectangle entirely outside is a no-op.
    """
    kind = CellKind(kind)
    if w <= 0 or h <= 0:
        return
    written = 0
    for ix, iy in Room(x, y, w, h).ring():
        if grid.in_bounds(ix, iy):
            grid.set(ix, iy, kind)
            written += 1
    if written:
        grid.step()


@cancellable
def noise(grid: Grid, rng: Optional[RandomSource] = None) -> None:
    """Each cell independently becomes a uniformly random kind."""
    rng = rng_for(grid, rng)
    w = grid.width
    for y in range(grid.height):
        for x in range(w):
            grid.cells[x + y * w] = ALL_KINDS[rng.rnd_range(0, len(ALL_KINDS) - 1)]
        grid.step()
    grid.generations += 1


@cancellable
def randomwalk(grid: Grid, rng: Optional[RandomSource] = None, steps: Optional[int] = None) -> None:
    """One unbiased orthogonal walk carving floor; blocked moves still spend a step."""
    rng = rng_for(grid, rng)
    if steps is None:
        steps = max(1, (grid.width * grid.height) // grid.config.randomwalk_area_factor)
    x, y = random_cell(grid, rng)
    grid.set(x, y, FLOOR)
    grid.step()
    for _ in range(steps):
        dx, dy = rng.choice(NEIGHBORS4)
        nx, ny = x + dx, y + dy
        if not grid.in_bounds(nx, ny):
            continue
        x, y = nx, ny
        grid.set(x, y, FLOOR)
        grid.step()
    logger.debug("randomwalk: %d steps, %d floor cells", steps, grid.count(FLOOR))


@cancellable
def replace_all(grid: Grid, a: int, b: int) -> None:
    """Every cell of kind ``a`` becomes ``b``."""
    a, b = CellKind(a), CellKind(b)
    if a == b:
        return
    w = grid.width
    cells = grid.cells
    for y in range(grid.height):
        row = y * w
        hit = False
        for i in range(row, row + w):
            if cells[i] == a:
                cells[i] = b
                hit = True
        if hit:
            grid.step()


@cancellable
def shrink(grid: Grid) -> None:
    """
    For every room, turn its outermost ring of floor cells inside the wall
    border into wall. Calling it again eats the next ring inward. Without
    rooms this does nothing.
    """
    for room in list(grid.rooms):
        for inset in range(1, (min(room.w, room.h) + 1) // 2):
            ring = [(x, y) for x, y in room.ring(inset) if grid.get(x, y) == FLOOR]
            if ring:
                for x, y in ring:
                    grid.set(x, y, WALL)
                grid.step()
                break


@cancellable
def fill_rooms(grid: Grid, kind: Optional[int] = None) -> None:
    """
    Fill the interior of every room whose border is still entirely wall (no
    passage leads in). Rooms with a breached border are left alone.
    """
    kind = CellKind(grid.config.fill_rooms_kind if kind is None else kind)
    filled = 0
    for room in list(grid.rooms):
        if not all(grid.get(x, y) == WALL for x, y in room.ring()):
            continue
        for x, y in room.interior():
            grid.set(x, y, kind)
        filled += 1
        grid.step()
    logger.debug("fill_rooms: filled %d of %d rooms", filled, len(grid.rooms))
