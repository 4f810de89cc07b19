# src/dungen/printer.py
# ASCII printer for debugging. make_printer() returns an `each` visitor.

import sys
from typing import Callable, TextIO

from .cells import CellKind, glyph_for
from .grid import Grid


def make_printer(grid: Grid, out: TextIO = None) -> Callable[[int, int, CellKind], None]:
    stream = out if out is not None else sys.stdout
    last_x = grid.width - 1

    def visit(x: int, y: int, kind: CellKind) -> None:
        stream.write(glyph_for(kind))
        if x == last_x:
            stream.write("\n")

    return visit


def to_text(grid: Grid) -> str:
    return "\n".join("".join(glyph_for(k) for k in row) for row in grid.as_matrix())


def print_grid(grid: Grid, out: TextIO = None) -> None:
    grid.each(make_printer(grid, out))
