# src/dungen/cells.py
# Canonical cell kinds. Values match the C enum so raw cell arrays stay comparable.

from enum import IntEnum
from typing import Dict


class CellKind(IntEnum):
    STONE = 0   # default / unexcavated
    WALL = 1    # boundary / structural
    FLOOR = 2   # traversable


STONE = CellKind.STONE
WALL = CellKind.WALL
FLOOR = CellKind.FLOOR

ALL_KINDS = (STONE, WALL, FLOOR)

GLYPHS: Dict[CellKind, str] = {
    STONE: "#",
    WALL: "+",
    FLOOR: ".",
}


def glyph_for(kind: int) -> str:
    return GLYPHS[CellKind(kind)]
