# src/dungen/errors.py
"""Exception taxonomy for the grid store and generators.

Everything derives from ``DungenError`` so hosts can catch the whole family.
Missing preconditions (no rooms, nothing to replace) are not errors: those
generators simply do nothing.
"""


class DungenError(Exception):
    """Base class for all dungen failures."""


class AllocationFailure(DungenError, MemoryError):
    """The cell array or room registry could not be allocated."""


class InvalidCoordinate(DungenError, IndexError):
    """A cell access fell outside ``[0, width) x [0, height)``."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"({x}, {y}) is outside a {width}x{height} grid")


class UnknownGenerator(DungenError, KeyError):
    """A pipeline step or preset named something not in the registry."""

    def __str__(self) -> str:
        return f"unknown generator or preset: {self.args[0]!r}"
