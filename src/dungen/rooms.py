# src/dungen/rooms.py
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        for iy in range(self.y, self.y + self.h):
            for ix in range(self.x, self.x + self.w):
                yield ix, iy

    def ring(self, inset: int = 0) -> Iterator[Tuple[int, int]]:
        """Perimeter cells of the rectangle shrunk by ``inset`` on every side, each once."""
        x0, y0 = self.x + inset, self.y + inset
        x1, y1 = self.x + self.w - 1 - inset, self.y + self.h - 1 - inset
        if x1 < x0 or y1 < y0:
            return
        for ix in range(x0, x1 + 1):
            yield ix, y0
            if y1 != y0:
                yield ix, y1
        for iy in range(y0 + 1, y1):
            yield x0, iy
            if x1 != x0:
                yield x1, iy

    def interior(self) -> Iterator[Tuple[int, int]]:
        for iy in range(self.y + 1, self.y + self.h - 1):
            for ix in range(self.x + 1, self.x + self.w - 1):
                yield ix, iy

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)
