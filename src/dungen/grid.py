# src/dungen/grid.py
# Dense cell store addressed by x + y*width (x fastest-varying), plus the room
# registry, the generation counter and the per-grid random source.

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .cells import CellKind, STONE
from .config import DEFAULTS, GenConfig
from .errors import AllocationFailure, InvalidCoordinate
from .hooks import CancelToken, GenerationCancelled, StepCallback, wants_cancel
from .rng import RandomSource
from .rooms import Room

logger = logging.getLogger(__name__)

A = TypeVar("A")

# Fixed enumeration order: N, NE, E, SE, S, SW, W, NW
NEIGHBORS8: Tuple[Tuple[int, int], ...] = (
    (0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1),
)
NEIGHBORS4: Tuple[Tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass(eq=False)
class Grid:
    width: int
    height: int
    hook: Optional[StepCallback] = None
    seed: Optional[int] = None
    rng: Optional[RandomSource] = None
    config: GenConfig = DEFAULTS
    cancel: Optional[CancelToken] = None
    cells: List[CellKind] = field(init=False, default_factory=list, repr=False)
    rooms: List[Room] = field(init=False, default_factory=list, repr=False)
    generations: int = field(init=False, default=0)
    steps: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or not isinstance(self.height, int):
            raise TypeError("grid dimensions must be integers")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.width}x{self.height}")
        if self.rng is None:
            self.rng = RandomSource.seeded(self.seed)
        if self.cancel is None:
            self.cancel = CancelToken()
        try:
            self.cells = [STONE] * (self.width * self.height)
        except (MemoryError, OverflowError) as e:
            raise AllocationFailure(f"cannot allocate a {self.width}x{self.height} grid") from e
        logger.debug("created %dx%d grid", self.width, self.height)

    # ---------- lifecycle ----------
    def reset(self) -> None:
        """Back to all-stone with no rooms, without reallocating."""
        self.cells[:] = [STONE] * len(self.cells)
        self.rooms.clear()
        self.generations = 0
        self.steps = 0

    def close(self) -> None:
        """Release the cell array and rooms; the grid becomes 0x0."""
        self.cells = []
        self.rooms = []
        self.width = 0
        self.height = 0

    def __enter__(self) -> "Grid":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---------- access ----------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(x, y, self.width, self.height)
        return x + y * self.width

    def get(self, x: int, y: int) -> CellKind:
        return self.cells[self.idx(x, y)]

    def set(self, x: int, y: int, kind: int) -> None:
        i = self.idx(x, y)
        self.cells[i] = CellKind(kind)

    def snapshot(self) -> List[CellKind]:
        return list(self.cells)

    def restore(self, cells: Sequence[int]) -> None:
        """Load a raw cell array previously taken with snapshot()."""
        if len(cells) != len(self.cells):
            raise ValueError(f"expected {len(self.cells)} cells, got {len(cells)}")
        self.cells[:] = [CellKind(k) for k in cells]

    def commit(self, cells: List[CellKind]) -> None:
        """Swap in a whole next generation at once."""
        self.cells[:] = cells
        self.generations += 1

    def as_matrix(self) -> List[List[CellKind]]:
        w = self.width
        return [self.cells[y * w:(y + 1) * w] for y in range(self.height)]

    def count(self, kind: int) -> int:
        return self.cells.count(kind)

    # ---------- iteration ----------
    def each(self, visit: Callable[[int, int, CellKind], None]) -> None:
        """Visit every cell once, y outer and x inner."""
        w = self.width
        for y in range(self.height):
            row = y * w
            for x in range(w):
                visit(x, y, self.cells[row + x])

    def each_room(self, visit: Callable[[int, int, int, int], None]) -> None:
        for room in list(self.rooms):
            visit(room.x, room.y, room.w, room.h)

    def neighbors(self, x: int, y: int, diagonal: bool = True) -> Iterator[Tuple[int, int, CellKind]]:
        # checked eagerly, before the first next()
        self.idx(x, y)
        return self._neighbors(x, y, NEIGHBORS8 if diagonal else NEIGHBORS4)

    def _neighbors(self, x: int, y: int, offsets) -> Iterator[Tuple[int, int, CellKind]]:
        w, h = self.width, self.height
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h:
                yield nx, ny, self.cells[nx + ny * w]

    def each_neighbor(
        self,
        x: int,
        y: int,
        visit: Callable[[int, int, CellKind], None],
        diagonal: bool = True,
    ) -> None:
        for nx, ny, kind in self.neighbors(x, y, diagonal):
            visit(nx, ny, kind)

    def fold_neighbors(
        self,
        x: int,
        y: int,
        fn: Callable[[A, int, int, CellKind], A],
        acc: A,
        diagonal: bool = True,
    ) -> A:
        for nx, ny, kind in self.neighbors(x, y, diagonal):
            acc = fn(acc, nx, ny, kind)
        return acc

    def neighbor_counts(self, x: int, y: int) -> Tuple[List[int], int]:
        """Per-kind counts over the 8-neighbourhood, and how many neighbours exist."""
        counts = [0, 0, 0]
        total = 0
        for _, _, kind in self.neighbors(x, y):
            counts[kind] += 1
            total += 1
        return counts, total

    # ---------- observation ----------
    def step(self) -> None:
        """Report one meaningful mutation to the hook, then poll for cancellation."""
        self.steps += 1
        if self.hook is not None and wants_cancel(self.hook(self, self.steps)):
            self.cancel.cancel()
        if self.cancel.cancelled:
            raise GenerationCancelled(self.steps)


def create(width: int, height: int, hook: Optional[StepCallback] = None, **kwargs) -> Grid:
    return Grid(width, height, hook, **kwargs)
