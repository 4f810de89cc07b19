# src/dungen/rng.py
"""
Seeded random source: Park–Miller "minimal standard" generator.

Every grid owns one instance, so two grids seeded alike replay the same
sequence no matter what other grids are doing in the process.
"""

import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TypeVar

A = 16807
M = 0x7FFFFFFF  # 2^31-1
SEED_SALT = 0x0FCDD36

T = TypeVar("T")
Direction = Tuple[int, int]

# Clockwise from east; dir_change rotates by walking this ring.
DIRS8: List[Direction] = [
    (1, 0), (1, 1), (0, 1), (-1, 1),
    (-1, 0), (-1, -1), (0, -1), (1, -1),
]
DIRS4: List[Direction] = [(0, -1), (1, 0), (0, 1), (-1, 0)]  # N, E, S, W
DIAGONALS: List[Direction] = [(1, 1), (-1, 1), (-1, -1), (1, -1)]


def pm_next(state: int) -> int:
    return (state * A) % M


def seed_state(seed: int) -> int:
    """Map an arbitrary integer seed onto a valid (non-zero) generator state."""
    s = (A * (seed % M) + SEED_SALT) % M
    return s or 1


@dataclass
class RandomSource:
    state: int

    @classmethod
    def seeded(cls, seed: Optional[int] = None) -> "RandomSource":
        # seed_rng: a missing seed falls back to the clock
        if seed is None:
            seed = time.time_ns()
        return cls(seed_state(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Return 1..n inclusive."""
        assert n > 0
        return (self.next32() % n) + 1

    def rnd_range(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi] inclusive."""
        if hi < lo:
            lo, hi = hi, lo
        return lo + self.bounded(hi - lo + 1) - 1

    def coinflip(self, n: int) -> bool:
        """True with probability 1/n."""
        return n <= 1 or self.bounded(n) == 1

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.bounded(len(seq)) - 1]

    def dir_rnd(self) -> Direction:
        return self.choice(DIRS8)

    def dir_change(self, d: Direction) -> Direction:
        """
        Turn an existing heading. Three times in four the turn is 45°, otherwise
        90°, left or right with equal odds. Never reverses outright, which keeps
        worm passages coherent. Unknown headings get a fresh random direction.
        """
        if d not in DIRS8:
            return self.dir_rnd()
        step = 1 if self.bounded(4) > 1 else 2
        if self.coinflip(2):
            step = -step
        return DIRS8[(DIRS8.index(d) + step) % len(DIRS8)]
