# src/dungen/config.py
from dataclasses import dataclass, field
from typing import FrozenSet

from .cells import CellKind, WALL


@dataclass(frozen=True)
class GenConfig:
    # Partitioner: smallest leaf edge; a leaf room is the leaf minus a 1-cell gutter.
    min_room_size: int = 6
    # Offset draws per cut; the draw farthest from the midpoint wins.
    split_draws: int = 2

    # smooth converts when count/neighbours >= smooth_num/smooth_den (6 of 8).
    smooth_num: int = 6
    smooth_den: int = 8

    life_birth: FrozenSet[int] = field(default_factory=lambda: frozenset({3}))
    life_survive: FrozenSet[int] = field(default_factory=lambda: frozenset({2, 3}))

    # forest: B3/S12345 ("Maze" rule) over a random floor seeding.
    forest_birth: FrozenSet[int] = field(default_factory=lambda: frozenset({3}))
    forest_survive: FrozenSet[int] = field(default_factory=lambda: frozenset({1, 2, 3, 4, 5}))
    forest_seed_chance: int = 2
    forest_passes: int = 4

    # Worm budgets are multiples of max(w, h).
    worm_count: int = 4
    worm_min_ticks: int = 1
    worm_max_ticks: int = 4
    worm_split_chance: int = 40
    worm_turn_chance: int = 6
    worm_widen_chance: int = 3
    worm_max_failed_moves: int = 8

    voronoi_area_per_seed: int = 64
    randomwalk_area_factor: int = 2

    fill_rooms_kind: CellKind = WALL


# Default configuration (a grid can carry its own)
DEFAULTS = GenConfig()
