# src/dungen/mapgen/generator.py
# Generator registry, named presets, and the canonical generate() pipeline.

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..cells import STONE, WALL
from ..errors import UnknownGenerator
from ..grid import Grid
from ..hooks import Status, StepCallback
from .automata import blur, forest, life, life_like, smooth
from .maze import maze, maze_diagonal
from .partition import rooms_split
from .transforms import fill, fill_border, fill_rooms, noise, randomwalk, replace_all, shrink
from .voronoi import voronoi
from .worms import worms

logger = logging.getLogger(__name__)

GENERATORS: Dict[str, Callable[..., Status]] = {
    "rooms_split": rooms_split,
    "fill": fill,
    "fill_border": fill_border,
    "blur": blur,
    "fill_rooms": fill_rooms,
    "forest": forest,
    "life": life,
    "life_like": life_like,
    "maze": maze,
    "maze_diagonal": maze_diagonal,
    "noise": noise,
    "randomwalk": randomwalk,
    "replace_all": replace_all,
    "shrink": shrink,
    "smooth": smooth,
    "voronoi": voronoi,
    "worms": worms,
}


def _border(grid: Grid) -> Dict[str, Any]:
    return {"x": 0, "y": 0, "w": grid.width, "h": grid.height, "kind": WALL}


# Steps may be (name, kwargs) or (name, callable(grid) -> kwargs) for size-dependent args.
PRESETS: Dict[str, List[Tuple[str, Any]]] = {
    "dungeon": [
        ("rooms_split", {}),
        ("maze", {}),
        ("fill_rooms", {}),
    ],
    "caves": [
        ("noise", {}),
        ("replace_all", {"a": WALL, "b": STONE}),
        ("smooth", {"passes": 3}),
        ("fill_border", _border),
    ],
    "worms": [
        ("fill", {"kind": STONE}),
        ("worms", {}),
        ("blur", {}),
    ],
    "voronoi": [
        ("voronoi", {}),
        ("smooth", {}),
        ("fill_border", _border),
    ],
    "labyrinth": [
        ("fill", {"kind": STONE}),
        ("maze", {}),
        ("maze_diagonal", {}),
    ],
    "forest": [
        ("forest", {}),
        ("fill_border", _border),
    ],
    "life": [
        ("noise", {}),
        ("replace_all", {"a": WALL, "b": STONE}),
        ("life", {"turns": 4}),
    ],
}


def resolve(name: str) -> Callable[..., Status]:
    try:
        return GENERATORS[name]
    except KeyError:
        raise UnknownGenerator(name) from None


def preset_steps(name: str) -> List[Tuple[str, Any]]:
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownGenerator(name) from None


def run_pipeline(grid: Grid, steps: Iterable[Tuple[str, Any]]) -> Status:
    """Run generators in order; stop at the first one that was cancelled."""
    for name, kwargs in steps:
        fn = resolve(name)
        if callable(kwargs):
            kwargs = kwargs(grid)
        status = fn(grid, **dict(kwargs))
        logger.debug("pipeline step %s -> %s", name, status.value)
        if status is Status.CANCELLED:
            return status
    return Status.DONE


def generate(
    width: int,
    height: int,
    preset: str = "dungeon",
    seed: Optional[int] = None,
    hook: Optional[StepCallback] = None,
    **grid_kwargs,
) -> Grid:
    """Build a grid and run a preset over it. Check grid.cancel to see if it stopped early."""
    steps = preset_steps(preset)
    grid = Grid(width, height, hook, seed=seed, **grid_kwargs)
    status = run_pipeline(grid, steps)
    logger.info("generated %dx%d %s grid (seed=%s, %s)", width, height, preset, seed, status.value)
    return grid
