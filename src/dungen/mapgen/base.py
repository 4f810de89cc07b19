# src/dungen/mapgen/base.py
# Shared plumbing for generator entry points.

import functools
import logging
from typing import Callable, Optional

from ..grid import Grid
from ..hooks import GenerationCancelled, Status
from ..rng import RandomSource

logger = logging.getLogger(__name__)


def cancellable(fn: Callable[..., None]) -> Callable[..., Status]:
    """
    Wrap a generator so it reports Status.DONE or Status.CANCELLED.
    An already-cancelled grid is left untouched; a cancellation mid-run keeps
    whatever the generator had written so far.
    """
    @functools.wraps(fn)
    def wrapper(grid: Grid, *args, **kwargs) -> Status:
        if grid.cancel.cancelled:
            logger.info("%s skipped: grid already cancelled", fn.__name__)
            return Status.CANCELLED
        try:
            fn(grid, *args, **kwargs)
        except GenerationCancelled as e:
            logger.info("%s cancelled at step %s", fn.__name__, e.args[0] if e.args else "?")
            return Status.CANCELLED
        return Status.DONE

    return wrapper


def rng_for(grid: Grid, rng: Optional[RandomSource]) -> RandomSource:
    return rng if rng is not None else grid.rng


def random_cell(grid: Grid, rng: RandomSource):
    return rng.rnd_range(0, grid.width - 1), rng.rnd_range(0, grid.height - 1)
