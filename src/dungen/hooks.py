# src/dungen/hooks.py
# Observation hook and cooperative cancellation shared by all generators.

from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Union

if TYPE_CHECKING:
    from .grid import Grid


class StepResult(Enum):
    CONTINUE = "continue"
    CANCEL = "cancel"


class Status(Enum):
    DONE = "done"
    CANCELLED = "cancelled"


# (grid, step) -> None / StepResult / bool
StepCallback = Callable[["Grid", int], Union[None, bool, StepResult]]


class GenerationCancelled(Exception):
    """Raised by Grid.step() once the cancel token is set; generators turn it into Status.CANCELLED."""


class CancelToken:
    """Host-owned stop flag polled by every generator loop."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def clear(self) -> None:
        self._cancelled = False

    def __repr__(self) -> str:
        return f"CancelToken(cancelled={self._cancelled})"


def wants_cancel(result: Optional[Union[bool, StepResult]]) -> bool:
    return result is StepResult.CANCEL or result is False
