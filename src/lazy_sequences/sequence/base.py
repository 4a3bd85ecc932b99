"""Base class implementing the suspend/resume state machine."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, Optional, TypeVar

from .models import SequenceState, StepResult, is_reset

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LazySequence(ABC, Generic[T]):
    """
    A stateful producer of values, advanced one step at a time.

    Subclasses own their cursor and implement ``_advance``. This class keeps
    the lifecycle bookkeeping (fresh, active, exhausted), makes the exhausted
    state terminal, and adapts the sequence to Python's iterator protocol so
    it can be used in ``for`` loops, ``list()`` and ``itertools``.
    """

    #: Whether a reset signal may bring an exhausted sequence back to life.
    supports_reset: bool = False

    def __init__(self):
        self._state = SequenceState.FRESH
        self._final: Optional[StepResult[T]] = None

    @property
    def state(self) -> SequenceState:
        return self._state

    @property
    def is_finite(self) -> Optional[bool]:
        """True/False when statically known, None when it cannot be told."""
        return None

    def resume(self, signal: Optional[Any] = None) -> StepResult[T]:
        """
        Advance the sequence by one step.

        Args:
            signal: Optional control signal applied to the cursor before
                the next value is computed

        Returns:
            StepResult with the produced value, or ``done=True`` once exhausted
        """
        if self._state is SequenceState.EXHAUSTED:
            if not (self.supports_reset and is_reset(signal)):
                return self._final

        result = self._advance(signal)

        if result.done:
            if self._state is not SequenceState.EXHAUSTED:
                logger.debug(f"{self!r} exhausted")
            self._state = SequenceState.EXHAUSTED
            self._final = result
        else:
            self._state = SequenceState.ACTIVE
        return result

    def send(self, signal: Optional[Any]) -> T:
        """Generator-style ``send``: resume with a signal and return the value."""
        result = self.resume(signal)
        if result.done:
            raise StopIteration(result.value)
        return result.value

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        result = self.resume()
        if result.done:
            raise StopIteration
        return result.value

    @abstractmethod
    def _advance(self, signal: Optional[Any]) -> StepResult[T]:
        """Compute the next step from the cursor and move the cursor on."""
        pass
