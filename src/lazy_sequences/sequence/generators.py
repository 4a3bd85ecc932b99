"""Adapter exposing Python generators through the resume contract."""

from typing import Any, Iterable, Optional, TypeVar

from ..errors import ConfigurationError
from .base import LazySequence
from .models import SequenceState, StepResult
from .protocols import Resumable

T = TypeVar("T")


class GeneratorSequence(LazySequence[T]):
    """
    Wraps any iterable (usually a generator object) as a LazySequence.

    Suspension is left to the generator itself: each resume runs the
    generator body up to its next ``yield``. When ``accepts_signals`` is set,
    signals are delivered with ``generator.send``; the first resume always
    uses ``next`` because a just-started generator cannot receive a value.

    Once exhausted, the step result carries the generator's return value.
    """

    def __init__(
        self,
        source: Iterable[T],
        *,
        accepts_signals: bool = False,
        finite: Optional[bool] = None,
    ):
        """
        Initialize generator-backed sequence.

        Args:
            source: Iterable or generator producing the values
            accepts_signals: Forward resume signals with ``send``
            finite: Whether the source is known to be finite (None if unknown)
        """
        super().__init__()
        self._iterator = iter(source)
        if accepts_signals and not hasattr(self._iterator, "send"):
            raise ConfigurationError(
                f"{type(self._iterator).__name__} cannot receive signals; pass a generator"
            )
        self._accepts_signals = accepts_signals
        self._finite = finite

    @property
    def is_finite(self) -> Optional[bool]:
        return self._finite

    def _advance(self, signal: Optional[Any]) -> StepResult[T]:
        try:
            if self._accepts_signals and self._state is not SequenceState.FRESH:
                value = self._iterator.send(signal)
            else:
                value = next(self._iterator)
        except StopIteration as stop:
            return StepResult(stop.value, True)
        return StepResult(value, False)

    def close(self) -> None:
        """Close the underlying generator, running its ``finally`` blocks."""
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()
        if self._state is not SequenceState.EXHAUSTED:
            self._state = SequenceState.EXHAUSTED
            self._final = StepResult(None, True)

    def __repr__(self) -> str:
        return f"GeneratorSequence({self._iterator!r})"


class ResumableSequence(LazySequence[T]):
    """
    Adapts a foreign object with a ``resume`` step to LazySequence.

    Signals and final sentinels are passed through unchanged; the adapter
    only adds the lifecycle bookkeeping, so an exhausted source is not
    resumed again.
    """

    def __init__(self, source: Resumable[T], *, finite: Optional[bool] = None):
        super().__init__()
        self._source = source
        self._finite = finite

    @property
    def is_finite(self) -> Optional[bool]:
        return self._finite

    def _advance(self, signal: Optional[Any]) -> StepResult[T]:
        if signal is None:
            return self._source.resume()
        return self._source.resume(signal)

    def __repr__(self) -> str:
        return f"ResumableSequence({self._source!r})"
