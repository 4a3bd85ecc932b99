"""Ranged sequences: an explicit-cursor iterator and a generator function."""

import math
from typing import Any, Iterator, Optional

from .base import LazySequence
from .models import Number, RangeConfig, StepResult, is_reset


class RangeSequence(LazySequence[Number]):
    """
    Arithmetic progression with an explicit cursor.

    Yields ``start, start + step, ...`` while the index stays inside ``end``.
    Once exhausted, the step result carries the index at which iteration
    stopped. A reset signal restarts the progression from ``start``, even
    after exhaustion.
    """

    supports_reset = True

    def __init__(self, config: Optional[RangeConfig] = None):
        """
        Initialize ranged sequence.

        Args:
            config: Range configuration (defaults to ``0 .. inf`` step 1)
        """
        super().__init__()
        self.config = config or RangeConfig()
        self._index = self.config.start

    @property
    def is_finite(self) -> bool:
        return self.config.is_finite

    def _advance(self, signal: Optional[Any]) -> StepResult[Number]:
        if is_reset(signal):
            self._index = self.config.start

        if self.config.contains(self._index):
            value = self._index
            self._index = self._index + self.config.step
            return StepResult(value, False)
        return StepResult(self._index, True)

    def __length_hint__(self) -> int:
        if not self.config.is_finite:
            return NotImplemented
        return self.config.count(self._index)

    def __repr__(self) -> str:
        c = self.config
        return f"RangeSequence(start={c.start}, end={c.end}, step={c.step})"


def range_sequence(start: Number = 0, end: Number = math.inf, step: Number = 1) -> RangeSequence:
    """Create a ranged sequence; raises ConfigurationError for a zero step."""
    return RangeSequence(RangeConfig(start=start, end=end, step=step))


def xrange(start: Number = 0, end: Number = math.inf, step: Number = 1) -> Iterator[Number]:
    """
    Generator version of the ranged sequence.

    The configuration is validated here, before the generator is created,
    so a bad step is reported at the call site and not on the first ``next``.
    """
    return _xrange(RangeConfig(start=start, end=end, step=step))


def _xrange(config: RangeConfig) -> Iterator[Number]:
    index = config.start
    while config.contains(index):
        yield index
        index = index + config.step
