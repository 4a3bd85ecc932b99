"""Data models and configuration classes."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

from ..errors import ConfigurationError

T = TypeVar("T")

Number = Union[int, float]


class SequenceState(str, Enum):
    """Lifecycle state of a sequence instance."""

    FRESH = "fresh"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class ResumeSignal(str, Enum):
    """Control signals that can be passed into a resume call."""

    RESET = "reset"


def is_reset(signal: Any) -> bool:
    """Return True if ``signal`` asks the sequence to reset its cursor.

    ``True`` counts as a reset so that ``send(True)`` behaves like
    ``resume(ResumeSignal.RESET)``.
    """
    return signal is ResumeSignal.RESET or signal is True


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Outcome of a single resume call.

    ``value`` is only meaningful while ``done`` is False, except for the
    final sentinel documented by each sequence type.
    """

    value: T
    done: bool


@dataclass(frozen=True)
class RangeConfig:
    """Ranged sequence configuration."""

    start: Number = 0
    end: Number = math.inf
    step: Number = 1

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.step == 0:
            raise ConfigurationError("step must not be zero")
        if any(math.isnan(v) for v in (self.start, self.end, self.step)):
            raise ConfigurationError("start, end and step must be numbers, not NaN")
        if math.isinf(self.start) or math.isinf(self.step):
            raise ConfigurationError("start and step must be finite")

    @property
    def ascending(self) -> bool:
        return self.step > 0

    @property
    def is_finite(self) -> bool:
        """True when the range reaches its end after finitely many steps."""
        if self.ascending:
            return self.end != math.inf
        return self.end != -math.inf

    def contains(self, index: Number) -> bool:
        """Whether ``index`` is still inside the range."""
        if self.ascending:
            return index < self.end
        return index > self.end

    def count(self, index: Optional[Number] = None) -> int:
        """Number of values produced from ``index`` on (default ``start``).

        Only defined for finite ranges.
        """
        if not self.is_finite:
            raise ConfigurationError("an unbounded range has no count")
        if index is None:
            index = self.start
        return max(0, math.ceil((self.end - index) / self.step))
