"""Lazy sequence engine: resumable sequences and their consumers."""

from .base import LazySequence
from .consumers import as_sequence, batched, collect, take, to_iterable
from .fibonacci import fibonacci, fibonacci_sequence
from .generators import GeneratorSequence, ResumableSequence
from .models import RangeConfig, ResumeSignal, SequenceState, StepResult
from .protocols import AsyncOperation, LoggerProtocol, Resumable
from .ranges import RangeSequence, range_sequence, xrange

__all__ = [
    # Models
    "StepResult",
    "SequenceState",
    "ResumeSignal",
    "RangeConfig",
    # Protocols
    "Resumable",
    "AsyncOperation",
    "LoggerProtocol",
    # Sequences
    "LazySequence",
    "RangeSequence",
    "GeneratorSequence",
    "ResumableSequence",
    "range_sequence",
    "xrange",
    "fibonacci",
    "fibonacci_sequence",
    # Consumers
    "as_sequence",
    "to_iterable",
    "take",
    "collect",
    "batched",
]
