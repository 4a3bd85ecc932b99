"""Lazy Sequences - iterators and generators, one resume at a time."""

__version__ = "0.1.0"

from .candidates import first_accepted, lazy_candidates
from .errors import (
    ConfigurationError,
    LazySequenceError,
    NoAcceptingCandidateError,
    NonTerminatingSequenceError,
)
from .sequence import (
    GeneratorSequence,
    LazySequence,
    RangeConfig,
    RangeSequence,
    ResumeSignal,
    SequenceState,
    StepResult,
    batched,
    collect,
    fibonacci,
    fibonacci_sequence,
    range_sequence,
    take,
    to_iterable,
    xrange,
)

__all__ = [
    "LazySequenceError",
    "ConfigurationError",
    "NonTerminatingSequenceError",
    "NoAcceptingCandidateError",
    "StepResult",
    "SequenceState",
    "ResumeSignal",
    "RangeConfig",
    "LazySequence",
    "RangeSequence",
    "GeneratorSequence",
    "range_sequence",
    "xrange",
    "fibonacci",
    "fibonacci_sequence",
    "to_iterable",
    "take",
    "collect",
    "batched",
    "lazy_candidates",
    "first_accepted",
]
