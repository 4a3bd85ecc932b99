"""Exception hierarchy for lazy sequences."""

from typing import Any, Dict, Mapping, Optional


class LazySequenceError(Exception):
    """Base class for all lazy sequence errors."""


class ConfigurationError(LazySequenceError, ValueError):
    """Raised when a sequence is constructed with invalid configuration."""


class NonTerminatingSequenceError(LazySequenceError):
    """Raised when an unbounded materialization is requested for a sequence
    that is not known to finish."""

    def __init__(self, message: str, collected: int = 0):
        super().__init__(message)
        self.collected = collected


class NoAcceptingCandidateError(LazySequenceError):
    """Raised when every candidate of a fallback chain was rejected."""

    def __init__(self, message: str, context: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.context: Dict[str, Any] = dict(context or {})
