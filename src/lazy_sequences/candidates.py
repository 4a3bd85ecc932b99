"""Lazy fallback chains: compute candidates one by one, stop at the first good one."""

import logging
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, TypeVar

from .errors import NoAcceptingCandidateError
from .sequence.protocols import LoggerProtocol

T = TypeVar("T")

module_logger = logging.getLogger(__name__)


def lazy_candidates(*producers: Callable[[], T]) -> Iterator[T]:
    """
    Generator that computes each candidate only when it is asked for.

    Args:
        producers: Zero-argument callables, in order of preference

    Yields:
        The result of each producer, one per resume
    """
    for produce in producers:
        yield produce()


def first_accepted(
    candidates: Iterable[T],
    *,
    context: Optional[Mapping[str, Any]] = None,
    message: str = "No candidate was accepted.",
    logger: Optional[LoggerProtocol] = None,
    accept: Callable[[T], bool] = bool,
) -> T:
    """
    Return the first accepted candidate.

    Consumption stops as soon as a candidate is accepted, so with
    ``lazy_candidates`` the remaining producers never run.

    Args:
        candidates: Candidates in order of preference
        context: Structured record logged (and attached to the error) when
            nothing is accepted
        message: Log and error message
        logger: Logger instance (defaults to module logger)
        accept: Predicate deciding whether a candidate is good enough

    Returns:
        The first candidate for which ``accept`` is true

    Raises:
        NoAcceptingCandidateError: If every candidate was rejected
    """
    for candidate in candidates:
        if accept(candidate):
            return candidate

    record = dict(context or {})
    (logger or module_logger).error(f"{message} {record}", extra={"candidates": record})
    raise NoAcceptingCandidateError(message, record)
