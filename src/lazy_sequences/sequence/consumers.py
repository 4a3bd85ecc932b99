"""Consumption helpers: iteration, bounded materialization and batching."""

import logging
from itertools import islice
from typing import Iterable, Iterator, List, Optional, TypeVar, Union

from ..config import get_engine_config
from ..errors import ConfigurationError, NonTerminatingSequenceError
from .base import LazySequence
from .generators import GeneratorSequence, ResumableSequence
from .protocols import Resumable

T = TypeVar("T")

SequenceLike = Union[LazySequence[T], Resumable[T], Iterable[T]]

logger = logging.getLogger(__name__)


def as_sequence(source: SequenceLike) -> LazySequence[T]:
    """Return ``source`` as a LazySequence.

    Objects with their own ``resume`` step are driven through it; plain
    iterables are wrapped with ``GeneratorSequence``.
    """
    if isinstance(source, LazySequence):
        return source
    if isinstance(source, Resumable):
        return ResumableSequence(source, finite=getattr(source, "is_finite", None))
    return GeneratorSequence(source)


def to_iterable(sequence: SequenceLike) -> Iterator[T]:
    """Adapt a sequence for ``for`` loops and bulk collection."""
    return iter(as_sequence(sequence))


def take(sequence: SequenceLike, count: int) -> Iterator[T]:
    """
    Lazily yield at most ``count`` values.

    Args:
        sequence: Sequence or iterable to read from
        count: Maximum number of values

    Yields:
        The first ``count`` values of the sequence
    """
    if count < 0:
        raise ConfigurationError("count must not be negative")
    return islice(as_sequence(sequence), count)


def collect(
    sequence: SequenceLike,
    limit: Optional[int] = None,
    *,
    max_items: Optional[int] = None,
) -> List[T]:
    """
    Materialize a sequence into a list.

    With a ``limit``, at most ``limit`` values are collected. Without one, a
    sequence known to be finite is collected in full, a sequence known to be
    infinite is rejected straight away, and a sequence of unknown length must
    finish within ``max_items`` values (defaulting to the configured
    ``max_collect_items``).

    Telling a bounded sequence from an unfinished one takes one extra resume,
    so on overflow the sequence has been advanced ``max_items + 1`` times;
    the error's ``collected`` reports that count.

    Args:
        sequence: Sequence or iterable to materialize
        limit: Maximum number of values to collect
        max_items: Safety bound used when no limit is given

    Returns:
        List of collected values in resume order

    Raises:
        NonTerminatingSequenceError: If no limit is given and the sequence is
            infinite or does not finish within the safety bound
    """
    seq = as_sequence(sequence)

    if limit is not None:
        if limit < 0:
            raise ConfigurationError("limit must not be negative")
        return list(islice(seq, limit))

    if seq.is_finite is True:
        values = list(seq)
        logger.debug(f"Collected {len(values):,} values from {seq!r}")
        return values

    if seq.is_finite is False:
        raise NonTerminatingSequenceError(
            f"{seq!r} is infinite; pass an explicit limit to collect it"
        )

    bound = max_items if max_items is not None else get_engine_config().max_collect_items
    if bound <= 0:
        raise ConfigurationError("max_items must be positive")

    values = list(islice(seq, bound))
    if len(values) == bound and not seq.resume().done:
        logger.warning(f"Gave up collecting {seq!r} after {bound:,} values")
        raise NonTerminatingSequenceError(
            f"{seq!r} did not finish within {bound:,} values; pass an explicit limit",
            collected=bound + 1,
        )

    logger.debug(f"Collected {len(values):,} values from {seq!r}")
    return values


def batched(sequence: SequenceLike, size: int) -> Iterator[List[T]]:
    """
    Group a sequence into lists of ``size`` values.

    Args:
        sequence: Sequence or iterable to batch
        size: Number of values per batch

    Yields:
        Lists of values; the last one may be shorter
    """
    if size <= 0:
        raise ConfigurationError("size must be positive")
    return _batched(as_sequence(sequence), size)


def _batched(seq: LazySequence[T], size: int) -> Iterator[List[T]]:
    batch: List[T] = []
    for value in seq:
        batch.append(value)
        if len(batch) >= size:
            yield batch
            batch = []

    # Yield remaining values
    if batch:
        yield batch
