"""Tests for consumption helpers."""

from itertools import count

import pytest

from lazy_sequences import (
    ConfigurationError,
    GeneratorSequence,
    NonTerminatingSequenceError,
    ResumeSignal,
    StepResult,
    batched,
    collect,
    fibonacci_sequence,
    range_sequence,
    take,
    to_iterable,
)
from lazy_sequences.sequence import Resumable, ResumableSequence, as_sequence


def test_collect_with_limit_on_infinite_sequence():
    """Test that an explicit limit bounds an infinite sequence."""
    assert collect(fibonacci_sequence(), limit=7) == [0, 1, 1, 2, 3, 5, 8]
    assert collect(range_sequence(), limit=0) == []


def test_collect_without_limit_on_infinite_sequence():
    """Test that unbounded materialization of an infinite sequence fails fast."""
    with pytest.raises(NonTerminatingSequenceError, match="infinite"):
        collect(fibonacci_sequence())
    with pytest.raises(NonTerminatingSequenceError, match="infinite"):
        collect(range_sequence(0))


def test_collect_unknown_length_within_bound():
    """Test that finite iterables of unknown length are collected."""
    assert collect(iter("abc"), max_items=3) == ["a", "b", "c"]
    assert collect(x * x for x in range(4)) == [0, 1, 4, 9]


def test_collect_unknown_length_over_bound():
    """Test that an endless iterable of unknown length hits the bound."""
    with pytest.raises(NonTerminatingSequenceError, match="did not finish") as exc_info:
        collect(count(), max_items=50)
    assert exc_info.value.collected == 51


def test_collect_overflow_advances_one_past_bound():
    """Test that the extra resume used to detect overflow is reported."""
    counter = count()
    with pytest.raises(NonTerminatingSequenceError) as exc_info:
        collect(counter, max_items=5)
    assert next(counter) == exc_info.value.collected == 6


def test_collect_finite_range_longer_than_bound(monkeypatch):
    """Test that statically finite sequences ignore the safety bound."""
    monkeypatch.setenv("LAZY_MAX_COLLECT_ITEMS", "10")
    assert collect(range_sequence(0, 20)) == list(range(20))
    assert len(collect(range_sequence(0, 100_001), max_items=100)) == 100_001


def test_collect_uses_configured_bound(monkeypatch):
    """Test that the default bound comes from the environment."""
    monkeypatch.setenv("LAZY_MAX_COLLECT_ITEMS", "10")
    with pytest.raises(NonTerminatingSequenceError):
        collect(count())
    assert collect(iter(range(10))) == list(range(10))


def test_collect_rejects_negative_limit():
    """Test that a negative limit is a configuration error."""
    with pytest.raises(ConfigurationError, match="limit"):
        collect(range_sequence(0, 3), limit=-1)


def test_collect_resumes_from_current_cursor():
    """Test that collection continues where earlier resumes stopped."""
    sequence = range_sequence(0, 5)
    sequence.resume()
    assert collect(sequence) == [1, 2, 3, 4]
    assert collect(sequence) == []


def test_to_iterable_wraps_plain_iterables():
    """Test that to_iterable adapts both sequences and plain iterables."""
    sequence = range_sequence(0, 3)
    assert to_iterable(sequence) is sequence
    assert isinstance(to_iterable([1, 2]), GeneratorSequence)
    assert list(to_iterable([1, 2])) == [1, 2]


def test_take_is_lazy():
    """Test that take only pulls the requested number of values."""
    sequence = range_sequence(0)
    assert list(take(sequence, 3)) == [0, 1, 2]
    assert sequence.resume().value == 3


def test_batched():
    """Test grouping values into batches."""
    assert list(batched(range_sequence(0, 7), 3)) == [[0, 1, 2], [3, 4, 5], [6]]
    assert list(batched(range_sequence(0, 0), 3)) == []


def test_batched_rejects_bad_size():
    """Test that the batch size must be positive."""
    with pytest.raises(ConfigurationError, match="size must be positive"):
        batched(range_sequence(0, 3), 0)


class Countdown:
    """Object with its own resume step, not a LazySequence."""

    is_finite = True

    def __init__(self, start):
        self.current = start
        self.signals = []

    def resume(self, signal=None):
        self.signals.append(signal)
        if self.current <= 0:
            return StepResult("liftoff", True)
        self.current -= 1
        return StepResult(self.current + 1, False)


def test_resumable_objects_are_driven_through_resume():
    """Test that consumers accept any object following the resume protocol."""
    countdown = Countdown(3)
    assert isinstance(countdown, Resumable)

    sequence = as_sequence(countdown)
    assert isinstance(sequence, ResumableSequence)
    assert sequence.is_finite is True
    assert collect(sequence) == [3, 2, 1]
    assert sequence.resume() == StepResult("liftoff", True)
    assert len(countdown.signals) == 4


def test_resumable_objects_receive_signals():
    """Test that signals reach the wrapped object."""
    countdown = Countdown(2)
    as_sequence(countdown).resume(ResumeSignal.RESET)
    assert countdown.signals == [ResumeSignal.RESET]
