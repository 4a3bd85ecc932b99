"""Tests for the Fibonacci sequence."""

from itertools import islice

from lazy_sequences import ResumeSignal, SequenceState, fibonacci, fibonacci_sequence


def test_first_values():
    """Test the first Fibonacci numbers."""
    assert list(islice(fibonacci(), 10)) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_reset_trace():
    """Test the documented trace: seven values, a reset, then three more."""
    sequence = fibonacci_sequence()

    values = [sequence.resume().value for _ in range(7)]
    assert values == [0, 1, 1, 2, 3, 5, 8]

    assert sequence.resume(ResumeSignal.RESET).value == 0
    assert [sequence.resume().value for _ in range(3)] == [1, 1, 2]


def test_reset_with_true():
    """Test that True works as a reset signal, as with generator.send."""
    gen = fibonacci()
    for _ in range(5):
        next(gen)
    assert gen.send(True) == 0
    assert next(gen) == 1


def test_reset_on_first_resume_is_ignored():
    """Test that a signal on a fresh sequence still yields the first value."""
    sequence = fibonacci_sequence()
    assert sequence.resume(ResumeSignal.RESET).value == 0
    assert sequence.resume().value == 1


def test_never_done():
    """Test that the sequence never reports exhaustion."""
    sequence = fibonacci_sequence()
    assert sequence.is_finite is False
    assert not any(sequence.resume().done for _ in range(200))
    assert sequence.state is SequenceState.ACTIVE


def test_send_matches_resume():
    """Test the generator-style send() adapter."""
    sequence = fibonacci_sequence()
    assert [next(sequence) for _ in range(4)] == [0, 1, 1, 2]
    assert sequence.send(ResumeSignal.RESET) == 0
