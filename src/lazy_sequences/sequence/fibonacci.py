"""Fibonacci recurrence that can be reset from the outside."""

from typing import Generator, Optional

from .generators import GeneratorSequence
from .models import is_reset


def fibonacci() -> Generator[int, Optional[object], None]:
    """
    Generator that produces Fibonacci numbers infinitely.

    Sending a reset signal (``ResumeSignal.RESET`` or ``True``) restarts the
    recurrence; the value produced by that same ``send`` is 0.
    """
    current, following = 0, 1
    while True:
        signal = yield current
        current, following = following, current + following
        if is_reset(signal):
            current, following = 0, 1


def fibonacci_sequence() -> GeneratorSequence[int]:
    """Fibonacci numbers as a controllable, infinite sequence."""
    return GeneratorSequence(fibonacci(), accepts_signals=True, finite=False)
