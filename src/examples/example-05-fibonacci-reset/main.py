"""
Example 05: Sending Signals into a Generator

``resume(signal)`` passes a value back into the suspended ``yield``.
The Fibonacci sequence uses it to reset itself.
"""

from lazy_sequences import ResumeSignal, fibonacci_sequence


if __name__ == "__main__":
    sequence = fibonacci_sequence()

    for _ in range(7):
        print(f"resume() = {sequence.resume().value}")  # 0 1 1 2 3 5 8

    print(f"resume(RESET) = {sequence.resume(ResumeSignal.RESET).value}")  # 0

    for _ in range(3):
        print(f"resume() = {sequence.resume().value}")  # 1 1 2

    print("\n✅ Signals make generators controllable, not just readable!")
