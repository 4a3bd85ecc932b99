"""
Example 07: Materializing Safely

collect() refuses to materialize an infinite sequence without a limit
instead of running forever.
"""

from lazy_sequences import NonTerminatingSequenceError, collect, fibonacci_sequence
from lazy_sequences.frames import to_dataframes


if __name__ == "__main__":
    print(f"collect(fibonacci_sequence(), limit=10) = {collect(fibonacci_sequence(), limit=10)}")

    print("\ncollect(fibonacci_sequence()):")
    try:
        collect(fibonacci_sequence())
    except NonTerminatingSequenceError as e:
        print(f"  {e}")

    print("\nFirst DataFrame batch of an infinite sequence:")
    print(next(to_dataframes(fibonacci_sequence(), batch_size=5)))

    print("\n✅ Bound infinite sequences at the point you consume them!")
