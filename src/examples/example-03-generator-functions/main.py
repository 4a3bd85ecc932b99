"""
Example 03: Generator Functions

A generator function runs until it hits ``yield`` and suspends there.
An iterative algorithm becomes a series of non-continuous steps.
"""

from lazy_sequences import GeneratorSequence, xrange


if __name__ == "__main__":
    gen = xrange(0, 10, 3)
    print(f"iter(gen) is gen = {iter(gen) is gen}")

    print("\nConsuming xrange(0, 10, 3) with next():")
    print(f"  next(gen) = {next(gen)}")
    print(f"  next(gen) = {next(gen)}")

    print("\nThe same generator through the resume contract:")
    sequence = GeneratorSequence(gen)
    print(f"  resume() = {sequence.resume()}")
    print(f"  resume() = {sequence.resume()}")
    print(f"  resume() = {sequence.resume()}")

    print("\n✅ Generators are iterators with suspended execution!")
