"""
Example 01: An Iterator by Hand

An iterator is any object with a ``resume`` step that follows the
iteration protocol: every call returns a value and a ``done`` flag.
The flag is what tells the consumer when to stop.
"""

from lazy_sequences import range_sequence


if __name__ == "__main__":
    iterator = range_sequence(0, 10)

    print("Calling resume() until done:")
    result = iterator.resume()
    while not result.done:
        print(f"  {result.value}")
        result = iterator.resume()

    print(f"\nFinal step result: {result}")
    print(f"Resuming again: {iterator.resume()}  (still done, never an error)")

    print("\n✅ Exhausted iterators stay exhausted!")
