"""
Example 02: Plugging into for Loops and list()

Every sequence implements __iter__() and __next__(), so the same
range works with for loops, list() and unpacking.
"""

from lazy_sequences import collect, range_sequence


if __name__ == "__main__":
    print("Loop prints numbers from 0 to 9 (inclusive):")
    for number in range_sequence(0, 10):
        print(f"  {number}")

    numbers = [*range_sequence(0, 10)]
    print(f"\n[*range_sequence(0, 10)] = {numbers}")
    print(f"collect(range_sequence(0, 10)) = {collect(range_sequence(0, 10))}")

    print("\n✅ Built-in iterables (str, list, dict, set) follow the same protocol!")
