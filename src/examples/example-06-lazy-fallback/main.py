"""
Example 06: Avoiding Expensive Computations

Candidates are computed one at a time. Once one is accepted, the
remaining (expensive) computations never run.
"""

from lazy_sequences import first_accepted, lazy_candidates


def expensive(name, result):
    def compute():
        print(f"  computing {name}...")
        return result

    return compute


if __name__ == "__main__":
    print("Second candidate is accepted, third is never computed:")
    winner = first_accepted(
        lazy_candidates(
            expensive("api gateway header", None),
            expensive("cloudflare header", "203.0.113.7"),
            expensive("request ip", "10.0.0.1"),
        )
    )
    print(f"  -> {winner}")

    print("\n✅ Laziness skips work whose result would be discarded!")
