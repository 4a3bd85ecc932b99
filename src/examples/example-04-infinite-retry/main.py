"""
Example 04: Infinite Sequences for Retries

``xrange(1, inf)`` never ends, which makes it a natural attempt counter.
Each attempt is awaited before the next number is drawn.
"""

import asyncio
import logging

from lazy_sequences.retry import retry_indefinitely

logging.basicConfig(level=logging.INFO, format="%(message)s")


async def long_running_operation():
    """Pretend to do some slow work."""
    await asyncio.sleep(0.1)


if __name__ == "__main__":
    print("Retrying (bounded to 5 attempts for the demo):")
    attempts = asyncio.run(retry_indefinitely(long_running_operation, max_attempts=5))
    print(f"\nMade {attempts} attempts")

    print("\n✅ Infinite sequences are fine as long as you never list() them!")
