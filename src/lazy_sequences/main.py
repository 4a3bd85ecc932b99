"""Main entry point: walks through iterators and generators step by step."""

import asyncio
import logging
import sys

from .client_ip import resolve_client_ip
from .config import get_demo_config, get_retry_config
from .demo_data import RequestFactory
from .errors import NoAcceptingCandidateError
from .profiling import LazinessComparator
from .retry import retry_indefinitely
from .sequence import ResumeSignal, collect, fibonacci_sequence, range_sequence, xrange

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def section(title: str):
    logger.info("\n" + "-" * 80)
    logger.info(title)
    logger.info("-" * 80)


def use_range():
    """Drive an iterator by hand with explicit resume calls."""
    sequence = range_sequence(0, 10)
    result = sequence.resume()
    while not result.done:
        logger.info(f"  {result.value}")
        result = sequence.resume()


def use_iterable():
    """Same range through the iterator protocol."""
    for number in range_sequence(0, 10):
        logger.info(f"  {number}")
    numbers = collect(range_sequence(0, 10))
    logger.info(f"  collect(range_sequence(0, 10)) = {numbers}")
    logger.info(f"  list(xrange(0, 10, 3)) = {list(xrange(0, 10, 3))}")


def use_fibonacci():
    """Reproduce the reset trace of the Fibonacci sequence."""
    sequence = fibonacci_sequence()
    for _ in range(7):
        logger.info(f"  resume() -> {sequence.resume().value}")
    logger.info(f"  resume(RESET) -> {sequence.resume(ResumeSignal.RESET).value}")
    for _ in range(3):
        logger.info(f"  resume() -> {sequence.resume().value}")


def use_client_ip(secret: str, seed: int):
    """Resolve client IPs for each kind of fake request."""
    factory = RequestFactory(secret, seed=seed)
    for request in factory.requests():
        try:
            logger.info(f"  {request.headers} / {request.ip} -> {resolve_client_ip(request, secret)}")
        except NoAcceptingCandidateError as e:
            logger.info(f"  {request.headers} / {request.ip} -> {e}")


async def long_running_operation():
    await asyncio.sleep(0)


def main() -> int:
    """Main execution function."""
    setup_logging(verbose="-v" in sys.argv[1:])
    logger.info("Starting iterators and generators walkthrough")
    logger.info("=" * 80)

    try:
        demo_config = get_demo_config()
        retry_config = get_retry_config()

        section("STEP 1: Using an iterator by hand")
        use_range()

        section("STEP 2: Iterables in for loops and bulk collection")
        use_iterable()

        section("STEP 3: Retrying with an infinite sequence")
        attempts = asyncio.run(
            retry_indefinitely(
                long_running_operation,
                max_attempts=retry_config.max_attempts,
                delay_seconds=retry_config.delay_seconds,
            )
        )
        logger.info(f"  Stopped after {attempts} attempts")

        section("STEP 4: Sending signals into a generator")
        use_fibonacci()

        section("STEP 5: Avoiding expensive computations")
        use_client_ip(demo_config.gateway_secret, demo_config.seed)

        section("STEP 6: Memory cost of materialization")
        LazinessComparator(logger).compare(100_000)

        logger.info("\nWalkthrough completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
