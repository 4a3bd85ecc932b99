"""Retry driver: an infinite sequence of attempt numbers around an async operation."""

import asyncio
import logging
import math
from itertools import islice
from typing import Optional

from .errors import ConfigurationError
from .sequence.protocols import AsyncOperation, LoggerProtocol
from .sequence.ranges import xrange


async def retry_indefinitely(
    operation: AsyncOperation,
    *,
    max_attempts: Optional[int] = None,
    delay_seconds: float = 0.0,
    logger: Optional[LoggerProtocol] = None,
) -> int:
    """
    Run ``operation`` once per attempt number from ``xrange(1, inf)``.

    Each attempt is awaited before the next attempt number is drawn, so
    attempts never overlap. Exceptions raised by the operation are not
    caught here.

    Args:
        operation: Coroutine function to run on every attempt
        max_attempts: Stop after this many attempts (None runs forever)
        delay_seconds: Pause between attempts
        logger: Logger instance (defaults to module logger)

    Returns:
        Number of attempts made
    """
    if max_attempts is not None and max_attempts <= 0:
        raise ConfigurationError("max_attempts must be positive or None")

    log = logger or logging.getLogger(__name__)
    attempts = xrange(1, math.inf)
    if max_attempts is not None:
        attempts = islice(attempts, max_attempts)

    made = 0
    for nth_try in attempts:
        if made and delay_seconds:
            await asyncio.sleep(delay_seconds)
        log.info(f"{nth_try}. try:")
        await operation()
        made = nth_try

    return made
