"""Memory profiling of lazy versus eager consumption."""

import gc
import logging
import time
import tracemalloc
from typing import Any, Callable, Dict, Optional

from .sequence.consumers import collect
from .sequence.protocols import LoggerProtocol
from .sequence.ranges import range_sequence


def profile(operation_func: Callable[[], Any]) -> Dict[str, Any]:
    """
    Run ``operation_func`` under tracemalloc.

    Returns:
        The result, elapsed seconds and peak traced memory in bytes, plus the
        process RSS when psutil is installed
    """
    gc.collect()
    tracemalloc.start()
    start_time = time.perf_counter()
    try:
        result = operation_func()
        elapsed_time = time.perf_counter() - start_time
        _, peak_mem = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    stats = {"result": result, "elapsed_time": elapsed_time, "peak_memory": peak_mem}
    try:
        import psutil
    except ImportError:
        return stats
    stats["rss"] = psutil.Process().memory_info().rss
    return stats


class LazinessComparator:
    """Compares summing a range lazily against materializing it first."""

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or logging.getLogger(__name__)

    def compare(self, count: int = 100_000) -> Dict[str, Dict[str, Any]]:
        """
        Sum ``range_sequence(0, count)`` both ways.

        Returns:
            Profiles keyed by ``lazy`` and ``eager``
        """
        lazy = profile(lambda: sum(range_sequence(0, count)))
        eager = profile(lambda: sum(collect(range_sequence(0, count))))

        self._logger.info(
            f"Peak memory: lazy {lazy['peak_memory'] / 1024:.1f} KB, "
            f"eager {eager['peak_memory'] / 1024:.1f} KB"
        )
        self._logger.info(
            f"Execution time: lazy {lazy['elapsed_time']:.4f}s, "
            f"eager {eager['elapsed_time']:.4f}s"
        )
        return {"lazy": lazy, "eager": eager}
