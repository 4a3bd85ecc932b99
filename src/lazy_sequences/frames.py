"""Materialize sequences into pandas DataFrames."""

import logging
from typing import Iterator, List, Optional

import pandas as pd

from .sequence.consumers import SequenceLike, as_sequence, batched, collect

logger = logging.getLogger(__name__)


def to_dataframes(
    sequence: SequenceLike, batch_size: int = 1000, column: str = "value"
) -> Iterator[pd.DataFrame]:
    """
    Transform a sequence into DataFrames, one per batch.

    Only one batch is held in memory at a time, so an infinite sequence can
    be consumed as long as the caller stops reading frames.

    Args:
        sequence: Sequence or iterable to read from
        batch_size: Number of values per DataFrame
        column: Name of the value column

    Yields:
        DataFrames with ``column``, ``position`` and ``batch_number`` columns
    """
    return _to_dataframes(batched(as_sequence(sequence), batch_size), column)


def _to_dataframes(batches: Iterator[List], column: str) -> Iterator[pd.DataFrame]:
    position = 0
    for batch_num, batch in enumerate(batches, 1):
        df = pd.DataFrame({column: batch})
        df["position"] = range(position, position + len(batch))
        df["batch_number"] = batch_num
        position += len(batch)

        logger.debug(f"Created DataFrame batch {batch_num} with {len(df)} values")
        yield df


def collect_frame(
    sequence: SequenceLike, limit: Optional[int] = None, column: str = "value"
) -> pd.DataFrame:
    """
    Materialize a sequence into a single DataFrame.

    Follows the same bounds as ``collect``: an infinite sequence needs a limit.
    """
    values = collect(sequence, limit)
    df = pd.DataFrame({column: values})
    logger.info(f"Materialized {len(df):,} values into a DataFrame")
    return df
