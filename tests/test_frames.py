"""Tests for frames module."""

import pandas as pd
import pytest

from lazy_sequences import (
    ConfigurationError,
    NonTerminatingSequenceError,
    fibonacci_sequence,
    range_sequence,
    take,
)
from lazy_sequences.frames import collect_frame, to_dataframes


def test_to_dataframes_batches():
    """Test splitting a sequence into DataFrame batches."""
    frames = list(to_dataframes(range_sequence(0, 25, 5), batch_size=2))

    assert [len(df) for df in frames] == [2, 2, 1]
    assert list(frames[0].columns) == ["value", "position", "batch_number"]
    assert frames[1]["value"].tolist() == [10, 15]
    assert frames[1]["position"].tolist() == [2, 3]
    assert frames[2]["batch_number"].tolist() == [3]


def test_to_dataframes_on_infinite_sequence():
    """Test that an infinite sequence can be read frame by frame."""
    frames = to_dataframes(fibonacci_sequence(), batch_size=5, column="fib")
    first = next(frames)
    second = next(frames)

    assert first["fib"].tolist() == [0, 1, 1, 2, 3]
    assert second["fib"].tolist() == [5, 8, 13, 21, 34]


def test_collect_frame():
    """Test materializing into a single DataFrame."""
    df = collect_frame(take(fibonacci_sequence(), 6))

    assert isinstance(df, pd.DataFrame)
    assert df["value"].tolist() == [0, 1, 1, 2, 3, 5]


def test_collect_frame_requires_limit_for_infinite_sequences():
    """Test that the materialization bound still applies."""
    with pytest.raises(NonTerminatingSequenceError):
        collect_frame(fibonacci_sequence())
    assert len(collect_frame(fibonacci_sequence(), limit=3)) == 3


def test_to_dataframes_rejects_bad_batch_size_at_call():
    """Test that the batch size is validated before any frame is requested."""
    with pytest.raises(ConfigurationError, match="size must be positive"):
        to_dataframes(range_sequence(0, 3), batch_size=0)
