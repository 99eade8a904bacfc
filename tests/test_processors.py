"""Tests for processors module."""

import pandas as pd
import pytest

from lazy_sequences.processors import batch_lines, line_frames
from lazy_sequences.producers import get_lines


def test_batch_lines_invalid_size():
    """Test that non-positive batch sizes are rejected before any line is pulled."""
    with pytest.raises(ValueError, match="batch_size must be positive"):
        batch_lines(iter(["a"]), 0)


def test_batch_lines_keeps_partial_batch():
    """Test batching with a remainder."""
    assert list(batch_lines(["a", "b", "c", "d", "e"], 2)) == [["a", "b"], ["c", "d"], ["e"]]


def test_batch_lines_empty_input():
    """Test that no lines produce no batches."""
    assert list(batch_lines([], 3)) == []


def test_batch_lines_pulls_one_batch_at_a_time():
    """Test that only the lines of the current batch are pulled."""
    pulled = []

    def lines():
        for i in range(100):
            pulled.append(i)
            yield str(i)

    batches = batch_lines(lines(), 10)

    assert next(batches) == [str(i) for i in range(10)]
    assert len(pulled) == 10


def test_line_frames_number_lines_across_batches(small_line_source):
    """Test frames built from a lazy line stream."""
    frames = list(line_frames(get_lines(small_line_source), batch_size=2))

    assert len(frames) == 3
    assert list(frames[0].columns) == ["line_number", "text", "length", "batch_number"]

    df = pd.concat(frames, ignore_index=True)
    assert df["line_number"].tolist() == [1, 2, 3, 4, 5]
    assert df["text"].tolist() == ["first", "second", "", "fourth  ", "last"]
    assert df["length"].tolist() == [5, 6, 0, 8, 4]
    assert df["batch_number"].tolist() == [1, 1, 2, 2, 3]
