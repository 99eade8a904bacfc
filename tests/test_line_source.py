"""Tests for line_source module."""

import tempfile
from pathlib import Path

import pytest

from lazy_sequences.line_source import LineSourceGenerator
from lazy_sequences.producers import get_lines


def test_generator_initialization():
    """Test that LineSourceGenerator can be initialized."""
    generator = LineSourceGenerator(seed=42)
    assert generator.faker is not None
    assert generator.pool_size == 1000


def test_invalid_pool_size():
    """Test that an empty sentence pool is rejected."""
    with pytest.raises(ValueError, match="pool_size must be positive"):
        LineSourceGenerator(pool_size=0)


def test_sentinel_placement():
    """Test that the sentinel appears only on its line."""
    generator = LineSourceGenerator(seed=42, pool_size=20)

    lines = list(generator.generate_lines(50, "That's ten!"))

    assert len(lines) == 50
    assert lines[9] == "That's ten!"
    assert all("That's ten!" not in line for i, line in enumerate(lines) if i != 9)
    assert all(line for line in lines)


def test_sentinel_outside_range():
    """Test that the sentinel must fall within the generated lines."""
    generator = LineSourceGenerator(seed=42, pool_size=5)

    with pytest.raises(ValueError, match="sentinel_line"):
        next(generator.generate_lines(5, "stop", sentinel_line=6))


def test_same_seed_same_lines():
    """Test that the same seed reproduces the same source."""
    lines1 = list(LineSourceGenerator(seed=7, pool_size=10).generate_lines(30, "stop"))
    lines2 = list(LineSourceGenerator(seed=7, pool_size=10).generate_lines(30, "stop"))

    assert lines1 == lines2


def test_write_round_trips_through_get_lines():
    """Test writing a source and reading it back lazily."""
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "nested" / "lines.txt"
        generator = LineSourceGenerator(seed=42, pool_size=10)

        stats = generator.write(output_path, 25, "That's ten!")

        assert stats["num_lines"] == 25
        assert stats["file_size_bytes"] > 0
        assert stats["file_path"] == str(output_path)

        lines = list(get_lines(output_path))
        assert len(lines) == 25
        assert lines == list(
            LineSourceGenerator(seed=42, pool_size=10).generate_lines(25, "That's ten!")
        )


def test_write_rejects_bad_sentinel_without_touching_file():
    """Test that an invalid sentinel line leaves an existing file intact."""
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "lines.txt"
        output_path.write_text("precious\n", encoding="utf-8")
        generator = LineSourceGenerator(seed=1, pool_size=5)

        with pytest.raises(ValueError, match="sentinel_line"):
            generator.write(output_path, 5, "That's ten!")

        assert output_path.read_text(encoding="utf-8") == "precious\n"
