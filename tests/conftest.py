"""Shared fixtures."""

from pathlib import Path

import pytest

from lazy_sequences.config import AppConfig, get_app_config
from lazy_sequences.line_source import LineSourceGenerator


@pytest.fixture(scope="session")
def app_config() -> AppConfig:
    """Configuration from the environment and any .env file."""
    return get_app_config()


@pytest.fixture(scope="session")
def large_line_source(tmp_path_factory, app_config) -> Path:
    """A line source as large as the one the read timing tests are calibrated on."""
    path = tmp_path_factory.mktemp("sources") / app_config.line_source_path
    generator = LineSourceGenerator(seed=app_config.seed)
    generator.write(path, app_config.total_lines, app_config.sentinel)
    return path


@pytest.fixture
def small_line_source(tmp_path) -> Path:
    """A short line source with mixed line terminators."""
    path = tmp_path / "small.txt"
    path.write_bytes(b"first\nsecond\r\n\nfourth  \nlast")
    return path
