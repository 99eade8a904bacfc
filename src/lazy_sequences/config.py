"""Configuration management for the application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class AppConfig:
    """Line source and consumer budget parameters."""

    line_source_path: str = "TestLines.txt"
    encoding: str = "utf-8"
    total_lines: int = 1187770
    seed: int = 42
    sentinel: str = "That's ten!"
    read_budget_seconds: float = 5.0
    cancel_after_ms: int = 50

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.total_lines < 10:
            raise ValueError("total_lines must be at least 10")
        if not self.sentinel:
            raise ValueError("sentinel must not be empty")
        if self.read_budget_seconds <= 0:
            raise ValueError("read_budget_seconds must be positive")
        if self.cancel_after_ms < 0:
            raise ValueError("cancel_after_ms must not be negative")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables."""
        return cls(
            line_source_path=os.getenv("LINE_SOURCE_PATH", "TestLines.txt"),
            encoding=os.getenv("LINE_SOURCE_ENCODING", "utf-8"),
            total_lines=int(os.getenv("TOTAL_LINES", "1187770")),
            seed=int(os.getenv("LINE_SOURCE_SEED", "42")),
            sentinel=os.getenv("SENTINEL", "That's ten!"),
            read_budget_seconds=float(os.getenv("READ_BUDGET_SECONDS", "5.0")),
            cancel_after_ms=int(os.getenv("CANCEL_AFTER_MS", "50")),
        )


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()
