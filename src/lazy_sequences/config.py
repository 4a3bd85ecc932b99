"""Configuration management for the application."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()


@dataclass
class EngineConfig:
    """Sequence engine configuration parameters."""

    max_collect_items: int = 100_000

    def __post_init__(self):
        if self.max_collect_items <= 0:
            raise ConfigurationError("max_collect_items must be positive")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Load engine configuration from environment variables."""
        return cls(
            max_collect_items=int(os.getenv("LAZY_MAX_COLLECT_ITEMS", "100000")),
        )


@dataclass
class RetryConfig:
    """Retry driver configuration parameters.

    A ``max_attempts`` of 0 in the environment means "retry forever" and is
    mapped to ``None``.
    """

    max_attempts: Optional[int] = 5
    delay_seconds: float = 0.0

    def __post_init__(self):
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ConfigurationError("max_attempts must be positive or None")
        if self.delay_seconds < 0:
            raise ConfigurationError("delay_seconds must not be negative")

    @classmethod
    def from_env(cls) -> "RetryConfig":
        """Load retry configuration from environment variables."""
        max_attempts = int(os.getenv("RETRY_MAX_ATTEMPTS", "5"))
        return cls(
            max_attempts=max_attempts or None,
            delay_seconds=float(os.getenv("RETRY_DELAY_SECONDS", "0.0")),
        )


@dataclass
class DemoConfig:
    """Walkthrough configuration parameters."""

    gateway_secret: str = "secret"
    seed: int = 42

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load walkthrough configuration from environment variables."""
        return cls(
            gateway_secret=os.getenv("API_GATEWAY_SECRET", "secret"),
            seed=int(os.getenv("DEMO_SEED", "42")),
        )


def get_engine_config() -> EngineConfig:
    """Get engine configuration."""
    return EngineConfig.from_env()


def get_retry_config() -> RetryConfig:
    """Get retry configuration."""
    return RetryConfig.from_env()


def get_demo_config() -> DemoConfig:
    """Get walkthrough configuration."""
    return DemoConfig.from_env()
