"""
Centralized configuration with environment variable overrides.

Scheduling defaults and logging settings are configurable here.
The scheduling rules themselves (tie-breaking, default priority of
unknown clients) are fixed behavior and deliberately not exposed.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class SchedulingConfig:
    """Defaults applied by the scheduling operations."""

    default_alternative_count: int = _safe_int("DEFAULT_ALTERNATIVE_COUNT", "3")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    scheduling: SchedulingConfig = field(default_factory=SchedulingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "training-scheduler")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.scheduling.default_alternative_count < 1:
        raise ValueError(
            "DEFAULT_ALTERNATIVE_COUNT must be >= 1, "
            f"got {config.scheduling.default_alternative_count}"
        )
    if not isinstance(getattr(logging, config.log_level.upper(), None), int):
        raise ValueError(f"LOG_LEVEL is not a known level name, got {config.log_level!r}")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.app_name)
    return config


# Singleton instance
settings = load_config()
