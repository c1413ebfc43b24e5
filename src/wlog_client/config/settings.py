"""Configuration for the wlog client.

Configuration values are immutable once built. ``SenderConfig.from_env`` and
``LogSettings`` apply environment variable overrides the same way for every
field: unset means "keep the default", unparsable values are logged and
ignored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

from loguru import logger

from ..errors import ConfigurationError

if TYPE_CHECKING:
    from ..sender.transport import Transport

DEFAULT_BASE_URL = "https://wlog.cloud"
DEFAULT_ATTEMPTS = 8
DEFAULT_TIMEOUT_SECONDS = 30.0

SECRET_KEY_ENV = "WLOG_KEY"
BASE_URL_ENV = "WLOG_URL"
ATTEMPTS_ENV = "WLOG_ATTEMPTS"
TIMEOUT_ENV = "WLOG_TIMEOUT"


@dataclass(frozen=True)
class SenderConfig:
    """Configuration for the HTTP sender."""

    transport: Optional["Transport"] = None  # None = shared UrllibTransport
    secret_key: str = ""  # Empty = ask credential_resolver
    base_url: str = ""  # Empty = DEFAULT_BASE_URL
    max_attempts: int = 0  # 0 = DEFAULT_ATTEMPTS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    credential_resolver: Optional[Callable[[], Optional[str]]] = field(default=None, repr=False)

    def __post_init__(self):
        if self.max_attempts < 0:
            raise ConfigurationError(f"max_attempts must not be negative, got {self.max_attempts}")
        if self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    @property
    def attempts(self) -> int:
        """Attempt limit with the default applied."""
        return self.max_attempts or DEFAULT_ATTEMPTS

    @classmethod
    def from_env(cls, **overrides) -> "SenderConfig":
        """Build a config from WLOG_* environment variables.

        Args:
            **overrides: Explicit field values, applied after the environment

        Returns:
            New SenderConfig instance
        """
        values = {}

        if base_url := os.getenv(BASE_URL_ENV):
            values["base_url"] = base_url

        if attempts := os.getenv(ATTEMPTS_ENV):
            try:
                values["max_attempts"] = int(attempts)
            except ValueError:
                logger.warning(f"Invalid {ATTEMPTS_ENV}: {attempts}")

        if timeout := os.getenv(TIMEOUT_ENV):
            try:
                values["timeout_seconds"] = float(timeout)
            except ValueError:
                logger.warning(f"Invalid {TIMEOUT_ENV}: {timeout}")

        values.update(overrides)
        return cls(**values)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class LogSettings:
    """Logging sinks used by ``setup_logging``."""

    level: str = field(default_factory=lambda: os.getenv("WLOG_LOG_LEVEL", "INFO").upper())
    to_console: bool = field(default_factory=lambda: _env_flag("WLOG_LOG_TO_CONSOLE", True))
    to_file: bool = field(default_factory=lambda: _env_flag("WLOG_LOG_TO_FILE", False))
    log_file_path: Path = field(default_factory=lambda: Path(os.getenv("WLOG_LOG_FILE", "wlog_client.log")))
    rotation: str = field(default_factory=lambda: os.getenv("WLOG_LOG_ROTATION", "10 MB"))
    retention: str = field(default_factory=lambda: os.getenv("WLOG_LOG_RETENTION", "7 days"))
