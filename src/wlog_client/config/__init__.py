"""Configuration module for the wlog client."""

from .logger_config import setup_logging
from .settings import DEFAULT_ATTEMPTS, DEFAULT_BASE_URL, SECRET_KEY_ENV, LogSettings, SenderConfig

__all__ = ["SenderConfig", "LogSettings", "setup_logging", "DEFAULT_ATTEMPTS", "DEFAULT_BASE_URL", "SECRET_KEY_ENV"]
