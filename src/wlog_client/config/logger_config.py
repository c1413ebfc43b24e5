"""Logger configuration for applications using the wlog client."""

import sys
from typing import Optional

from loguru import logger

from .settings import LogSettings

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"


def setup_logging(settings: Optional[LogSettings] = None) -> None:
    """Replace loguru's default handler with the sinks named in ``settings``.

    Console output goes to stderr so it never mixes with payloads a CLI
    writes to stdout. The file sink rotates, compresses and is enqueued so
    senders on several threads can share it.
    """
    settings = settings or LogSettings()

    logger.remove()

    if settings.to_console:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=settings.level, colorize=True)

    if settings.to_file:
        logger.add(
            str(settings.log_file_path),
            format=FILE_FORMAT,
            level=settings.level,
            rotation=settings.rotation,
            retention=settings.retention,
            compression="gz",
            enqueue=True,
        )
        logger.debug(f"wlog client logging to {settings.log_file_path} at {settings.level}")
