"""wlog client - deliver log payloads to the wlog endpoint with retries."""

__version__ = "0.1.0"

from .config import SenderConfig, setup_logging  # noqa: E402
from .errors import (  # noqa: E402
    ConfigurationError,
    InvalidRequestError,
    InvalidSecretKeyError,
    InvalidURLError,
    MissingSecretKeyError,
    ResponseError,
    TransportError,
    WlogError,
)
from .sender import HTTPSender  # noqa: E402

# Built once at import; credentials are still looked up per exchange
DEFAULT_CONFIG = SenderConfig()
default_sender = HTTPSender(DEFAULT_CONFIG)


def send_as_text(path: str, data: bytes) -> None:
    """Send ``data`` as text/plain with the default sender."""
    default_sender.send_as_text(path, data)


def send_as_json(path: str, data: bytes) -> None:
    """Send ``data`` as application/json with the default sender."""
    default_sender.send_as_json(path, data)


def send(path: str, mime: str, data: bytes) -> None:
    """Send ``data`` with a caller-chosen MIME type using the default sender."""
    default_sender.send(path, mime, data)


__all__ = [
    "HTTPSender",
    "SenderConfig",
    "DEFAULT_CONFIG",
    "default_sender",
    "send_as_text",
    "send_as_json",
    "send",
    "setup_logging",
    "WlogError",
    "ConfigurationError",
    "MissingSecretKeyError",
    "InvalidSecretKeyError",
    "InvalidURLError",
    "InvalidRequestError",
    "TransportError",
    "ResponseError",
]
