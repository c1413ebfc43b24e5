"""Exception types raised by the wlog client.

Configuration errors are raised before any network traffic and are never
retried. Transport and response errors are retried by the sender until the
attempt limit is reached, then the last one is raised to the caller.
"""

from __future__ import annotations


class WlogError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(WlogError):
    """Invalid client setup; identical on every attempt, so never retried."""


class MissingSecretKeyError(ConfigurationError):
    """No secret key configured and none found in the environment."""

    def __init__(self, message: str = "missing wlog secret key"):
        super().__init__(message)


class InvalidSecretKeyError(ConfigurationError):
    """Secret key cannot be sent as an HTTP header value."""

    def __init__(self, reason: str):
        super().__init__(f"invalid wlog secret key: {reason}")
        self.reason = reason


class InvalidURLError(ConfigurationError):
    """Configured base URL could not be parsed."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"invalid wlog base URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class InvalidRequestError(ConfigurationError):
    """Path or MIME type rejected before sending."""


class TransportError(WlogError):
    """Network failure or unreadable response body."""


class ResponseError(WlogError):
    """Endpoint answered with a status other than 200."""

    def __init__(self, status: int, body: str):
        super().__init__(f"wlog: {body}")
        self.status = status
        self.body = body
