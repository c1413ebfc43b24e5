"""HTTP sender for delivering log payloads to the wlog endpoint.

This module provides the retry loop and the single-attempt exchange: build the
URL and headers, POST the body, and treat anything other than HTTP 200 as a
failure. Failures are retried with jittered exponential backoff; configuration
errors are raised on the first attempt.
"""

from __future__ import annotations

import platform
import random
import time
from http.client import HTTPException
from typing import Callable, Optional
from urllib.parse import urlsplit, urlunsplit

from loguru import logger

from .. import __version__
from ..config.settings import DEFAULT_BASE_URL, SenderConfig
from ..credential import resolve_secret_key
from ..errors import ConfigurationError, InvalidURLError, ResponseError, TransportError, WlogError
from ..models import JSON_MIME, NEWLINE, TEXT_MIME, SendRequest
from .transport import Transport, default_transport

USER_AGENT = f"wlog-client/{__version__} python/{platform.python_version()}"


def backoff_delay(attempt: int, rand: Callable[[], float] = random.random) -> float:
    """Delay before retrying after ``attempt`` (0-based), uniform in [0, 2**attempt)."""
    return rand() * (2**attempt)


def build_url(base_url: str, path: str) -> str:
    """Join the base URL (or the default host) with a request path.

    Raises:
        InvalidURLError: base_url is malformed or lacks scheme/host
    """
    base = base_url or DEFAULT_BASE_URL

    try:
        parts = urlsplit(base)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise InvalidURLError(base, str(e)) from e

    if not parts.scheme or not parts.netloc:
        raise InvalidURLError(base, "scheme and host are required")

    if parts.scheme.lower() not in ("http", "https"):
        raise InvalidURLError(base, "scheme must be http or https")

    full_path = parts.path.rstrip("/") + "/" + path.lstrip("/")
    return urlunsplit((parts.scheme, parts.netloc, full_path, parts.query, ""))


class HTTPSender:
    """Sends payloads to the wlog endpoint, retrying transient failures.

    The sender keeps no mutable state, so one instance may be shared across
    threads as long as its transport is thread-safe.
    """

    def __init__(
        self,
        config: SenderConfig = SenderConfig(),
        sleep: Callable[[float], None] = time.sleep,
        rand: Callable[[], float] = random.random,
    ):
        """Initialize the HTTP sender.

        Args:
            config: Sender configuration
            sleep: Called with each backoff delay
            rand: Source of uniform floats in [0, 1) for jitter
        """
        self.config = config
        self._sleep = sleep
        self._rand = rand

    @property
    def transport(self) -> Transport:
        return self.config.transport or default_transport

    def send_as_text(self, path: str, data: bytes) -> None:
        """Send ``data`` as text/plain with a trailing newline."""
        self._send(SendRequest.build(path, TEXT_MIME, data, tail=NEWLINE))

    def send_as_json(self, path: str, data: bytes) -> None:
        """Send ``data`` as application/json with a trailing newline."""
        self._send(SendRequest.build(path, JSON_MIME, data, tail=NEWLINE))

    def send(self, path: str, mime: str, data: bytes) -> None:
        """Send ``data`` unchanged with the given MIME type.

        Raises:
            ConfigurationError: Missing key, bad base URL or bad request; not retried
            TransportError: Last network failure once attempts are exhausted
            ResponseError: Last non-200 response once attempts are exhausted
        """
        self._send(SendRequest.build(path, mime, data))

    def _send(self, request: SendRequest) -> None:
        """Run the retry loop for one request."""
        attempts = self.config.attempts
        last_error: Optional[WlogError] = None

        for attempt in range(attempts):
            try:
                self._exchange(request)
                logger.debug(f"Sent {request.content_length} bytes to {request.path} on attempt {attempt + 1}")
                return

            except ConfigurationError as e:
                logger.error(f"Cannot send to {request.path}: {e}")
                raise

            except (TransportError, ResponseError) as e:
                last_error = e

                if attempt < attempts - 1:
                    delay = backoff_delay(attempt, self._rand)
                    logger.warning(f"Send attempt {attempt + 1}/{attempts} to {request.path} failed: {e}. Retrying in {delay:.2f}s...")
                    self._sleep(delay)

        logger.error(f"Failed to send to {request.path} after {attempts} attempts: {last_error}")
        raise last_error

    def _exchange(self, request: SendRequest) -> None:
        """Perform a single POST and check the response.

        Raises:
            MissingSecretKeyError: No credential available
            InvalidURLError: Base URL is malformed
            TransportError: Network failure or unreadable body
            ResponseError: Status other than 200
        """
        key = resolve_secret_key(self.config.secret_key, self.config.credential_resolver)
        url = build_url(self.config.base_url, request.path)

        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": request.mime_type,
            "Authorization": key,
        }

        try:
            response = self.transport.post(url, headers, request.open_body(), self.config.timeout_seconds)
        except OSError as e:
            raise TransportError(f"Network error: {e}") from e

        try:
            result = response.stream.read()
        except (OSError, HTTPException) as e:
            raise TransportError(f"Failed to read response body: {e}") from e
        finally:
            response.stream.close()

        if response.status != 200:
            raise ResponseError(response.status, result.decode("utf-8", errors="replace"))
