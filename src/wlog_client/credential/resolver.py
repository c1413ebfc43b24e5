"""Secret key resolution.

A resolver is any zero-argument callable returning the key or ``None``. The
sender only calls it when no key was configured explicitly.
"""

from __future__ import annotations

import os
from typing import Callable, Optional

from ..config.settings import SECRET_KEY_ENV
from ..errors import InvalidSecretKeyError, MissingSecretKeyError

CredentialResolver = Callable[[], Optional[str]]


def env_secret_key() -> Optional[str]:
    """Read the secret key from WLOG_KEY; blank counts as unset."""
    value = os.getenv(SECRET_KEY_ENV, "").strip()
    return value or None


def static_secret_key(value: Optional[str]) -> CredentialResolver:
    """Resolver that always returns ``value``."""

    def resolve() -> Optional[str]:
        return value

    return resolve


def validate_secret_key(key: str) -> str:
    """Check that ``key`` can travel in the Authorization header.

    Raises:
        InvalidSecretKeyError: Key has control characters or is not latin-1
    """
    for ch in key:
        if ch in ("\r", "\n"):
            raise InvalidSecretKeyError("contains a line break")
        if (ord(ch) < 0x20 and ch != "\t") or ord(ch) == 0x7F:
            raise InvalidSecretKeyError("contains a control character")
        if ord(ch) > 0xFF:
            raise InvalidSecretKeyError("contains non latin-1 characters")

    return key


def resolve_secret_key(secret_key: str, resolver: Optional[CredentialResolver] = None) -> str:
    """Pick the credential for one exchange.

    Args:
        secret_key: Explicitly configured key, empty if none
        resolver: Fallback lookup, defaults to env_secret_key

    Returns:
        The secret key

    Raises:
        MissingSecretKeyError: Neither source produced a key
        InvalidSecretKeyError: The key cannot be sent as a header value
    """
    key = secret_key or (resolver or env_secret_key)()
    if not key:
        raise MissingSecretKeyError()

    return validate_secret_key(key)
