"""Credential lookup for the wlog client."""

from .resolver import CredentialResolver, env_secret_key, resolve_secret_key, static_secret_key, validate_secret_key

__all__ = ["CredentialResolver", "env_secret_key", "static_secret_key", "resolve_secret_key", "validate_secret_key"]
