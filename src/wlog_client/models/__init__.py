"""Request models for the wlog client."""

from .send_request import JSON_MIME, NEWLINE, TEXT_MIME, SendRequest

__all__ = ["SendRequest", "TEXT_MIME", "JSON_MIME", "NEWLINE"]
