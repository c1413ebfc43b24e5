"""HTTP transport module for sending payloads to the wlog endpoint."""

from .http_sender import HTTPSender, backoff_delay, build_url
from .transport import Transport, TransportResponse, UrllibTransport, default_transport

__all__ = ["HTTPSender", "Transport", "TransportResponse", "UrllibTransport", "default_transport", "backoff_delay", "build_url"]
