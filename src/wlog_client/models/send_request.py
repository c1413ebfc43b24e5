"""Pydantic model for a single send call."""

from __future__ import annotations

import io
from typing import BinaryIO, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidRequestError

# RFC 3986 pchar plus "/"
_PATH_PATTERN = r"^[A-Za-z0-9\-._~!$&'()*+,;=:@%/]*$"
# type "/" subtype, optional parameters
_MIME_PATTERN = r"^[A-Za-z0-9!#$&^_.+\-]+/[A-Za-z0-9!#$&^_.+\-]+(\s*;.*)?$"

TEXT_MIME = "text/plain"
JSON_MIME = "application/json"
NEWLINE = b"\n"


class SendRequest(BaseModel):
    """Payload and destination for one send, shared by every attempt."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(..., pattern=_PATH_PATTERN, description="URL path on the wlog endpoint")
    mime_type: str = Field(..., pattern=_MIME_PATTERN, description="Content-Type of the payload")
    payload: bytes = Field(b"", description="Raw payload bytes")
    tail: Optional[bytes] = Field(None, description="Bytes appended after the payload")

    @field_validator("path")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        """Normalize ``events`` and ``/events`` to the same path."""
        return v if v.startswith("/") else "/" + v

    @classmethod
    def build(cls, path: str, mime_type: str, payload: bytes, tail: Optional[bytes] = None) -> "SendRequest":
        """Validate caller input, raising InvalidRequestError instead of ValidationError."""
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise InvalidRequestError(f"payload must be bytes, got {type(payload).__name__}")

        try:
            return cls(path=path, mime_type=mime_type, payload=bytes(payload), tail=tail)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
            raise InvalidRequestError(f"invalid send request ({fields}): {e.error_count()} validation error(s)") from e

    @property
    def content_length(self) -> int:
        return len(self.payload) + len(self.tail or b"")

    def open_body(self) -> BinaryIO:
        """Return a fresh body stream; a request body can only be consumed once."""
        return io.BytesIO(self.payload + (self.tail or b""))
