"""HTTP transports used by the sender.

A transport performs exactly one POST and hands back the status and an open
body stream. It never retries; that is the sender's job. Implementations must
be safe to share between threads.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from http.client import HTTPException
from typing import BinaryIO, Dict, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..errors import TransportError


@dataclass
class TransportResponse:
    """Status code plus the unread response body."""

    status: int
    stream: BinaryIO


class Transport(Protocol):
    """Anything able to POST a body and return a TransportResponse.

    ``post`` must signal a failed exchange by raising TransportError or an
    OSError subclass; the sender wraps OSError into TransportError and
    retries both. Any other exception propagates out of the sender unchanged
    and ends the retry loop. Error statuses are not failures here: return
    them as a TransportResponse so the sender can read the body.
    """

    def post(self, url: str, headers: Dict[str, str], body: BinaryIO, timeout: float) -> TransportResponse: ...


class UrllibTransport:
    """Default transport built on urllib.request.

    Holds no state, so one instance can serve every sender in the process.
    Non-2xx statuses that urllib raises as HTTPError are returned as normal
    responses so the caller can read the error body.
    """

    def post(self, url: str, headers: Dict[str, str], body: BinaryIO, timeout: float) -> TransportResponse:
        data = body.read()
        req = Request(url, data=data, headers=headers, method="POST")

        try:
            response = urlopen(req, timeout=timeout)  # nosec B310
        except HTTPError as e:
            stream = e if e.fp is not None else io.BytesIO(b"")
            return TransportResponse(status=e.code, stream=stream)
        except URLError as e:
            raise TransportError(f"Network error: {e.reason}") from e
        except (OSError, HTTPException) as e:
            # Timeouts and resets surface as OSError, malformed replies as HTTPException
            raise TransportError(f"Network error: {e}") from e

        return TransportResponse(status=response.status, stream=response)


default_transport = UrllibTransport()
