"""Shared fixtures for wlog client tests."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, List, Optional

import pytest

from wlog_client.config import SECRET_KEY_ENV
from wlog_client.sender import TransportResponse


@dataclass
class RecordedRequest:
    url: str
    headers: Dict[str, str]
    body: bytes
    timeout: float


class FakeTransport:
    """Returns scripted responses and records every request it sees.

    Each script entry is either ``(status, body)`` or an exception instance
    to raise. The last entry repeats once the script runs out.
    """

    def __init__(self, *script):
        self.script = list(script) or [(200, b"")]
        self.requests: List[RecordedRequest] = []

    def post(self, url: str, headers: Dict[str, str], body: BinaryIO, timeout: float) -> TransportResponse:
        self.requests.append(RecordedRequest(url=url, headers=dict(headers), body=body.read(), timeout=timeout))
        step = self.script[min(len(self.requests), len(self.script)) - 1]

        if isinstance(step, BaseException):
            raise step

        status, payload = step
        return TransportResponse(status=status, stream=io.BytesIO(payload))


class UnreadableStream(io.BytesIO):
    def read(self, *args):
        raise ConnectionResetError("connection reset while reading body")


@dataclass
class SleepRecorder:
    delays: List[float] = field(default_factory=list)

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def sleeps() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def no_env_key(monkeypatch) -> None:
    monkeypatch.delenv(SECRET_KEY_ENV, raising=False)


@pytest.fixture
def env_key(monkeypatch) -> Optional[str]:
    monkeypatch.setenv(SECRET_KEY_ENV, "env-secret")
    return "env-secret"
