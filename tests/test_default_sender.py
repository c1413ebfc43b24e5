"""Tests for the module-level convenience functions."""

import pytest

import wlog_client
from conftest import FakeTransport
from wlog_client import DEFAULT_CONFIG, SenderConfig
from wlog_client.errors import MissingSecretKeyError


def test_default_config_is_plain_defaults():
    assert DEFAULT_CONFIG == SenderConfig()
    assert wlog_client.default_sender.config is DEFAULT_CONFIG


@pytest.mark.parametrize(
    "call",
    [
        lambda: wlog_client.send_as_text("/log", b"x"),
        lambda: wlog_client.send_as_json("/log", b"{}"),
        lambda: wlog_client.send("/log", "text/plain", b"x"),
    ],
)
def test_missing_key_fails_before_network(no_env_key, monkeypatch, call):
    def fail_post(*args, **kwargs):
        raise AssertionError("network must not be touched")

    monkeypatch.setattr(wlog_client.sender.transport.default_transport, "post", fail_post)

    with pytest.raises(MissingSecretKeyError):
        call()


def test_default_functions_use_default_transport(env_key, monkeypatch):
    fake = FakeTransport()
    monkeypatch.setattr(wlog_client.sender.transport.default_transport, "post", fake.post)

    wlog_client.send_as_text("/log", b"hello")
    wlog_client.send_as_json("/events", b"{}")
    wlog_client.send("/raw", "application/octet-stream", b"\x01")

    assert [r.url for r in fake.requests] == [
        "https://wlog.cloud/log",
        "https://wlog.cloud/events",
        "https://wlog.cloud/raw",
    ]
    assert [r.body for r in fake.requests] == [b"hello\n", b"{}\n", b"\x01"]
    assert all(r.headers["Authorization"] == env_key for r in fake.requests)
