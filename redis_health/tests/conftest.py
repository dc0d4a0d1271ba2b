# tests/conftest.py
"""Fakes for Redis connections and Secrets Manager. No live services needed."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest


class FakeConnection:
    """Stands in for redis.Connection and records what the probe did."""

    instances: List["FakeConnection"] = []

    def __init__(self, reply: Any = "PONG", connect_error: Optional[Exception] = None,
                 ping_error: Optional[Exception] = None, disconnect_error: Optional[Exception] = None, **kwargs):
        self.kwargs = kwargs
        self.reply = reply
        self.connect_error = connect_error
        self.ping_error = ping_error
        self.disconnect_error = disconnect_error
        self.calls: List[str] = []
        FakeConnection.instances.append(self)

    def connect(self):
        self.calls.append("connect")
        if self.connect_error:
            raise self.connect_error

    def send_command(self, *args):
        self.calls.append(" ".join(args))

    def read_response(self):
        self.calls.append("read")
        if self.ping_error:
            raise self.ping_error
        return self.reply

    def disconnect(self):
        self.calls.append("disconnect")
        if self.disconnect_error:
            raise self.disconnect_error


def connection_factory(**behaviour):
    """Build a factory the probe can call with redis.Connection kwargs."""
    def factory(**kwargs):
        return FakeConnection(**behaviour, **kwargs)
    return factory


class FakeSecretsClient:
    def __init__(self, response: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.response = response or {}
        self.error = error
        self.requested: List[str] = []

    def get_secret_value(self, SecretId: str):
        self.requested.append(SecretId)
        if self.error:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def _reset_fake_connections():
    FakeConnection.instances.clear()
    yield
    FakeConnection.instances.clear()
