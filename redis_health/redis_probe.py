"""
Single-shot Redis connectivity probe.

Opens one connection, sends PING, and always disconnects. No pooling and no
retries: each call reflects the endpoint's state at that moment.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import redis

from .config import RedisCheckSettings
from .credentials import Credentials

log = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Redis env not configured"
NO_RESPONSE_MESSAGE = "No response"


@dataclass(frozen=True)
class ProbeResult:
    ok: bool
    message: str
    elapsed_ms: Optional[float] = None


def _default_connection_factory(settings: RedisCheckSettings) -> Callable[..., redis.Connection]:
    return redis.SSLConnection if settings.tls else redis.Connection


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)


def _error_message(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


def _close_quietly(conn) -> None:
    try:
        conn.disconnect()
    except Exception as e:  # noqa: BLE001
        log.debug(f"REDIS_DISCONNECT_IGNORED | error={e}")


def probe_redis(
    settings: RedisCheckSettings,
    credentials: Optional[Credentials] = None,
    connection_factory: Optional[Callable[..., redis.Connection]] = None,
) -> ProbeResult:
    """
    Connect, PING, disconnect.

    Returns a failed result without touching the network when host or port
    is missing. Connect and ping errors become the result message.
    """
    if not settings.is_configured:
        log.info(f"REDIS_NOT_CONFIGURED | host={settings.host!r} | port={settings.port}")
        return ProbeResult(ok=False, message=NOT_CONFIGURED_MESSAGE)

    factory = connection_factory or _default_connection_factory(settings)
    username = credentials.username if credentials else None
    password = credentials.password if credentials else None

    conn = None
    started = time.perf_counter()
    try:
        conn = factory(
            host=settings.host,
            port=settings.port,
            username=username,
            password=password,
            socket_connect_timeout=settings.connect_timeout,
            socket_timeout=settings.socket_timeout,
            decode_responses=True,
        )
        conn.connect()
        conn.send_command("PING")
        reply = conn.read_response()
        elapsed = _elapsed_ms(started)
    except Exception as e:  # noqa: BLE001
        elapsed = _elapsed_ms(started)
        log.warning(
            f"REDIS_PING_FAILED | host={settings.host} | port={settings.port} | "
            f"elapsed_ms={elapsed} | error={e}"
        )
        return ProbeResult(ok=False, message=_error_message(e), elapsed_ms=elapsed)
    finally:
        if conn is not None:
            _close_quietly(conn)

    if isinstance(reply, bytes):
        reply = reply.decode("utf-8", errors="replace")
    text = "" if reply is None else str(reply)
    ok = text.lower() == "pong"

    log.info(f"REDIS_PING_{'OK' if ok else 'UNEXPECTED'} | host={settings.host} | reply={text!r} | elapsed_ms={elapsed}")
    return ProbeResult(ok=ok, message=text or NO_RESPONSE_MESSAGE, elapsed_ms=elapsed)
