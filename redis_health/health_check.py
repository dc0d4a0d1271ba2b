"""
Per-request health check pipeline: config -> credentials -> probe.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import CheckVariant, RedisCheckSettings
from .credentials import Credentials, SecretFetchError, fetch_credentials
from .redis_probe import ProbeResult, probe_redis

log = logging.getLogger(__name__)


class RedisHealthCheck:
    """
    Runs the whole check for one variant.

    Collaborators are injectable so routes can be exercised without AWS or a
    live Redis: `settings_loader` builds the settings, `secrets_client` is a
    Secrets Manager client, `connection_factory` builds a redis Connection.
    """

    def __init__(
        self,
        variant: CheckVariant = CheckVariant.SECRET,
        settings_loader: Optional[Callable[[], RedisCheckSettings]] = None,
        secrets_client=None,
        connection_factory=None,
    ):
        self.variant = variant
        self._settings_loader = settings_loader or (lambda: RedisCheckSettings.from_env(variant))
        self._secrets_client = secrets_client
        self._connection_factory = connection_factory

    def load_settings(self) -> RedisCheckSettings:
        return self._settings_loader()

    def run(self, settings: RedisCheckSettings) -> ProbeResult:
        if not settings.is_configured:
            # short-circuit before any secret lookup
            result = probe_redis(settings)
            log.info(f"HEALTH_CHECK_DONE | variant={self.variant.value} | ok={result.ok} | elapsed_ms=None")
            return result

        credentials = None
        if settings.variant is CheckVariant.SECRET:
            try:
                credentials = fetch_credentials(settings.secret_id, client=self._secrets_client)
            except SecretFetchError as e:
                return ProbeResult(ok=False, message=f"Secret fetch failed: {e}")
        elif settings.password or settings.username:
            credentials = Credentials(username=settings.username, password=settings.password)

        result = probe_redis(settings, credentials, connection_factory=self._connection_factory)
        log.info(f"HEALTH_CHECK_DONE | variant={self.variant.value} | ok={result.ok} | elapsed_ms={result.elapsed_ms}")
        return result
