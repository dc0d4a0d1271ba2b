"""
Configuration for the Redis health service.

Two layers:
- Flask app config classes (selected by APP_ENV / FLASK_ENV)
- RedisCheckSettings: the immutable per-invocation view of the Redis env vars
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

log = logging.getLogger(__name__)

DEFAULT_REDIS_PORT = 6379
DEFAULT_SERVICE_NAME = "OIDC Service"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def _env_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value not in (None, "") else default
    except ValueError:
        log.warning(f"CONFIG_INVALID_FLOAT | value={value!r} | default={default}")
        return default


def parse_port(raw: Optional[str]) -> Optional[int]:
    """
    Parse a port env value.

    Absent or blank falls back to 6379. Anything that is not an integer
    returns None, which the prober treats as "not configured".
    """
    if raw is None or not raw.strip():
        return DEFAULT_REDIS_PORT
    try:
        return int(raw.strip())
    except ValueError:
        return None


class CheckVariant(str, Enum):
    # Secrets Manager backed status page (REDIS_CLUSTER_* vars)
    SECRET = "secret"
    # Plain REDIS_HOST / REDIS_PASSWORD check
    PLAIN = "plain"


@dataclass(frozen=True)
class RedisCheckSettings:
    host: str
    port: Optional[int] = DEFAULT_REDIS_PORT
    secret_id: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    service_name: str = DEFAULT_SERVICE_NAME
    variant: CheckVariant = CheckVariant.SECRET
    tls: bool = False
    connect_timeout: float = 5.0
    socket_timeout: float = 10.0

    @property
    def is_configured(self) -> bool:
        return bool(self.host) and self.port is not None

    @property
    def auth_label(self) -> str:
        return "Secret" if self.variant is CheckVariant.SECRET else "Password"

    @property
    def auth_configured(self) -> bool:
        if self.variant is CheckVariant.SECRET:
            return bool(self.secret_id)
        return bool(self.password)

    @classmethod
    def from_env(
        cls,
        variant: CheckVariant = CheckVariant.SECRET,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "RedisCheckSettings":
        env = os.environ if environ is None else environ

        common = dict(
            port=parse_port(env.get("REDIS_CLUSTER_PORT")),
            service_name=env.get("SERVICE_NAME") or DEFAULT_SERVICE_NAME,
            variant=variant,
            tls=_env_flag(env.get("REDIS_TLS")),
            connect_timeout=_env_float(env.get("REDIS_CONNECT_TIMEOUT"), 5.0),
            socket_timeout=_env_float(env.get("REDIS_SOCKET_TIMEOUT"), 10.0),
        )

        if variant is CheckVariant.SECRET:
            return cls(
                host=env.get("REDIS_CLUSTER_ENDPOINT", ""),
                secret_id=env.get("SECRET_MANAGER_NAME_USERPASS") or None,
                **common,
            )

        return cls(
            host=env.get("REDIS_HOST", ""),
            username=env.get("REDIS_USERNAME") or None,
            password=env.get("REDIS_PASSWORD") or None,
            **common,
        )


class BaseConfig:
    SECRET_KEY: str = os.getenv("FLASK_SECRET_KEY", "dev-secret-change-me")
    JSON_SORT_KEYS: bool = False
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEBUG: bool = False
    TESTING: bool = False


class DevelopmentConfig(BaseConfig):
    DEBUG: bool = True


class ProductionConfig(BaseConfig):
    pass


class LambdaConfig(ProductionConfig):
    pass


class TestingConfig(BaseConfig):
    TESTING: bool = True


_CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "lambda": LambdaConfig,
    "testing": TestingConfig,
    "test": TestingConfig,
}


def get_config(config_name: Optional[str] = None) -> BaseConfig:
    """Get configuration instance directly - no complex manager."""
    env = (config_name or os.getenv("APP_ENV", os.getenv("FLASK_ENV", "development"))).lower()
    config_class = _CONFIGS.get(env, DevelopmentConfig)
    log.debug(f"CONFIG_SELECTED | env={env} | config_class={config_class.__name__}")
    return config_class()
