"""
Redis credential resolution from AWS Secrets Manager.

The secret may have been provisioned by different tooling, so the payload can
be a JSON document using one of several field names, or a bare password.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

log = logging.getLogger(__name__)

USERNAME_KEYS: Tuple[str, ...] = ("username", "user")
PASSWORD_KEYS: Tuple[str, ...] = ("password", "redis_password", "authToken", "token")


class SecretFetchError(RuntimeError):
    """Secrets Manager could not return the configured secret."""


@dataclass(frozen=True)
class Credentials:
    username: Optional[str] = None
    password: Optional[str] = None

    def __repr__(self) -> str:
        # keep the password out of logs and tracebacks
        masked = "***" if self.password is not None else None
        return f"Credentials(username={self.username!r}, password={masked!r})"


def _first_present(obj: Mapping[str, Any], keys: Tuple[str, ...]) -> Optional[str]:
    for key in keys:
        value = obj.get(key)
        if value is not None:
            return value if isinstance(value, str) else str(value)
    return None


def parse_secret_string(payload: str) -> Optional[Credentials]:
    """
    Extract a username/password pair from a secret payload.

    JSON objects are searched for the known aliases; any other valid JSON
    yields nothing. Non-JSON text is taken as the password itself, unless
    it is empty.
    """
    try:
        parsed = json.loads(payload)
    except ValueError:
        return Credentials(password=payload) if payload else None

    if isinstance(parsed, dict):
        return Credentials(
            username=_first_present(parsed, USERNAME_KEYS),
            password=_first_present(parsed, PASSWORD_KEYS),
        )
    return None


def _secrets_client():
    return boto3.client("secretsmanager", region_name=os.getenv("AWS_REGION"))


def fetch_credentials(secret_id: Optional[str], client=None) -> Optional[Credentials]:
    """Fetch and parse the Redis secret. Never cached; called per invocation."""
    if not secret_id:
        log.debug("SECRET_SKIPPED | no secret configured")
        return None

    try:
        sm = client or _secrets_client()
        response = sm.get_secret_value(SecretId=secret_id)
    except (ClientError, BotoCoreError) as e:
        log.warning(f"SECRET_FETCH_FAILED | secret_id={secret_id} | error={e}")
        raise SecretFetchError(str(e)) from e

    if response.get("SecretString"):
        creds = parse_secret_string(response["SecretString"])
    elif response.get("SecretBinary"):
        raw = response["SecretBinary"]
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        creds = parse_secret_string(bytes(raw).decode("utf-8", errors="replace"))
    else:
        creds = None

    if creds is None:
        log.info(f"SECRET_EMPTY | secret_id={secret_id} | no usable credentials")
    else:
        log.info(
            f"SECRET_RESOLVED | secret_id={secret_id} | "
            f"has_username={creds.username is not None} | has_password={creds.password is not None}"
        )
    return creds
