"""
Runtime configuration for the survey submission handler.

Credentials come from the process environment.  The service role key may
instead live in AWS Secrets Manager, in which case SUPABASE_SECRET_ID names
the secret and the value is fetched once and cached for warm invocations.
"""

from __future__ import annotations

import base64
import json
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import boto3

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "managers_survey_responses"

_cached_service_key: Optional[str] = None


@dataclass(frozen=True)
class SupabaseConfig:
    """
    Connection settings for the hosted data store.

    Attributes:
        url: Supabase project base URL.
        service_key: Privileged service role key.
        table: Destination table for survey rows.
    """

    url: Optional[str]
    service_key: Optional[str]
    table: str = DEFAULT_TABLE

    @property
    def is_complete(self) -> bool:
        return bool(self.url) and bool(self.service_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SupabaseConfig":
        """Build the config from environment variables."""
        env = os.environ if environ is None else environ

        url = env.get("SUPABASE_URL") or None
        key = env.get("SUPABASE_SERVICE_ROLE_KEY") or None
        secret_id = env.get("SUPABASE_SECRET_ID")

        if not key and secret_id:
            key = get_service_key_from_secret(secret_id)

        return cls(
            url=url,
            service_key=key,
            table=env.get("SURVEY_TABLE") or DEFAULT_TABLE,
        )


def get_service_key_from_secret(secret_id: str, client=None) -> Optional[str]:
    """
    Fetch the service role key from Secrets Manager and cache it.

    Secret can be either:
      - raw key string, OR
      - JSON {"SUPABASE_SERVICE_ROLE_KEY": "..."}
    Lookup failures are logged and reported as a missing key.
    """
    global _cached_service_key
    if _cached_service_key:
        return _cached_service_key

    try:
        client = client or boto3.client("secretsmanager")
        resp = client.get_secret_value(SecretId=secret_id)
    except Exception as e:
        logger.error("Could not read secret %s: %r", secret_id, e)
        return None

    if resp.get("SecretString"):
        s = resp["SecretString"]
    else:
        s = base64.b64decode(resp["SecretBinary"]).decode("utf-8")

    try:
        obj = json.loads(s)
    except ValueError:
        obj = s

    if isinstance(obj, dict):
        key = obj.get("SUPABASE_SERVICE_ROLE_KEY") or obj.get("service_role_key") or obj.get("key")
    elif isinstance(obj, str):
        key = obj
    else:
        key = s

    if not key:
        logger.error("Supabase service key not found in secret %s", secret_id)
        return None

    _cached_service_key = key.strip()
    return _cached_service_key
