"""
Supabase repository for manager survey responses.

This module wraps the two calls the handler makes against the hosted database:
a lightweight count query used as a connectivity probe, and a single-row
insert.  Errors from the client are normalized into SubmissionError so callers
never inspect PostgREST error shapes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from postgrest.exceptions import APIError
from supabase import Client, create_client
from supabase.client import ClientOptions

from .config import SupabaseConfig
from .errors import SubmissionError, SubmissionErrorKind

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Client]


def _api_message(e: APIError) -> str:
    return getattr(e, "message", None) or str(e)


def build_client(config: SupabaseConfig, client_factory: ClientFactory = create_client) -> Client:
    """Create a server-side client: no session persistence, no token refresh."""
    return client_factory(
        config.url,
        config.service_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )


class SurveyRepo:
    """Repository for storing survey responses in Supabase."""

    def __init__(self, client: Client, table_name: str) -> None:
        self.client = client
        self.table_name = table_name

    def probe(self) -> None:
        """
        Issue a head-only count query to check the table is reachable.

        Raises:
            SubmissionError: PROBE_FAILED on a service error or any client failure.
        """
        try:
            self.client.table(self.table_name).select("count", count="exact", head=True).execute()
        except APIError as e:
            msg = _api_message(e)
            logger.error("Supabase connection test failed: %s", msg)
            raise SubmissionError(
                SubmissionErrorKind.PROBE_FAILED,
                "Supabase connection failed: " + msg,
                upstream=msg,
            ) from e
        except Exception as e:
            logger.error("Supabase connection error: %r", e)
            raise SubmissionError(
                SubmissionErrorKind.PROBE_FAILED,
                "Supabase connection error: " + str(e),
                upstream=str(e),
            ) from e

        logger.info("Supabase connection successful")

    def insert(self, row: Dict[str, Any]) -> None:
        """
        Insert one survey row.  Not retried.

        Raises:
            SubmissionError: PERSIST_FAILED on a service error or any client failure.
        """
        try:
            self.client.table(self.table_name).insert([row]).execute()
        except APIError as e:
            msg = _api_message(e)
            logger.error("Supabase error: %s", msg)
            raise SubmissionError(
                SubmissionErrorKind.PERSIST_FAILED,
                "Database error: " + msg,
                upstream=msg,
            ) from e
        except Exception as e:
            logger.error("Database operation error: %r", e)
            raise SubmissionError(
                SubmissionErrorKind.PERSIST_FAILED,
                "Database operation failed: " + str(e),
                upstream=str(e),
            ) from e

        logger.info("Data inserted successfully")
