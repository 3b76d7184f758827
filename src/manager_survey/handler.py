"""
Request pipeline for a manager survey submission.

Every branch is terminal: the handler returns as soon as a step fails, and
the only I/O is the connectivity probe followed by one insert.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from supabase import create_client

from . import http
from .config import SupabaseConfig
from .errors import SubmissionError, SubmissionErrorKind
from .models import SurveyResponseRecord, SurveySubmission
from .survey_repo import ClientFactory, SurveyRepo, build_client

logger = logging.getLogger(__name__)


class SurveySubmissionHandler:
    """Validates a survey POST and writes it to Supabase."""

    def __init__(
        self,
        config: Optional[SupabaseConfig],
        client_factory: ClientFactory = create_client,
    ) -> None:
        self.config = config
        self.client_factory = client_factory

    def handle(self, event: dict) -> Dict[str, Any]:
        method = http.method(event)

        # CORS preflight
        if method == "OPTIONS":
            return http.resp(200)

        if method != "POST":
            return http.resp(405, {"error": "Method not allowed"})

        try:
            logger.info("Request received in API")
            return self._submit(event)
        except SubmissionError as e:
            return http.resp(e.status, {"error": e.message})
        except Exception as e:
            logger.exception("Server error: %r", e)
            return http.resp(500, {"error": "Internal server error: " + str(e)})

    def _repo(self) -> SurveyRepo:
        config = self.config
        logger.info("Supabase URL present: %s", bool(config and config.url))
        logger.info("Supabase Key present: %s", bool(config and config.service_key))

        if config is None or not config.is_complete:
            logger.error("Missing Supabase credentials")
            raise SubmissionError(
                SubmissionErrorKind.CONFIG_MISSING,
                "Server configuration error: Missing Supabase credentials",
            )

        return SurveyRepo(build_client(config, self.client_factory), config.table)

    def _submit(self, event: dict) -> Dict[str, Any]:
        repo = self._repo()
        repo.probe()

        raw_body = http.get_raw_body(event)
        if not raw_body:
            return http.resp(400, {"error": "Missing request body"})

        logger.info("Request body: %s", raw_body)

        try:
            data = json.loads(raw_body)
        except ValueError:
            return http.resp(400, {"error": "Invalid JSON body"})
        if data is None:
            return http.resp(400, {"error": "Missing request body"})
        if not isinstance(data, dict):
            return http.resp(400, {"error": "Invalid JSON body"})

        submission = SurveySubmission.from_body(data)
        try:
            submission.validate()
        except SubmissionError as e:
            logger.error("Missing required fields: %s", e.upstream)
            raise

        record = SurveyResponseRecord.from_submission(submission, http.client_ip(event))
        row = record.to_row()
        logger.info("Data to insert: %s", json.dumps(row))

        logger.info("Attempting to insert data...")
        repo.insert(row)
        return http.resp(200, {"success": True})
