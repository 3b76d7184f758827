"""Error kinds raised while processing a survey submission."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class SubmissionErrorKind(Enum):
    CONFIG_MISSING = "config_missing"
    PROBE_FAILED = "probe_failed"
    VALIDATION_FAILED = "validation_failed"
    PERSIST_FAILED = "persist_failed"
    INTERNAL = "internal"


_STATUS = {
    SubmissionErrorKind.CONFIG_MISSING: 500,
    SubmissionErrorKind.PROBE_FAILED: 500,
    SubmissionErrorKind.VALIDATION_FAILED: 400,
    SubmissionErrorKind.PERSIST_FAILED: 500,
    SubmissionErrorKind.INTERNAL: 500,
}


class SubmissionError(Exception):
    """
    A terminal failure for one request.

    Attributes:
        kind: Which stage failed.
        message: Client-facing error text, returned as {"error": message}.
        upstream: Message reported by the data store, if any.
    """

    def __init__(
        self,
        kind: SubmissionErrorKind,
        message: str,
        upstream: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.upstream = upstream

    @property
    def status(self) -> int:
        return _STATUS[self.kind]
