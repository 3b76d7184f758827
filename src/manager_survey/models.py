"""
Data models for manager survey submissions.

This module defines the inbound submission as posted by the survey form and the
row written to the managers_survey_responses table.  The submission validates
its own required fields; the record is derived from a valid submission and
knows how to turn itself into an insertable dictionary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from .errors import SubmissionError, SubmissionErrorKind

# Answers that must be present and non-empty.
REQUIRED_FIELDS = (
    "country", "q1", "q2", "q3", "q6", "q7", "q10", "q11", "q12", "q13", "q15",
)

# Yes/No answers: must be supplied, but "No" or "" are valid answers.
GATE_FIELDS = ("q4", "q8")

YES = "Yes"


@dataclass
class SurveySubmission:
    """
    Raw answers from the survey form.

    Any field may be None, meaning the key was missing from the body or
    explicitly null.
    """

    country: Any = None
    q1: Any = None   # satisfaction_performance
    q2: Any = None   # strengths_performance
    q3: Any = None   # improvement_recommendations_performance
    q4: Any = None   # faced_challenges
    q5: Any = None   # main_challenge
    q6: Any = None   # support_assessment
    q7: Any = None   # manager_discussion_quality
    q8: Any = None   # received_useful_feedback
    q9: Any = None   # feedback_reason
    q10: Any = None  # satisfaction_compensation
    q11: Any = None  # strengths_compensation
    q12: Any = None  # strengths_details
    q13: Any = None  # improvement_area_compensation
    q14: Any = None  # improvement_recommendations_compensation
    q15: Any = None  # workday_experience

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> "SurveySubmission":
        """Pick the known answer keys out of a decoded JSON body."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in body.items() if k in names})

    def missing_fields(self) -> list:
        missing = [name for name in REQUIRED_FIELDS if not getattr(self, name)]
        missing += [name for name in GATE_FIELDS if getattr(self, name) is None]
        return missing

    def validate(self) -> None:
        """
        Raises:
            SubmissionError: VALIDATION_FAILED if a required answer is missing.
        """
        missing = self.missing_fields()
        if missing:
            raise SubmissionError(
                SubmissionErrorKind.VALIDATION_FAILED,
                "Missing required fields",
                upstream=", ".join(missing),
            )


@dataclass
class SurveyResponseRecord:
    """One row of the managers_survey_responses table."""

    country: str
    satisfaction_performance: str
    strengths_performance: str
    improvement_recommendations_performance: str
    faced_challenges: bool
    main_challenge: Optional[str]
    support_assessment: str
    manager_discussion_quality: str
    received_useful_feedback: bool
    feedback_reason: Optional[str]
    satisfaction_compensation: str
    strengths_compensation: str
    strengths_details: str
    improvement_area_compensation: str
    improvement_recommendations_compensation: Optional[str]
    workday_experience: str
    ip_address: str = "unknown"

    def __post_init__(self) -> None:
        # Follow-up answers only exist behind a "Yes".
        if not self.faced_challenges:
            self.main_challenge = None
        if not self.received_useful_feedback:
            self.feedback_reason = None

    @classmethod
    def from_submission(cls, s: SurveySubmission, ip_address: str = "unknown") -> "SurveyResponseRecord":
        faced_challenges = s.q4 == YES
        received_useful_feedback = s.q8 == YES
        return cls(
            country=s.country,
            satisfaction_performance=s.q1,
            strengths_performance=s.q2,
            improvement_recommendations_performance=s.q3,
            faced_challenges=faced_challenges,
            main_challenge=s.q5 if faced_challenges else None,
            support_assessment=s.q6,
            manager_discussion_quality=s.q7,
            received_useful_feedback=received_useful_feedback,
            feedback_reason=s.q9 if received_useful_feedback else None,
            satisfaction_compensation=s.q10,
            strengths_compensation=s.q11,
            strengths_details=s.q12,
            improvement_area_compensation=s.q13,
            improvement_recommendations_compensation=s.q14,
            workday_experience=s.q15,
            ip_address=ip_address or "unknown",
        )

    def to_row(self) -> Dict[str, Any]:
        """Convert the record into an insertable row (dictionary)."""
        return asdict(self)
