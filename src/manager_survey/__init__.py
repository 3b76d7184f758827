"""Manager survey submission handler backed by Supabase."""

from .config import SupabaseConfig
from .errors import SubmissionError, SubmissionErrorKind
from .handler import SurveySubmissionHandler

__all__ = [
    "SupabaseConfig",
    "SubmissionError",
    "SubmissionErrorKind",
    "SurveySubmissionHandler",
]
