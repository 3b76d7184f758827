import logging

from manager_survey import SupabaseConfig, SurveySubmissionHandler

logger = logging.getLogger()
logger.setLevel(logging.INFO)

_handler = None


def _get_handler() -> SurveySubmissionHandler:
    """
    Reuse the handler across warm invocations once its credentials are complete.
    An incomplete config is rebuilt on the next invocation so a failed secret
    lookup gets retried.
    """
    global _handler
    if _handler is not None:
        return _handler

    handler = SurveySubmissionHandler(SupabaseConfig.from_env())
    if handler.config.is_complete:
        _handler = handler
    return handler


def lambda_handler(event, context):
    return _get_handler().handle(event)
