import logging
from datetime import datetime
from sqlmodel import Session

from ..exceptions import PredictionError, ValidationError
from ..models.prediction import Prediction
from .cutoff import compute_deadline
from .matches import find_match
from .predictions import resolve_currency, upsert_prediction
from .settings import resolve_active_settings
from .validation import check_business_rules, validate_submission

logger = logging.getLogger(__name__)


def submit_prediction(db: Session, payload: dict, now: datetime) -> Prediction:
    """
    Validate a submission and persist it.

    Steps: structural validation, active settings, match lookup, deadline,
    business rules (amount limit, then cutoff), upsert. Each gate raises a
    PredictionError subclass; nothing is retried here.
    """
    try:
        submission = validate_submission(payload)
    except ValidationError as e:
        logger.info("Rejected malformed prediction: %s", e.code)
        raise

    try:
        settings = resolve_active_settings(db)
        match = find_match(db, submission.match_id)
        deadline = compute_deadline(match.kickoff_time, settings.cutoff_seconds_before_kickoff)
        check_business_rules(submission, settings, deadline, now)

        prediction = upsert_prediction(
            db,
            submission,
            currency=resolve_currency(submission.currency, settings),
            now=now
        )
    except PredictionError as e:
        logger.info(
            "Rejected prediction user=%s match=%s: %s",
            submission.user_id, submission.match_id, e.code
        )
        raise

    logger.info(
        "Stored prediction id=%s user=%s match=%s outcome=%s amount=%s %s",
        prediction.id, prediction.user_id, prediction.match_id,
        prediction.predicted_outcome, prediction.bet_amount, prediction.currency
    )
    return prediction
