import logging
from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..exceptions import NotFound, StorageFailure
from ..models.match import Match
from .cutoff import compute_deadline, ensure_utc, is_open
from .predictions import predictions_by_match
from .settings import ActiveSettings

logger = logging.getLogger(__name__)


class MatchAvailability(BaseModel):
    """Schema for a match as shown on the prode page."""
    id: str
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    kickoff_time: datetime
    status: str
    prediction_deadline: datetime
    can_predict: bool
    user_prediction: Optional[str] = None


def find_match(db: Session, match_id: str) -> Match:
    """Get a match by id or raise NotFound."""
    try:
        match = db.get(Match, match_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Match lookup failed for %s: %s", match_id, e)
        raise StorageFailure.from_error(e) from e

    if not match:
        raise NotFound("match_not_found")

    return match


def list_match_availability(
    db: Session,
    settings: ActiveSettings,
    now: datetime,
    user_id: Optional[str] = None
) -> list[MatchAvailability]:
    """List matches by kickoff with their deadline and whether they still accept predictions."""
    matches = db.exec(select(Match).order_by(Match.kickoff_time, Match.id)).all()
    user_predictions = predictions_by_match(db, user_id) if user_id else {}

    availability = []
    for match in matches:
        deadline = compute_deadline(match.kickoff_time, settings.cutoff_seconds_before_kickoff)
        prediction = user_predictions.get(match.id)
        availability.append(
            MatchAvailability(
                id=match.id,
                home_team=match.home_team,
                away_team=match.away_team,
                kickoff_time=ensure_utc(match.kickoff_time),
                status=match.status,
                prediction_deadline=deadline,
                can_predict=is_open(now, deadline),
                user_prediction=prediction.predicted_outcome if prediction else None
            )
        )

    return availability
