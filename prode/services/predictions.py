import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..config import DEFAULT_CURRENCY
from ..exceptions import StorageFailure
from ..models.prediction import Prediction
from .cutoff import ensure_utc
from .settings import ActiveSettings
from .validation import PredictionSubmission

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO UPDATE ... RETURNING
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}

CONFLICT_COLUMNS = ["user_id", "match_id"]
UPDATE_COLUMNS = [
    "predicted_outcome",
    "predicted_score_home",
    "predicted_score_away",
    "bet_amount",
    "currency",
    "updated_at",
]


def resolve_currency(requested: Optional[str], settings: Optional[ActiveSettings]) -> str:
    """Explicit currency, then the settings default, then the hard-coded fallback."""
    if requested:
        return requested
    if settings is not None and settings.default_currency:
        return settings.default_currency
    return DEFAULT_CURRENCY


def upsert_prediction(
    db: Session,
    submission: PredictionSubmission,
    currency: str,
    now: datetime
) -> Prediction:
    """
    Insert or overwrite the prediction for (user_id, match_id) in one statement.

    The conflict on the unique key is resolved by the database, so concurrent
    submissions for the same pair leave exactly one row holding the last
    write. id and created_at are kept on overwrite.
    """
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise StorageFailure(f"upsert not supported for dialect {dialect}")

    now = ensure_utc(now)
    stmt = insert(Prediction.__table__).values(
        user_id=submission.user_id,
        match_id=submission.match_id,
        predicted_outcome=submission.predicted_outcome,
        predicted_score_home=submission.predicted_score_home,
        predicted_score_away=submission.predicted_score_away,
        bet_amount=submission.bet_amount,
        currency=currency,
        created_at=now,
        updated_at=now
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=CONFLICT_COLUMNS,
        set_={col: getattr(stmt.excluded, col) for col in UPDATE_COLUMNS}
    ).returning(*Prediction.__table__.columns)

    try:
        row = db.connection().execute(stmt).one()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(
            "Upsert failed for user=%s match=%s: %s",
            submission.user_id, submission.match_id, e
        )
        raise StorageFailure.from_error(e) from e

    prediction = Prediction(**row._mapping)
    prediction.created_at = ensure_utc(prediction.created_at)
    prediction.updated_at = ensure_utc(prediction.updated_at)
    return prediction


def list_by_user(db: Session, user_id: str) -> list[Prediction]:
    """All predictions of a user, most recent first."""
    statement = (
        select(Prediction)
        .where(Prediction.user_id == user_id)
        .order_by(Prediction.created_at.desc(), Prediction.id.desc())
    )
    try:
        return list(db.exec(statement).all())
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Listing predictions failed for user=%s: %s", user_id, e)
        raise StorageFailure.from_error(e) from e


def predictions_by_match(db: Session, user_id: str) -> dict[str, Prediction]:
    """A user's predictions keyed by match id."""
    return {prediction.match_id: prediction for prediction in list_by_user(db, user_id)}
