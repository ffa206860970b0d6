import logging
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..config import DEFAULT_CURRENCY, DEFAULT_CUTOFF_SECONDS, DEFAULT_MAX_BET
from ..models.settings import ProdeSettings

logger = logging.getLogger(__name__)


class ActiveSettings(BaseModel):
    """Snapshot of the betting rules in effect for one request."""
    model_config = ConfigDict(frozen=True)

    max_bet: Decimal = DEFAULT_MAX_BET
    cutoff_seconds_before_kickoff: int = DEFAULT_CUTOFF_SECONDS
    default_currency: str = DEFAULT_CURRENCY


def settings_from_row(row: Optional[ProdeSettings]) -> ActiveSettings:
    """Build a snapshot from a settings row, filling NULL columns with defaults."""
    if row is None:
        return ActiveSettings()

    cutoff = row.cutoff_seconds_before_kickoff
    if cutoff is None:
        cutoff = DEFAULT_CUTOFF_SECONDS
    elif cutoff < 0:
        logger.warning("prode_settings %s has negative cutoff %s, using 0", row.id, cutoff)
        cutoff = 0

    return ActiveSettings(
        max_bet=row.max_bet if row.max_bet is not None else DEFAULT_MAX_BET,
        cutoff_seconds_before_kickoff=cutoff,
        default_currency=row.currency or DEFAULT_CURRENCY,
    )


def resolve_active_settings(db: Session) -> ActiveSettings:
    """
    Fetch the active betting rules.

    Falls back to the built-in defaults when no row is active or when the
    settings table cannot be read. If several rows are flagged active the
    lowest id is used; which one wins is not part of the contract.
    """
    statement = (
        select(ProdeSettings)
        .where(ProdeSettings.is_active == True)  # noqa: E712
        .order_by(ProdeSettings.id)
        .limit(2)
    )
    try:
        rows = db.exec(statement).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Could not read prode_settings, using defaults: %s", e)
        return ActiveSettings()

    if len(rows) > 1:
        logger.warning("More than one active prode_settings row, using id=%s", rows[0].id)

    return settings_from_row(rows[0] if rows else None)
