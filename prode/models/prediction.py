from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional
from sqlalchemy import DateTime
from pydantic import field_validator
from sqlmodel import SQLModel, Field, UniqueConstraint

from ..services.cutoff import ensure_utc


class Prediction(SQLModel, table=True):
    __tablename__ = "predictions"
    __table_args__ = (UniqueConstraint("user_id", "match_id", name="unique_user_match"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    match_id: str = Field(foreign_key="matches.id", index=True)

    # Prediction
    predicted_outcome: str  # home, draw, away
    predicted_score_home: Optional[int] = Field(default=None)
    predicted_score_away: Optional[int] = Field(default=None)

    # Stake
    bet_amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    currency: str = Field(max_length=8)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_type=DateTime(timezone=True)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_type=DateTime(timezone=True)
    )


class PredictionRead(SQLModel):
    """Schema for prediction response."""
    id: int
    user_id: str
    match_id: str
    predicted_outcome: str
    predicted_score_home: Optional[int] = None
    predicted_score_away: Optional[int] = None
    bet_amount: Decimal
    currency: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without an offset
        return ensure_utc(value)
