from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional
from sqlmodel import SQLModel, Field


class ProdeSettings(SQLModel, table=True):
    """Betting rules edited from the admin side. Read-only for this service."""
    __tablename__ = "prode_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    is_active: bool = Field(default=False, index=True)

    # NULL columns fall back to the defaults in config.py
    max_bet: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    cutoff_seconds_before_kickoff: Optional[int] = Field(default=None)
    currency: Optional[str] = Field(default=None, max_length=8)

    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
