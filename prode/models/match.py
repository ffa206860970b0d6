from datetime import datetime, UTC
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class Match(SQLModel, table=True):
    __tablename__ = "matches"

    id: str = Field(primary_key=True)  # opaque id owned by the fixture service

    home_team: Optional[str] = Field(default=None)
    away_team: Optional[str] = Field(default=None)

    kickoff_time: datetime = Field(sa_type=DateTime(timezone=True), index=True)

    # Status
    status: str = Field(default="scheduled")  # scheduled, in_progress, completed

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
