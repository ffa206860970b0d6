from datetime import datetime, timedelta, UTC
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from main import app
from prode.database import get_session
from prode.dependencies import get_now
from prode.models import Match, ProdeSettings

# Create in-memory database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

KICKOFF = datetime(2026, 3, 1, 18, 0, tzinfo=UTC)


class Clock:
    """Mutable "now" injected through the get_now dependency."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="clock")
def clock_fixture():
    return Clock(KICKOFF - timedelta(hours=1))


@pytest.fixture(name="client")
def client_fixture(session: Session, clock: Clock):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_now] = clock
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="match")
def match_fixture(session: Session):
    match = Match(
        id="7f1c0f2e-match-1",
        home_team="Deportivo Norte",
        away_team="Atletico Sur",
        kickoff_time=KICKOFF
    )
    session.add(match)
    session.commit()
    session.refresh(match)
    return match


def add_settings(
    session: Session,
    max_bet="100",
    cutoff_seconds=600,
    currency="USD",
    is_active=True
) -> ProdeSettings:
    settings = ProdeSettings(
        is_active=is_active,
        max_bet=Decimal(max_bet) if max_bet is not None else None,
        cutoff_seconds_before_kickoff=cutoff_seconds,
        currency=currency
    )
    session.add(settings)
    session.commit()
    session.refresh(settings)
    return settings
