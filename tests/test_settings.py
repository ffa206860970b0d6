import logging
from decimal import Decimal

from prode.models import ProdeSettings
from prode.services.settings import ActiveSettings, resolve_active_settings, settings_from_row
from tests.conftest import add_settings


def test_defaults_when_no_settings(session):
    settings = resolve_active_settings(session)
    assert settings.max_bet == Decimal("10000")
    assert settings.cutoff_seconds_before_kickoff == 600
    assert settings.default_currency == "ARS"


def test_inactive_rows_are_ignored(session):
    add_settings(session, max_bet="5", is_active=False)
    assert resolve_active_settings(session) == ActiveSettings()


def test_active_row_is_used(session):
    add_settings(session, max_bet="100", cutoff_seconds=300, currency="USD")
    settings = resolve_active_settings(session)
    assert settings.max_bet == Decimal("100")
    assert settings.cutoff_seconds_before_kickoff == 300
    assert settings.default_currency == "USD"


def test_null_columns_fall_back_to_defaults(session):
    add_settings(session, max_bet=None, cutoff_seconds=None, currency=None)
    assert resolve_active_settings(session) == ActiveSettings()


def test_multiple_active_rows_pick_one_and_warn(session, caplog):
    first = add_settings(session, max_bet="100")
    add_settings(session, max_bet="200")

    with caplog.at_level(logging.WARNING, logger="prode.services.settings"):
        settings = resolve_active_settings(session)

    assert first.id is not None
    assert settings.max_bet == Decimal("100")
    assert "More than one active prode_settings row" in caplog.text


def test_negative_cutoff_is_clamped():
    row = ProdeSettings(id=1, is_active=True, cutoff_seconds_before_kickoff=-30)
    assert settings_from_row(row).cutoff_seconds_before_kickoff == 0


def test_settings_endpoint(client, session):
    add_settings(session, max_bet="250", cutoff_seconds=900, currency="BRL")
    response = client.get("/api/predictions/settings")
    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["max_bet"]) == Decimal("250")
    assert data["cutoff_seconds_before_kickoff"] == 900
    assert data["default_currency"] == "BRL"
