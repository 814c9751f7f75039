"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skywindow.configuration import SkyWindowSettings, get_settings
from skywindow.route_planning import RouteEngine


def test_defaults_match_route_policy() -> None:
    settings = SkyWindowSettings()
    assert settings.taxi_allowance_minutes == 25
    assert settings.visibility_corridor_km == 80
    assert settings.default_cruise_speed_kt == 450
    assert settings.alert_lead_minutes == 5


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKYWINDOW_VISIBILITY_CORRIDOR_KM", "120")
    monkeypatch.setenv("SKYWINDOW_DEFAULT_CRUISE_SPEED_KT", "430")
    monkeypatch.setenv("SKYWINDOW_LOG_LEVEL", "debug")

    settings = SkyWindowSettings()
    engine = RouteEngine.from_settings(settings)

    assert settings.log_level == "DEBUG"
    assert engine.corridor_km == 120
    assert engine.speeds.cruise_speed("unknown") == 430
    assert engine.speeds.cruise_speed("B777") == 490


def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKYWINDOW_VISIBILITY_CORRIDOR_KM", "0")
    with pytest.raises(ValidationError):
        SkyWindowSettings()


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
