"""Tests for configuration parsing."""

from __future__ import annotations

from datetime import timedelta

import pytest

from packleads.config import Config
from packleads.logging import LogLevel, Profile


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PACKLEADS_BASE_URL", "PACKLEADS_PROFILE", "PACKLEADS_NAME"):
        monkeypatch.delenv(name, raising=False)
    config = Config()
    assert config.name == "packleads"
    assert config.profile == Profile.production
    assert config.site_url == "https://packleads.io"
    assert config.contact_rate_limit == 3
    assert config.contact_rate_window == timedelta(hours=1)


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PACKLEADS_PROFILE", "development")
    monkeypatch.setenv("PACKLEADS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PACKLEADS_BASE_URL", "https://staging.packleads.io/")
    monkeypatch.setenv("PACKLEADS_CONTACT_RATE_LIMIT", "5")
    monkeypatch.setenv("PACKLEADS_CONTACT_RATE_WINDOW", "PT30M")
    config = Config()
    assert config.profile == Profile.development
    assert config.log_level == LogLevel.DEBUG
    assert config.site_url == "https://staging.packleads.io"
    assert config.contact_rate_limit == 5
    assert config.contact_rate_window == timedelta(minutes=30)


def test_invalid_rate_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PACKLEADS_CONTACT_RATE_LIMIT", "0")
    with pytest.raises(ValueError):
        Config()
