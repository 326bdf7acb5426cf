from __future__ import annotations

import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("test", "config.testing"),
        ("staging", "config.development"),
    ],
)
def test_app_env_selects_settings(monkeypatch, env, expected):
    monkeypatch.delenv("APP_SETTINGS_MODULE", raising=False)
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_default_is_development(monkeypatch):
    monkeypatch.delenv("APP_SETTINGS_MODULE", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_explicit_module_wins(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("APP_SETTINGS_MODULE", "config.testing")

    assert get_settings_module() == "config.testing"


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("1", True), ("on", True), ("false", False), ("0", False), (None, True)],
)
def test_production_cookie_secure_flag(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("SESSION_COOKIE_SECURE", raising=False)
    else:
        monkeypatch.setenv("SESSION_COOKIE_SECURE", raw)

    import config.production

    settings = importlib.reload(config.production)

    assert settings.SESSION_COOKIE_SECURE is expected
