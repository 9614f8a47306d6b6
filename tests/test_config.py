"""
Tests for environment-driven settings in app.core.config.
"""

import importlib

import pytest

import app.core.config as config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch):
    """Reload config under the patched env, then restore the original module state."""
    # load_dotenv() must not refill the variables from a local .env
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
    for name in ("PORT", "FRONTEND_URL", "GEMINI_MODEL", "GEMINI_API_BASE", "GEMINI_API_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    cfg = reload_config()
    assert cfg.PORT == 3000
    assert cfg.FRONTEND_URL == "*"
    assert cfg.GEMINI_MODEL == "gemini-2.0-flash"
    assert cfg.GEMINI_API_BASE == "https://generativelanguage.googleapis.com/v1beta"
    assert cfg.GEMINI_API_TIMEOUT == 60.0


def test_values_from_env(monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FRONTEND_URL", "https://chat.example.com")
    monkeypatch.setenv("GEMINI_API_BASE", "http://localhost:9000/v1beta/")
    monkeypatch.setenv("GEMINI_API_TIMEOUT", "120")
    cfg = reload_config()
    assert cfg.PORT == 8080
    assert cfg.FRONTEND_URL == "https://chat.example.com"
    assert cfg.GEMINI_API_BASE == "http://localhost:9000/v1beta"
    assert cfg.GEMINI_API_TIMEOUT == 120.0


def test_blank_frontend_url_means_any_origin(monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
    monkeypatch.setenv("FRONTEND_URL", "  ")
    assert reload_config().FRONTEND_URL == "*"
