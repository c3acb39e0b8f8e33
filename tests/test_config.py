"""Tests for settings."""

from flashdeck.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("UUID", raising=False)
    settings = Settings(database_url="sqlite://")
    assert settings.api_prefix == "/api"
    assert settings.access_token == ""
    assert settings.default_user_id == 1
    assert settings.daily_review_quota == 9
    assert settings.active_deck_cache_size == 128


def test_postgres_scheme_is_rewritten():
    settings = Settings(database_url="postgres://user:pw@db:5432/cards")
    assert settings.sqlalchemy_url == "postgresql://user:pw@db:5432/cards"


def test_other_schemes_are_kept():
    settings = Settings(database_url="sqlite:///cards.db")
    assert settings.sqlalchemy_url == "sqlite:///cards.db"


def test_access_token_from_uuid(monkeypatch):
    monkeypatch.setenv("UUID", "abc-123")
    assert Settings(database_url="sqlite://").access_token == "abc-123"


def test_review_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DAILY_REVIEW_QUOTA", "12")
    monkeypatch.setenv("ACTIVE_DECK_CACHE_SIZE", "4")
    settings = Settings(database_url="sqlite://")
    assert settings.daily_review_quota == 12
    assert settings.active_deck_cache_size == 4
