import pytest
from pydantic import ValidationError

from quizapp.core.config import Settings


def test_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("FRONTEND_ORIGINS", "http://a.test,http://b.test")
    s = Settings(_env_file=None)
    assert s.FRONTEND_ORIGINS == ["http://a.test", "http://b.test"]


def test_origins_from_semicolons_and_json(monkeypatch):
    monkeypatch.setenv("FRONTEND_ORIGINS", "http://a.test; http://b.test")
    assert Settings(_env_file=None).FRONTEND_ORIGINS == ["http://a.test", "http://b.test"]

    monkeypatch.setenv("FRONTEND_ORIGINS", '["http://c.test"]')
    assert Settings(_env_file=None).FRONTEND_ORIGINS == ["http://c.test"]


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_supabase_url_needs_key(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
