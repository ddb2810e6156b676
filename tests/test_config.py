# tests/test_config.py

import pytest
from pydantic import ValidationError

from party_invite.config import Settings
from party_invite.utils.constants import InviteNameMatch

ENV_VARS = (
    "DATABASE_URL",
    "DB_POOL_SIZE",
    "JWT_SECRET",
    "FRONTEND_ORIGIN",
    "INVITE_NAME_MATCH",
    "RSVP_PHONE_REQUIRED",
    "LOG_LEVEL",
    "PORT",
    "RELOAD",
    "HOST",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "sqlite:///./party_invite.db"
    assert (settings.HOST, settings.PORT, settings.RELOAD) == ("0.0.0.0", 3001, False)
    assert settings.INVITE_NAME_MATCH is InviteNameMatch.EXACT
    assert settings.RSVP_PHONE_REQUIRED is False
    assert settings.FRONTEND_ORIGINS == ["http://localhost:5173"]
    assert settings.uses_default_secret


def test_values_are_read_from_the_environment(monkeypatch):
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("JWT_SECRET", "s3cret")
    monkeypatch.setenv("FRONTEND_ORIGIN", "http://a.test, http://b.test,")
    monkeypatch.setenv("INVITE_NAME_MATCH", " CaseFold ")
    monkeypatch.setenv("RSVP_PHONE_REQUIRED", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.DB_POOL_SIZE == 3
    assert not settings.uses_default_secret
    assert settings.FRONTEND_ORIGINS == ["http://a.test", "http://b.test"]
    assert settings.INVITE_NAME_MATCH is InviteNameMatch.CASEFOLD
    assert settings.RSVP_PHONE_REQUIRED is True
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "name, value", [("INVITE_NAME_MATCH", "fuzzy"), ("DB_POOL_SIZE", "lots")]
)
def test_invalid_values_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
