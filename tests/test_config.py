"""Unit tests for core/config.py -- JWT_SECRET policy and field validation."""

import pytest
from pydantic import ValidationError

from core.config import Settings


def test_debug_generates_secret() -> None:
    settings = Settings(debug=True, jwt_secret="")
    assert len(settings.jwt_secret) >= 32


def test_production_requires_secret() -> None:
    with pytest.raises(ValidationError, match="JWT_SECRET is required"):
        Settings(debug=False, jwt_secret="")


def test_short_secret_rejected() -> None:
    with pytest.raises(ValidationError, match="at least 32 characters"):
        Settings(debug=True, jwt_secret="too-short")


def test_explicit_secret_kept() -> None:
    secret = "k" * 40
    assert Settings(debug=False, jwt_secret=secret).jwt_secret == secret


def test_env_var_mapping(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "e" * 32)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("BCRYPT_ROUNDS", "12")
    settings = Settings()
    assert settings.jwt_secret == "e" * 32
    assert settings.database_url == "sqlite:///elsewhere.db"
    assert settings.bcrypt_rounds == 12


@pytest.mark.parametrize("rounds", [3, 17])
def test_bcrypt_rounds_bounds(rounds: int) -> None:
    with pytest.raises(ValidationError):
        Settings(debug=True, bcrypt_rounds=rounds)
