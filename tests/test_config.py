from __future__ import annotations

from pathlib import Path

import pytest

from userhub.core.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "DATABASE_PATH",
        "REDIS_URL",
        "REDIS_MAX_CONNECTIONS",
        "CACHE_TTL_SECONDS",
        "LOG_LEVEL",
        "CORS_ALLOW_ORIGINS",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("userhub.core.config.load_dotenv", lambda: False)

    settings = Settings()

    assert settings.database_path == Path("data/users.db").resolve()
    assert settings.redis_url == "redis://localhost:6379/0"
    assert settings.redis_max_connections == 10
    assert settings.cache_ttl_seconds == 0
    assert settings.log_level == "INFO"
    assert settings.cors_allow_origins == ["*"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "users.db"))
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/2")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "120")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, ,http://b.test")

    settings = Settings()

    assert settings.database_path == (tmp_path / "users.db").resolve()
    assert settings.redis_url == "redis://cache:6379/2"
    assert settings.cache_ttl_seconds == 120
    assert settings.log_level == "DEBUG"
    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]


def test_non_integer_value_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDIS_MAX_CONNECTIONS", "many")

    with pytest.raises(RuntimeError, match="REDIS_MAX_CONNECTIONS"):
        Settings()


@pytest.mark.parametrize("key", ["CACHE_TTL_SECONDS", "REDIS_MAX_CONNECTIONS"])
def test_out_of_range_value_is_rejected(monkeypatch: pytest.MonkeyPatch, key: str) -> None:
    monkeypatch.setenv(key, "-5")

    with pytest.raises(RuntimeError, match=f"{key} must be at least"):
        Settings()


def test_zero_ttl_means_no_expiry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CACHE_TTL_SECONDS", "0")

    assert Settings().cache_ttl_seconds == 0
