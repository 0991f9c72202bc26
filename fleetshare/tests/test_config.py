from __future__ import annotations

from pathlib import Path

import pytest

from fleetshare.shared.config import AppConfig


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in (
        "APP_ENV",
        "JWT_SECRET_KEY",
        "TOKEN_TTL_SECONDS",
        "USER_STORE",
        "USERS_FILE",
        "ALLOWED_ORIGINS",
        "VEHICLE_SAMPLING",
        "VEHICLES_PER_QUERY",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_the_demo_server() -> None:
    config = AppConfig()

    assert config.port == 3000
    assert config.store.kind == "json"
    assert config.store.users_file == Path("users.json")
    assert config.vehicles.per_query == 60
    assert config.vehicles.sampling == "distance"
    assert config.vehicles.history_days == 89
    assert config.token.ttl_seconds is None
    assert config.security.allowed_origins == ["*"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET_KEY", "from-env-secret")
    monkeypatch.setenv("TOKEN_TTL_SECONDS", "3600")
    monkeypatch.setenv("USER_STORE", "memory")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("VEHICLE_SAMPLING", "area")
    monkeypatch.setenv("PORT", "8080")

    config = AppConfig()

    assert config.token.secret_key == "from-env-secret"
    assert config.token.ttl_seconds == 3600
    assert config.store.kind == "memory"
    assert config.security.allowed_origins == ["http://a.test", "http://b.test"]
    assert config.vehicles.sampling == "area"
    assert config.port == 8080


def test_dotenv_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("JWT_SECRET_KEY=dotenv-secret\n", encoding="utf-8")

    assert AppConfig().token.secret_key == "dotenv-secret"


def test_production_refuses_default_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_accepts_strong_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", "a-long-random-production-secret-value")

    assert AppConfig().is_production()
