# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "")


class StoreConfig(BaseSettings):
    kind: Literal["json", "sql", "memory"] = Field("json", alias="USER_STORE")
    users_file: Path = Field(Path("users.json"), alias="USERS_FILE")
    database_url: str = Field("sqlite:///fleetshare.db", alias="DATABASE_URL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)


class TokenConfig(BaseSettings):
    secret_key: str = Field("dev", alias="JWT_SECRET_KEY")
    algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    # None keeps tokens valid until the signing secret changes
    ttl_seconds: int | None = Field(None, ge=1, alias="TOKEN_TTL_SECONDS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)


class VehiclesConfig(BaseSettings):
    per_query: int = Field(60, ge=1, le=1000, alias="VEHICLES_PER_QUERY")
    max_radius_km: float = Field(100.0, gt=0, alias="VEHICLES_MAX_RADIUS_KM")
    sampling: Literal["distance", "area"] = Field("distance", alias="VEHICLE_SAMPLING")
    history_days: int = Field(89, ge=0, le=3650, alias="HISTORY_DAYS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)


class SecurityConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _store_config_factory() -> StoreConfig:
    return StoreConfig()  # type: ignore[call-arg]


def _token_config_factory() -> TokenConfig:
    return TokenConfig()  # type: ignore[call-arg]


def _vehicles_config_factory() -> VehiclesConfig:
    return VehiclesConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    store: StoreConfig = Field(default_factory=_store_config_factory)
    token: TokenConfig = Field(default_factory=_token_config_factory)
    vehicles: VehiclesConfig = Field(default_factory=_vehicles_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.token.secret_key in _INSECURE_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET_KEY detected in production!\n"
                "   JWT_SECRET_KEY must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if self.token.ttl_seconds is None:
            warnings.append("⚠️  Bearer tokens never expire (set TOKEN_TTL_SECONDS)")
        if self.store.kind == "memory":
            warnings.append("⚠️  USER_STORE=memory loses all users on restart")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "SecurityConfig",
    "StoreConfig",
    "TokenConfig",
    "VehiclesConfig",
    "load_config",
]
