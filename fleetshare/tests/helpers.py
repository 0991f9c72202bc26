from __future__ import annotations

from pathlib import Path

from fleetshare.domain.users.repositories import PasswordHasher
from fleetshare.shared.config import AppConfig, StoreConfig, TokenConfig, VehiclesConfig

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


def make_config(tmp_path: Path, **store_env: object) -> AppConfig:
    store = {"USER_STORE": "json", "USERS_FILE": tmp_path / "users.json", **store_env}
    return AppConfig(
        store=StoreConfig(**store),  # type: ignore[arg-type]
        token=TokenConfig(JWT_SECRET_KEY=TEST_SECRET),  # type: ignore[call-arg]
        vehicles=VehiclesConfig(  # type: ignore[call-arg]
            VEHICLES_PER_QUERY=60,
            VEHICLES_MAX_RADIUS_KM=100.0,
            HISTORY_DAYS=89,
        ),
    )
