from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from http import HTTPStatus
from pathlib import Path

import pytest
from loguru import logger as loguru_logger

from fleetshare.domain.users.entities import User
from fleetshare.domain.users.exceptions import UserAlreadyExistsError
from fleetshare.domain.users.repositories import UserRepository
from fleetshare.domain.vehicles import VehicleAssignment, VehicleType
from fleetshare.infrastructure.db import create_db_engine, create_session_factory, init_db
from fleetshare.infrastructure.repositories.users import (
    InMemoryUserRepository,
    JsonFileUserRepository,
    SqlAlchemyUserRepository,
)
from fleetshare.shared.errors import InfrastructureError

VEHICLE = VehicleAssignment(lat=52.52, lng=13.405, vehicle=VehicleType.SCOOTER, percent=63)


@pytest.fixture(params=["memory", "json", "sql"])
def repository(request: pytest.FixtureRequest, tmp_path: Path) -> Iterator[UserRepository]:
    if request.param == "memory":
        yield InMemoryUserRepository()
    elif request.param == "json":
        yield JsonFileUserRepository(tmp_path / "users.json")
    else:
        engine = create_db_engine("sqlite://")
        init_db(engine)
        yield SqlAlchemyUserRepository(create_session_factory(engine))
        engine.dispose()


def test_find_missing_user_returns_none(repository: UserRepository) -> None:
    assert repository.find_by_username("nobody") is None


def test_add_then_find(repository: UserRepository) -> None:
    user = User.create("alice", "hash")

    repository.add(user)

    assert repository.find_by_username("alice") == user


def test_add_duplicate_username_raises(repository: UserRepository) -> None:
    repository.add(User.create("alice", "hash"))

    with pytest.raises(UserAlreadyExistsError):
        repository.add(User.create("alice", "other"))


def test_upsert_replaces_existing_record(repository: UserRepository) -> None:
    user = repository.add(User.create("alice", "hash"))

    repository.upsert(user.with_vehicle(VEHICLE))

    stored = repository.find_by_username("alice")
    assert stored is not None
    assert stored.id == user.id
    assert stored.assigned_vehicle == VEHICLE

    repository.upsert(stored.with_vehicle(None))
    assert repository.find_by_username("alice").assigned_vehicle is None


def test_upsert_inserts_unknown_user(repository: UserRepository) -> None:
    user = User.create("bob", "hash")

    repository.upsert(user)

    assert repository.find_by_username("bob") == user


def test_json_file_uses_original_record_layout(tmp_path: Path) -> None:
    path = tmp_path / "users.json"
    repository = JsonFileUserRepository(path)
    user = repository.add(User.create("alice", "hash"))

    records = json.loads(path.read_text(encoding="utf-8"))
    assert records == [
        {
            "id": user.id,
            "username": "alice",
            "password": "hash",
            "assignedVehicle": {},
            "vehicleHistory": [],
        }
    ]

    repository.upsert(user.with_vehicle(VEHICLE))
    records = json.loads(path.read_text(encoding="utf-8"))
    assert records[0]["assignedVehicle"] == {
        "lat": 52.52,
        "lng": 13.405,
        "vehicle": "scooter",
        "percent": 63,
    }


def test_json_file_is_reread_on_every_call(tmp_path: Path) -> None:
    path = tmp_path / "users.json"
    first = JsonFileUserRepository(path)
    second = JsonFileUserRepository(path)

    first.add(User.create("alice", "hash"))

    assert second.find_by_username("alice") is not None


@pytest.mark.parametrize("content", ["", "  \n"])
def test_blank_json_file_reads_as_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "users.json"
    path.write_text(content, encoding="utf-8")
    repository = JsonFileUserRepository(path)

    assert repository.find_by_username("alice") is None

    repository.add(User.create("alice", "hash"))
    assert repository.find_by_username("alice") is not None


@pytest.mark.parametrize(
    "content",
    [
        '[{"id": "1", "username": "alice", "password": "h"},]',
        "{not json",
        '{"username": "alice"}',
        '[{"id": "1", "username": "alice", "password": "h"}, 7]',
    ],
)
def test_corrupt_json_file_fails_without_being_rewritten(tmp_path: Path, content: str) -> None:
    path = tmp_path / "users.json"
    path.write_text(content, encoding="utf-8")
    repository = JsonFileUserRepository(path)

    with pytest.raises(InfrastructureError) as exc_info:
        repository.add(User.create("bob", "hash"))
    assert exc_info.value.status == HTTPStatus.INTERNAL_SERVER_ERROR

    with pytest.raises(InfrastructureError):
        repository.upsert(User.create("bob", "hash"))
    with pytest.raises(InfrastructureError):
        repository.find_by_username("alice")

    assert path.read_text(encoding="utf-8") == content


@pytest.mark.parametrize(
    ("stored", "expected"),
    [
        (
            {"lat": 1.0, "lng": 2.0, "vehicle": "car", "percent": "57%"},
            VehicleAssignment(lat=1.0, lng=2.0, vehicle=VehicleType.CAR, percent=57),
        ),
        ({"lat": 1.0, "lng": 2.0, "percent": "57%"}, None),
        ({"lat": 1.0, "lng": 2.0, "vehicle": "tank", "percent": 10}, None),
        ({"lat": "north", "lng": 2.0, "vehicle": "car", "percent": 10}, None),
    ],
)
def test_json_file_reads_assignments_in_older_layouts(
    tmp_path: Path, stored: dict[str, object], expected: VehicleAssignment | None
) -> None:
    path = tmp_path / "users.json"
    record = {
        "id": "8d7c0a5e-0000-4000-8000-000000000001",
        "username": "alice",
        "password": "hash",
        "assignedVehicle": stored,
        "vehicleHistory": [],
    }
    path.write_text(json.dumps([record]), encoding="utf-8")

    user = JsonFileUserRepository(path).find_by_username("alice")

    assert user is not None
    assert user.assigned_vehicle == expected


def test_json_file_serializes_concurrent_writers(tmp_path: Path) -> None:
    repository = JsonFileUserRepository(tmp_path / "users.json")
    names = [f"user{i}" for i in range(20)]
    for name in names:
        repository.add(User.create(name, "hash"))

    def assign(name: str) -> None:
        user = repository.find_by_username(name)
        assert user is not None
        repository.upsert(user.with_vehicle(VEHICLE))

    threads = [threading.Thread(target=assign, args=(name,)) for name in names]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for name in names:
        assert repository.find_by_username(name).assigned_vehicle == VEHICLE


def test_sql_duplicate_username_logs_warning_without_traceback() -> None:
    engine = create_db_engine("sqlite://")
    init_db(engine)
    repository = SqlAlchemyUserRepository(create_session_factory(engine))
    repository.add(User.create("alice", "hash"))
    records: list[dict] = []
    handler_id = loguru_logger.add(lambda message: records.append(message.record), level="DEBUG")

    try:
        with pytest.raises(UserAlreadyExistsError):
            repository.add(User.create("alice", "other"))
        assert repository.find_by_username("alice").password_hash == "hash"
    finally:
        loguru_logger.remove(handler_id)
        engine.dispose()

    assert [r["level"].name for r in records if r["level"].no >= 40] == []
    assert all(r["exception"] is None for r in records)
    assert any("username taken" in r["message"] for r in records)
