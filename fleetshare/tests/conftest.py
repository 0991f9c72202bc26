from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from fleetshare.app import create_app
from fleetshare.infrastructure.repositories.users import InMemoryUserRepository

from .helpers import DeterministicHasher, make_config


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def flask_app(tmp_path: Path, users: InMemoryUserRepository) -> Flask:
    return create_app(make_config(tmp_path), users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def client(flask_app: Flask) -> FlaskClient:
    return flask_app.test_client()


@pytest.fixture()
def login(client: FlaskClient) -> Callable[[str, str], str]:
    def _login(username: str = "alice", password: str = "secret123") -> str:
        client.post("/register", json={"username": username, "password": password})
        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200
        return response.get_json()["token"]

    return _login
