# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from fleetshare.domain.users.entities import User
from fleetshare.domain.users.exceptions import UserAlreadyExistsError
from fleetshare.domain.users.repositories import UserRepository
from fleetshare.shared.errors.base import InfrastructureError
from fleetshare.shared.logging import logger
from fleetshare.utils.jsonio import read_json_list_of_dicts, write_json_list

from .records import user_from_record, user_to_record


class JsonFileUserRepository(UserRepository):
    """All users live in one JSON array that is re-read on every call.

    Mutations hold a single lock for the whole read-modify-write cycle, so at
    most one writer touches the file at a time within this process.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._write_lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> list[dict[str, Any]]:
        try:
            return read_json_list_of_dicts(self._path)
        except (OSError, ValueError) as exc:
            # the file is left untouched so nothing already stored is lost
            logger.error(f"users.json: unreadable {self._path} ({exc})")
            raise InfrastructureError(
                "user_store_unreadable", message="Error occurred while reading users"
            ) from exc

    def _write(self, records: list[dict[str, Any]]) -> None:
        try:
            write_json_list(self._path, records)
        except OSError as exc:
            logger.exception(f"users.json: failed writing {self._path}")
            raise InfrastructureError(
                "user_store_write_failed", message="Error occurred while saving users"
            ) from exc
        logger.debug(f"users.json: wrote {len(records)} records to {self._path}")

    def find_by_username(self, username: str) -> User | None:
        for record in self._read():
            if record.get("username") == username:
                return user_from_record(record)
        return None

    def add(self, user: User) -> User:
        with self._write_lock:
            records = self._read()
            if any(record.get("username") == user.username for record in records):
                raise UserAlreadyExistsError()
            records.append(user_to_record(user))
            self._write(records)
        logger.info(f"users.json: added user={user.username}")
        return user

    def upsert(self, user: User) -> User:
        with self._write_lock:
            records = self._read()
            for idx, record in enumerate(records):
                if record.get("username") == user.username:
                    records[idx] = user_to_record(user)
                    break
            else:
                records.append(user_to_record(user))
            self._write(records)
        return user
