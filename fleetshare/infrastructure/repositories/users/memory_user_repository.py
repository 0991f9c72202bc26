# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading

from fleetshare.domain.users.entities import User
from fleetshare.domain.users.exceptions import UserAlreadyExistsError
from fleetshare.domain.users.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def add(self, user: User) -> User:
        with self._lock:
            if user.username in self._users:
                raise UserAlreadyExistsError()
            self._users[user.username] = user
        return user

    def upsert(self, user: User) -> User:
        with self._lock:
            self._users[user.username] = user
        return user

    def __len__(self) -> int:
        return len(self._users)
