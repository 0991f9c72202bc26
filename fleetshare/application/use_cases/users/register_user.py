# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from fleetshare.domain.users.entities import User
from fleetshare.domain.users.exceptions import UserAlreadyExistsError
from fleetshare.domain.users.repositories import PasswordHasher, UserRepository
from fleetshare.shared.errors.base import InfrastructureError
from fleetshare.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        if self._users.find_by_username(username):
            raise UserAlreadyExistsError()

        try:
            hashed = self._password_hasher.hash(password)
        except Exception as exc:
            logger.exception("users.register: password hashing failed")
            raise InfrastructureError(
                "registration_failed",
                message="Error occurred while registering user",
            ) from exc

        # add() re-checks uniqueness under the store's write lock
        return self._users.add(User.create(username, hashed))
