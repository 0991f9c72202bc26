# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from fleetshare.domain.users.entities import TokenClaims
from fleetshare.domain.users.exceptions import InvalidCredentialsError
from fleetshare.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from fleetshare.domain.vehicles.entities import HistoryEntry
from fleetshare.shared.errors.base import InfrastructureError
from fleetshare.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
        history_factory: Callable[[], Sequence[HistoryEntry]] = tuple,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._history_factory = history_factory

    def execute(self, username: str, password: str) -> str:
        user = self._users.find_by_username(username)
        if user is None:
            raise InvalidCredentialsError()

        try:
            password_valid = self._password_hasher.verify(password, user.password_hash)
        except Exception as exc:
            logger.exception(f"users.login: password check failed for {username}")
            raise InfrastructureError(
                "password_check_failed",
                message="Error occurred while checking password",
            ) from exc

        if not password_valid:
            raise InvalidCredentialsError()

        claims = TokenClaims(
            id=user.id,
            username=user.username,
            assigned_vehicle=user.assigned_vehicle,
            vehicle_history=tuple(self._history_factory()),
        )
        return self._tokens.issue(claims)
