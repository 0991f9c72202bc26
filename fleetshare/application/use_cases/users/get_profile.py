# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from fleetshare.domain.users.entities import TokenClaims, User
from fleetshare.domain.users.exceptions import UserNotFoundError
from fleetshare.domain.users.repositories import UserRepository


class GetProfileUseCase:
    """Resolve the stored user behind a verified token."""

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, claims: TokenClaims) -> User:
        user = self._users.find_by_username(claims.username)
        if user is None:
            raise UserNotFoundError(context={"username": claims.username})
        return user
