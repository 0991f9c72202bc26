# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TokenClaims, User
from .exceptions import InvalidCredentialsError, UserAlreadyExistsError, UserNotFoundError
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "PasswordHasher",
    "TokenClaims",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
