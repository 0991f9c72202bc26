# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .json_user_repository import JsonFileUserRepository
from .memory_user_repository import InMemoryUserRepository
from .sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = ["InMemoryUserRepository", "JsonFileUserRepository", "SqlAlchemyUserRepository"]
