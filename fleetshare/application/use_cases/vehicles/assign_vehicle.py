# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from fleetshare.domain.users.entities import User
from fleetshare.domain.users.exceptions import UserNotFoundError
from fleetshare.domain.users.repositories import UserRepository
from fleetshare.domain.vehicles.entities import VehicleAssignment


class _VehicleUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def _load(self, username: str) -> User:
        user = self._users.find_by_username(username)
        if user is None:
            raise UserNotFoundError(context={"username": username})
        return user


class AssignVehicleUseCase(_VehicleUseCase):
    def execute(self, username: str, vehicle: VehicleAssignment) -> User:
        return self._users.upsert(self._load(username).with_vehicle(vehicle))


class ReleaseVehicleUseCase(_VehicleUseCase):
    def execute(self, username: str) -> User:
        return self._users.upsert(self._load(username).with_vehicle(None))
