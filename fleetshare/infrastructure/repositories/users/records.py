# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Mapping between domain users and the JSON record layout of the users file."""

from __future__ import annotations

from typing import Any

from fleetshare.domain.users.entities import User
from fleetshare.domain.vehicles.entities import HistoryEntry, VehicleAssignment
from fleetshare.shared.logging import logger


def user_to_record(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "password": user.password_hash,
        "assignedVehicle": user.assigned_vehicle.to_payload() if user.assigned_vehicle else {},
        "vehicleHistory": [entry.to_payload() for entry in user.vehicle_history],
    }


def user_from_record(record: dict[str, Any]) -> User:
    stored_vehicle = record.get("assignedVehicle") or {}
    assigned = VehicleAssignment.from_payload(stored_vehicle)
    if stored_vehicle and assigned is None:
        logger.warning(
            f"users.json: ignoring unreadable assignedVehicle for user={record.get('username')}"
        )
    return User(
        id=str(record["id"]),
        username=str(record["username"]),
        password_hash=str(record["password"]),
        assigned_vehicle=assigned,
        vehicle_history=tuple(
            HistoryEntry.from_payload(item) for item in record.get("vehicleHistory") or []
        ),
    )
