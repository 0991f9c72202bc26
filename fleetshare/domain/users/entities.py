# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace

from ..vehicles.entities import HistoryEntry, VehicleAssignment


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    password_hash: str
    assigned_vehicle: VehicleAssignment | None = None
    vehicle_history: tuple[HistoryEntry, ...] = field(default_factory=tuple)

    @classmethod
    def create(cls, username: str, password_hash: str) -> User:
        return cls(id=str(uuid.uuid4()), username=username, password_hash=password_hash)

    def with_vehicle(self, vehicle: VehicleAssignment | None) -> User:
        return replace(self, assigned_vehicle=vehicle)


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Identity and profile snapshot carried inside a bearer token."""

    id: str
    username: str
    assigned_vehicle: VehicleAssignment | None = None
    vehicle_history: tuple[HistoryEntry, ...] = field(default_factory=tuple)
