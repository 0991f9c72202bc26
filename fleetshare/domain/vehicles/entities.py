# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Vehicle value objects shared by listings, assignments and trip history."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any

from ..exceptions import InvariantViolation


class VehicleType(StrEnum):
    CAR = "car"
    MOTORBIKE = "motorbike"
    SCOOTER = "scooter"


VEHICLE_TYPES: tuple[VehicleType, ...] = tuple(VehicleType)


def _check_coordinates(lat: float, lng: float) -> None:
    if not (math.isfinite(lat) and -90.0 <= lat <= 90.0):
        raise InvariantViolation("latitude must be within [-90, 90]", field="lat")
    if not (math.isfinite(lng) and -180.0 <= lng <= 180.0):
        raise InvariantViolation("longitude must be within [-180, 180]", field="lng")


@dataclass(slots=True, frozen=True)
class VehicleAssignment:
    """A vehicle parked at a position with its remaining charge or fuel."""

    lat: float
    lng: float
    vehicle: VehicleType
    percent: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "vehicle", VehicleType(self.vehicle))
        _check_coordinates(self.lat, self.lng)
        if not 0 <= self.percent <= 100:
            raise InvariantViolation("percent must be within [0, 100]", field="percent")

    def to_payload(self) -> dict[str, Any]:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "vehicle": self.vehicle.value,
            "percent": self.percent,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> VehicleAssignment | None:
        """Inverse of :meth:`to_payload`; an empty mapping means no vehicle.

        Older users files hold listings copied verbatim, so ``percent`` may be
        a ``"57%"`` string and ``vehicle`` may be missing. A record that still
        cannot be read as a vehicle yields ``None``.
        """

        if not payload:
            return None
        percent = payload.get("percent")
        if isinstance(percent, str):
            percent = percent.strip().removesuffix("%")
        try:
            return cls(
                lat=float(payload["lat"]),
                lng=float(payload["lng"]),
                vehicle=VehicleType(payload["vehicle"]),
                percent=int(percent),  # type: ignore[arg-type]
            )
        except (KeyError, TypeError, ValueError):
            return None


@dataclass(slots=True, frozen=True)
class HistoryEntry:
    day: date
    vehicle: VehicleType
    distance_km: float

    def __post_init__(self) -> None:
        if self.distance_km < 0:
            raise InvariantViolation("distance cannot be negative", field="distance_km")

    def to_payload(self) -> dict[str, Any]:
        return {
            "day": self.day.isoformat(),
            "vehicle": self.vehicle.value,
            "distanceKm": round(self.distance_km, 3),
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> HistoryEntry:
        return cls(
            day=date.fromisoformat(payload["day"]),
            vehicle=VehicleType(payload["vehicle"]),
            distance_km=float(payload["distanceKm"]),
        )
