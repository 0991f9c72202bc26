from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from fleetshare.domain.users.entities import User
from fleetshare.domain.vehicles.entities import VehicleAssignment, VehicleType


class _Coordinates(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)

    @field_validator("lat", "lng")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("coordinate must be a finite number")
        return value


class VehicleQueryDTO(_Coordinates):
    radius: float = Field(gt=0.0)

    @field_validator("radius")
    @classmethod
    def _within_max_radius(cls, value: float, info: ValidationInfo) -> float:
        max_radius = (info.context or {}).get("max_radius_km")
        if not math.isfinite(value):
            raise ValueError("radius must be a finite number")
        if max_radius is not None and value > max_radius:
            raise ValueError(f"radius must be at most {max_radius} km")
        return value


class AddVehicleRequestDTO(_Coordinates):
    vehicle: VehicleType
    percent: int = Field(ge=0, le=100)

    @field_validator("percent", mode="before")
    @classmethod
    def _strip_percent_sign(cls, value: Any) -> Any:
        # listings used to render percent as "57%"
        if isinstance(value, str):
            return value.strip().removesuffix("%").strip()
        return value

    def to_domain(self) -> VehicleAssignment:
        return VehicleAssignment(
            lat=self.lat, lng=self.lng, vehicle=self.vehicle, percent=self.percent
        )


class ProfileDTO(BaseModel):
    id: str
    username: str
    assignedVehicle: dict[str, Any]

    @classmethod
    def from_user(cls, user: User) -> ProfileDTO:
        return cls(
            id=user.id,
            username=user.username,
            assignedVehicle=user.assigned_vehicle.to_payload() if user.assigned_vehicle else {},
        )
