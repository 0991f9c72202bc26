# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import VEHICLE_TYPES, HistoryEntry, VehicleAssignment, VehicleType
from .history import generate_history
from .sampling import (
    EARTH_RADIUS_KM,
    VehicleSampler,
    destination_point,
    haversine_km,
    sample_vehicles,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "VEHICLE_TYPES",
    "HistoryEntry",
    "VehicleAssignment",
    "VehicleSampler",
    "VehicleType",
    "destination_point",
    "generate_history",
    "haversine_km",
    "sample_vehicles",
]
