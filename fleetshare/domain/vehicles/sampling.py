# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Random vehicle placement inside a spherical cap around a point."""

from __future__ import annotations

import math
import random
from typing import Literal

from .entities import VEHICLE_TYPES, VehicleAssignment

EARTH_RADIUS_KM = 6371.0

SamplingMode = Literal["distance", "area"]


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometres."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = phi2 - phi1
    dlmb = math.radians(lng2 - lng1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


def destination_point(
    lat: float, lng: float, bearing: float, angular_distance: float
) -> tuple[float, float]:
    """Solve the direct problem on a sphere; angles in radians, result in degrees."""

    phi1 = math.radians(lat)
    lmb1 = math.radians(lng)

    phi2 = math.asin(
        math.sin(phi1) * math.cos(angular_distance)
        + math.cos(phi1) * math.sin(angular_distance) * math.cos(bearing)
    )
    lmb2 = lmb1 + math.atan2(
        math.sin(bearing) * math.sin(angular_distance) * math.cos(phi1),
        math.cos(angular_distance) - math.sin(phi1) * math.sin(phi2),
    )

    lng2 = (math.degrees(lmb2) + 540.0) % 360.0 - 180.0
    return math.degrees(phi2), lng2


def sample_vehicles(
    center_lat: float,
    center_lng: float,
    radius_km: float,
    count: int,
    *,
    rng: random.Random | None = None,
    mode: SamplingMode = "distance",
) -> list[VehicleAssignment]:
    """Scatter ``count`` simulated vehicles within ``radius_km`` of the center.

    ``mode="distance"`` draws the travelled distance uniformly, which packs
    points towards the center. ``mode="area"`` takes the square root of the
    uniform draw so points are spread evenly over the disc.
    """

    rng = rng or random.Random()
    max_angle = radius_km / EARTH_RADIUS_KM
    vehicles: list[VehicleAssignment] = []

    for _ in range(count):
        bearing = rng.random() * 2 * math.pi
        u = rng.random()
        fraction = math.sqrt(u) if mode == "area" else u
        lat, lng = destination_point(center_lat, center_lng, bearing, fraction * max_angle)

        vehicles.append(
            VehicleAssignment(
                lat=lat,
                lng=lng,
                vehicle=rng.choice(VEHICLE_TYPES),
                percent=rng.randint(0, 100),
            )
        )

    return vehicles


class VehicleSampler:
    def __init__(
        self,
        *,
        per_query: int = 60,
        mode: SamplingMode = "distance",
        rng: random.Random | None = None,
    ) -> None:
        self._per_query = per_query
        self._mode: SamplingMode = mode
        self._rng = rng or random.Random()

    def sample(
        self, lat: float, lng: float, radius_km: float, count: int | None = None
    ) -> list[VehicleAssignment]:
        return sample_vehicles(
            lat,
            lng,
            radius_km,
            self._per_query if count is None else count,
            rng=self._rng,
            mode=self._mode,
        )
