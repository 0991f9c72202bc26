# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from fleetshare.domain.vehicles.entities import VehicleAssignment
from fleetshare.domain.vehicles.sampling import VehicleSampler


class ListNearbyVehiclesUseCase:
    def __init__(self, *, sampler: VehicleSampler) -> None:
        self._sampler = sampler

    def execute(self, lat: float, lng: float, radius_km: float) -> list[VehicleAssignment]:
        return self._sampler.sample(lat, lng, radius_km)
