from __future__ import annotations

import math
import random

import pytest

from fleetshare.domain.vehicles import (
    VEHICLE_TYPES,
    VehicleSampler,
    destination_point,
    haversine_km,
    sample_vehicles,
)

TOLERANCE_KM = 1e-6


def test_sample_around_origin_returns_requested_count_within_radius() -> None:
    vehicles = sample_vehicles(0, 0, 10, 5, rng=random.Random(1))

    assert len(vehicles) == 5
    for vehicle in vehicles:
        assert haversine_km(0, 0, vehicle.lat, vehicle.lng) <= 10 + TOLERANCE_KM
        assert vehicle.vehicle in VEHICLE_TYPES
        assert 0 <= vehicle.percent <= 100


@pytest.mark.parametrize(
    ("lat", "lng", "radius"),
    [
        (51.5074, -0.1278, 2.5),
        (-33.8688, 151.2093, 40.0),
        (89.9, 10.0, 15.0),
        (0.0, 179.99, 30.0),
        (-60.0, -179.5, 100.0),
    ],
)
@pytest.mark.parametrize("mode", ["distance", "area"])
def test_every_sample_stays_inside_the_disc(lat: float, lng: float, radius: float, mode) -> None:
    vehicles = sample_vehicles(lat, lng, radius, 200, rng=random.Random(42), mode=mode)

    assert len(vehicles) == 200
    for vehicle in vehicles:
        assert haversine_km(lat, lng, vehicle.lat, vehicle.lng) <= radius + TOLERANCE_KM
        assert -90.0 <= vehicle.lat <= 90.0
        assert -180.0 <= vehicle.lng < 180.0


def test_distance_mode_clusters_nearer_the_center_than_area_mode() -> None:
    def mean_distance(mode) -> float:
        points = sample_vehicles(10, 10, 20, 4000, rng=random.Random(7), mode=mode)
        return sum(haversine_km(10, 10, p.lat, p.lng) for p in points) / len(points)

    # expected means: r/2 for distance-uniform, 2r/3 for area-uniform
    assert mean_distance("distance") == pytest.approx(10.0, rel=0.05)
    assert mean_distance("area") == pytest.approx(40.0 / 3.0, rel=0.05)


def test_all_vehicle_types_and_percent_bounds_are_reachable() -> None:
    vehicles = sample_vehicles(0, 0, 5, 3000, rng=random.Random(3))

    assert {v.vehicle for v in vehicles} == set(VEHICLE_TYPES)
    percents = {v.percent for v in vehicles}
    assert min(percents) == 0
    assert max(percents) == 100


def test_same_seed_gives_same_listing() -> None:
    first = sample_vehicles(45, 7, 3, 10, rng=random.Random(99))
    second = sample_vehicles(45, 7, 3, 10, rng=random.Random(99))

    assert first == second


def test_zero_count_returns_empty_list() -> None:
    assert sample_vehicles(0, 0, 10, 0, rng=random.Random(0)) == []


def test_destination_point_due_north_moves_latitude_only() -> None:
    lat, lng = destination_point(0.0, 0.0, 0.0, 100.0 / 6371.0)

    assert lat == pytest.approx(math.degrees(100.0 / 6371.0))
    assert lng == pytest.approx(0.0, abs=1e-12)


def test_destination_point_wraps_across_antimeridian() -> None:
    _, lng = destination_point(0.0, 179.95, math.pi / 2, 20.0 / 6371.0)

    assert -180.0 <= lng < -179.0


def test_haversine_known_distance() -> None:
    # Paris -> London, roughly 344 km
    assert haversine_km(48.8566, 2.3522, 51.5074, -0.1278) == pytest.approx(343.5, abs=1.5)


def test_sampler_uses_configured_count_and_mode() -> None:
    sampler = VehicleSampler(per_query=60, mode="area", rng=random.Random(5))

    assert len(sampler.sample(1.0, 2.0, 3.0)) == 60
    assert len(sampler.sample(1.0, 2.0, 3.0, count=4)) == 4
