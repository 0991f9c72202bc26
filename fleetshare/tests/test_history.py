from __future__ import annotations

import random
from datetime import date, timedelta
from pathlib import Path

from fleetshare.container import Container
from fleetshare.domain.vehicles import VEHICLE_TYPES, HistoryEntry, generate_history
from fleetshare.infrastructure.repositories.users import InMemoryUserRepository

from .helpers import make_config


def test_history_covers_each_previous_day_newest_first() -> None:
    today = date(2024, 3, 1)

    history = generate_history(89, today=today, rng=random.Random(11))

    assert len(history) == 89
    assert history[0].day == today - timedelta(days=1)
    assert history[-1].day == today - timedelta(days=89)
    assert all(a.day > b.day for a, b in zip(history, history[1:]))


def test_history_entries_are_in_range() -> None:
    history = generate_history(200, rng=random.Random(2))

    for entry in history:
        assert entry.vehicle in VEHICLE_TYPES
        assert 0.0 <= entry.distance_km < 50.0


def test_history_payload_shape() -> None:
    entry = generate_history(1, today=date(2024, 1, 10), rng=random.Random(0))[0]

    payload = entry.to_payload()

    assert payload["day"] == "2024-01-09"
    assert set(payload) == {"day", "vehicle", "distanceKm"}
    assert HistoryEntry.from_payload(payload).day == entry.day


def test_zero_days_means_no_history() -> None:
    assert generate_history(0) == []


def test_container_history_factory_yields_configured_days(tmp_path: Path) -> None:
    container = Container(make_config(tmp_path), users=InMemoryUserRepository(), rng=random.Random(3))

    history = container.history_factory()

    assert len(history) == 89
    assert all(isinstance(entry, HistoryEntry) for entry in history)
