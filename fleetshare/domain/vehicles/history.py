# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import random
from datetime import date, timedelta

from .entities import VEHICLE_TYPES, HistoryEntry

MAX_DAILY_DISTANCE_KM = 50.0


def generate_history(
    days: int,
    *,
    today: date | None = None,
    rng: random.Random | None = None,
) -> list[HistoryEntry]:
    """One synthetic trip per day for the ``days`` days before ``today``, newest first."""

    rng = rng or random.Random()
    today = today or date.today()
    return [
        HistoryEntry(
            day=today - timedelta(days=offset),
            vehicle=rng.choice(VEHICLE_TYPES),
            distance_km=rng.random() * MAX_DAILY_DISTANCE_KM,
        )
        for offset in range(1, days + 1)
    ]
