# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fleetshare.infrastructure.db.session import Base


class UserRow(Base):
    __tablename__ = "users"
    pk: Mapped[int] = mapped_column(Integer, primary_key=True)
    id: Mapped[str] = mapped_column(String(36), unique=True)
    username: Mapped[str] = mapped_column(String(128), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256))
    # Assigned vehicle, all NULL when nothing is assigned
    vehicle_type: Mapped[str | None] = mapped_column(String(16), nullable=True)
    vehicle_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    vehicle_lng: Mapped[float | None] = mapped_column(Float, nullable=True)
    vehicle_percent: Mapped[int | None] = mapped_column(Integer, nullable=True)
