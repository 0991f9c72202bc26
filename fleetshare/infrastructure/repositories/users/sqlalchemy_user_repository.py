# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from fleetshare.domain.users.entities import User
from fleetshare.domain.users.exceptions import UserAlreadyExistsError
from fleetshare.domain.users.repositories import UserRepository
from fleetshare.domain.vehicles.entities import VehicleAssignment
from fleetshare.infrastructure.db.models import UserRow
from fleetshare.infrastructure.db.session import session_scope
from fleetshare.shared.logging import logger


def _to_domain(row: UserRow) -> User:
    vehicle = None
    if row.vehicle_type is not None:
        vehicle = VehicleAssignment(
            lat=float(row.vehicle_lat or 0.0),
            lng=float(row.vehicle_lng or 0.0),
            vehicle=row.vehicle_type,
            percent=int(row.vehicle_percent or 0),
        )
    return User(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        assigned_vehicle=vehicle,
    )


def _apply_vehicle(row: UserRow, vehicle: VehicleAssignment | None) -> None:
    row.vehicle_type = vehicle.vehicle.value if vehicle else None
    row.vehicle_lat = vehicle.lat if vehicle else None
    row.vehicle_lng = vehicle.lng if vehicle else None
    row.vehicle_percent = vehicle.percent if vehicle else None


class SqlAlchemyUserRepository(UserRepository):
    """Transactional store; vehicle history is not persisted here."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> User | None:
        with session_scope(self._session_factory) as session:
            row = session.scalars(select(UserRow).where(UserRow.username == username)).first()
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: User) -> User:
        row = UserRow(id=user.id, username=user.username, password_hash=user.password_hash)
        _apply_vehicle(row, user.assigned_vehicle)
        session = self._session_factory()
        try:
            session.add(row)
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            logger.warning(f"SqlAlchemyUserRepository: username taken user={user.username}")
            raise UserAlreadyExistsError() from exc
        except Exception:
            logger.exception("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
        logger.info(f"SqlAlchemyUserRepository: added user={user.username}")
        return user

    def upsert(self, user: User) -> User:
        with session_scope(self._session_factory) as session:
            row = session.scalars(
                select(UserRow).where(UserRow.username == user.username).with_for_update()
            ).first()
            if row is None:
                row = UserRow(id=user.id, username=user.username)
                session.add(row)
            row.password_hash = user.password_hash
            _apply_vehicle(row, user.assigned_vehicle)
        return user
