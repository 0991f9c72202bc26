"""Application dependency container."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from functools import cached_property, partial

from sqlalchemy.engine import Engine

from fleetshare.application.services.password_hashing import WerkzeugPasswordHasher
from fleetshare.application.use_cases.users.get_profile import GetProfileUseCase
from fleetshare.application.use_cases.users.login_user import LoginUserUseCase
from fleetshare.application.use_cases.users.register_user import RegisterUserUseCase
from fleetshare.application.use_cases.vehicles.assign_vehicle import (
    AssignVehicleUseCase,
    ReleaseVehicleUseCase,
)
from fleetshare.application.use_cases.vehicles.list_nearby import ListNearbyVehiclesUseCase
from fleetshare.domain.users.repositories import PasswordHasher, UserRepository
from fleetshare.domain.vehicles.entities import HistoryEntry
from fleetshare.domain.vehicles.history import generate_history
from fleetshare.domain.vehicles.sampling import VehicleSampler
from fleetshare.infrastructure.auth.jwt_tokens import JwtTokenService
from fleetshare.infrastructure.db import create_db_engine, create_session_factory, init_db
from fleetshare.infrastructure.health import check_database
from fleetshare.infrastructure.repositories.users import (
    InMemoryUserRepository,
    JsonFileUserRepository,
    SqlAlchemyUserRepository,
)
from fleetshare.interfaces.http.controllers.auth_controller import AuthController
from fleetshare.interfaces.http.controllers.misc_controller import MiscController
from fleetshare.interfaces.http.controllers.vehicles_controller import VehiclesController
from fleetshare.shared.config import AppConfig


class Container:
    def __init__(
        self,
        config: AppConfig,
        *,
        users: UserRepository | None = None,
        password_hasher: PasswordHasher | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self._users_override = users
        self._hasher_override = password_hasher
        self._rng = rng or random.Random()

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._hasher_override or WerkzeugPasswordHasher()

    @cached_property
    def db_engine(self) -> Engine:
        engine = create_db_engine(self.config.store.database_url)
        init_db(engine)
        return engine

    @cached_property
    def user_repository(self) -> UserRepository:
        if self._users_override is not None:
            return self._users_override
        kind = self.config.store.kind
        if kind == "memory":
            return InMemoryUserRepository()
        if kind == "sql":
            return SqlAlchemyUserRepository(create_session_factory(self.db_engine))
        return JsonFileUserRepository(self.config.store.users_file)

    @property
    def store_kind(self) -> str:
        if self._users_override is not None:
            return type(self._users_override).__name__
        return self.config.store.kind

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            self.config.token.secret_key,
            algorithm=self.config.token.algorithm,
            ttl_seconds=self.config.token.ttl_seconds,
        )

    @cached_property
    def vehicle_sampler(self) -> VehicleSampler:
        return VehicleSampler(
            per_query=self.config.vehicles.per_query,
            mode=self.config.vehicles.sampling,
            rng=self._rng,
        )

    @cached_property
    def history_factory(self) -> Callable[[], Sequence[HistoryEntry]]:
        return partial(generate_history, self.config.vehicles.history_days, rng=self._rng)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
            history_factory=self.history_factory,
        )

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(users=self.user_repository)

    @cached_property
    def list_vehicles_use_case(self) -> ListNearbyVehiclesUseCase:
        return ListNearbyVehiclesUseCase(sampler=self.vehicle_sampler)

    @cached_property
    def assign_vehicle_use_case(self) -> AssignVehicleUseCase:
        return AssignVehicleUseCase(users=self.user_repository)

    @cached_property
    def release_vehicle_use_case(self) -> ReleaseVehicleUseCase:
        return ReleaseVehicleUseCase(users=self.user_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            profile_use_case=self.get_profile_use_case,
        )

    @cached_property
    def vehicles_controller(self) -> VehiclesController:
        return VehiclesController(
            list_use_case=self.list_vehicles_use_case,
            assign_use_case=self.assign_vehicle_use_case,
            release_use_case=self.release_vehicle_use_case,
            max_radius_km=self.config.vehicles.max_radius_km,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        store_check = None
        if self._users_override is None and self.config.store.kind == "sql":
            store_check = partial(check_database, self.db_engine)
        return MiscController(store_kind=self.store_kind, store_check=store_check)
