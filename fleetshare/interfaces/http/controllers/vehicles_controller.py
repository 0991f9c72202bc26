# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from fleetshare.application.use_cases.vehicles.assign_vehicle import (
    AssignVehicleUseCase,
    ReleaseVehicleUseCase,
)
from fleetshare.application.use_cases.vehicles.list_nearby import ListNearbyVehiclesUseCase
from fleetshare.infrastructure.auth import auth_required, authed_request
from fleetshare.interfaces.http.dto.auth import MessageDTO
from fleetshare.interfaces.http.dto.vehicles import AddVehicleRequestDTO, VehicleQueryDTO
from fleetshare.shared.errors.validation import raise_validation_error
from fleetshare.shared.logging import logger


class VehiclesController:
    def __init__(
        self,
        *,
        list_use_case: ListNearbyVehiclesUseCase,
        assign_use_case: AssignVehicleUseCase,
        release_use_case: ReleaseVehicleUseCase,
        max_radius_km: float,
    ) -> None:
        self._list_use_case = list_use_case
        self._assign_use_case = assign_use_case
        self._release_use_case = release_use_case
        self._max_radius_km = max_radius_km

    @auth_required
    def list_vehicles(self) -> tuple[Response, int]:
        try:
            query = VehicleQueryDTO.model_validate(
                request.args.to_dict(),
                context={"max_radius_km": self._max_radius_km},
            )
        except ValidationError as exc:
            raise_validation_error(exc)

        vehicles = self._list_use_case.execute(query.lat, query.lng, query.radius)
        logger.debug(
            f"vehicles.list: {len(vehicles)} around ({query.lat:.5f}, {query.lng:.5f}) "
            f"r={query.radius}km"
        )
        return jsonify([vehicle.to_payload() for vehicle in vehicles]), 200

    @auth_required
    def add_vehicle(self) -> tuple[Response, int]:
        try:
            dto = AddVehicleRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        username = authed_request().claims.username
        self._assign_use_case.execute(username, dto.to_domain())

        logger.info(f"vehicles.assign: user={username} vehicle={dto.vehicle.value}")
        return jsonify(MessageDTO(message="Vehicle added successfully").model_dump()), 200

    @auth_required
    def remove_vehicle(self) -> tuple[Response, int]:
        username = authed_request().claims.username
        self._release_use_case.execute(username)

        logger.info(f"vehicles.release: user={username}")
        return jsonify(MessageDTO(message="Vehicle removed successfully").model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("vehicles", __name__)
        bp.add_url_rule("/vehicles", view_func=self.list_vehicles, methods=["GET"])
        bp.add_url_rule("/addVehicle", view_func=self.add_vehicle, methods=["POST"])
        bp.add_url_rule("/removeVehicle", view_func=self.remove_vehicle, methods=["POST"])
        return bp
