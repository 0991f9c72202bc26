# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from fleetshare.application.use_cases.users.get_profile import GetProfileUseCase
from fleetshare.application.use_cases.users.login_user import LoginUserUseCase
from fleetshare.application.use_cases.users.register_user import RegisterUserUseCase
from fleetshare.infrastructure.auth import auth_required, authed_request
from fleetshare.interfaces.http.dto.auth import (
    LoginRequestDTO,
    MessageDTO,
    RegisterRequestDTO,
    TokenDTO,
)
from fleetshare.interfaces.http.dto.vehicles import ProfileDTO
from fleetshare.shared.errors.validation import raise_validation_error
from fleetshare.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        profile_use_case: GetProfileUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._profile_use_case = profile_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: ok user={user.username} id={user.id}")
        return jsonify(MessageDTO(message="Registration successful").model_dump()), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        token = self._login_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(TokenDTO(token=token).model_dump()), 200

    @auth_required
    def profile(self) -> tuple[Response, int]:
        user = self._profile_use_case.execute(authed_request().claims)
        return jsonify({"fetchedUser": ProfileDTO.from_user(user).model_dump()}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/profile", view_func=self.profile, methods=["GET"])
        return bp
