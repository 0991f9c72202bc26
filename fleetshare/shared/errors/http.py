# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from fleetshare.shared.logging import logger

from .base import AppError


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.warning(
            f"Handled application error {exc.code} ({int(exc.status)}) on "
            f"{request.method} {request.path}"
        )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        payload = {
            "error": (exc.name or "http_error").lower().replace(" ", "_"),
            "message": exc.description or exc.name,
        }
        return jsonify(payload), exc.code or default_status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {_client_ip()}, query={dict(request.args)}, "
                f"body_size={len(request.get_data())}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        response = jsonify({"error": "internal_error", "message": "Internal server error"})
        return response, default_status
