# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Self-contained signed bearer tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from fleetshare.domain.users.entities import TokenClaims
from fleetshare.domain.users.repositories import TokenService
from fleetshare.domain.vehicles.entities import HistoryEntry, VehicleAssignment
from fleetshare.shared.errors.base import InvalidTokenError
from fleetshare.shared.logging import logger


class JwtTokenService(TokenService):
    """HS256 JWTs; no server-side state, valid until the secret changes or ``exp`` passes."""

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        ttl_seconds: int | None = None,
    ) -> None:
        if not secret_key:
            raise ValueError("token secret must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds else None

    def issue(self, claims: TokenClaims) -> str:
        payload: dict[str, Any] = {
            "id": claims.id,
            "username": claims.username,
            "assignedVehicle": (
                claims.assigned_vehicle.to_payload() if claims.assigned_vehicle else {}
            ),
            "vehicleHistory": [entry.to_payload() for entry in claims.vehicle_history],
        }
        if self._ttl is not None:
            now = datetime.now(UTC)
            payload["iat"] = now
            payload["exp"] = now + self._ttl

        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        logger.info(f"tokens.issue: user={claims.username} exp={payload.get('exp', 'never')}")
        return token

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["id", "username"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.debug("tokens.verify: expired")
            raise InvalidTokenError("expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.verify: rejected ({type(exc).__name__})")
            raise InvalidTokenError("malformed_or_bad_signature") from exc

        try:
            return TokenClaims(
                id=str(payload["id"]),
                username=str(payload["username"]),
                assigned_vehicle=VehicleAssignment.from_payload(
                    payload.get("assignedVehicle") or {}
                ),
                vehicle_history=tuple(
                    HistoryEntry.from_payload(item)
                    for item in payload.get("vehicleHistory") or []
                ),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError("malformed_claims") from exc
