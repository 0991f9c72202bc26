# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import cast

from flask import Flask, Request, current_app, g, request

from fleetshare.domain.users.entities import TokenClaims
from fleetshare.domain.users.repositories import TokenService
from fleetshare.shared.errors.base import AuthHeaderMissingError
from fleetshare.shared.logging import logger

_EXTENSION_KEY = "fleetshare.token_service"


def install_token_service(app: Flask, tokens: TokenService) -> None:
    app.extensions[_EXTENSION_KEY] = tokens


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


class AuthedRequest(Request):
    claims: TokenClaims


def authed_request() -> AuthedRequest:
    """Return the current request cast to include authentication attributes."""
    return cast(AuthedRequest, request)


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        token = bearer_token()
        if not token:
            logger.warning(
                f"No bearer token on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise AuthHeaderMissingError()

        tokens = cast(TokenService, current_app.extensions[_EXTENSION_KEY])
        claims = tokens.verify(token)

        request.claims = claims  # type: ignore[attr-defined]
        g.username = claims.username
        logger.debug(f"Auth OK: user={claims.username} {request.method} {request.path}")
        return f(*a, **kw)

    return inner
