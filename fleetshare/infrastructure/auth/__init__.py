# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .bearer import auth_required, authed_request, bearer_token, install_token_service
from .jwt_tokens import JwtTokenService

__all__ = [
    "JwtTokenService",
    "auth_required",
    "authed_request",
    "bearer_token",
    "install_token_service",
]
