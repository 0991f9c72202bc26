# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from fleetshare.container import Container
from fleetshare.domain.users.repositories import PasswordHasher, UserRepository
from fleetshare.infrastructure.auth import install_token_service
from fleetshare.shared.config import AppConfig, load_config
from fleetshare.shared.logging import logger, setup_logging
from fleetshare.shared.middleware import configure_error_handling, configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(
    config: AppConfig | None = None,
    *,
    users: UserRepository | None = None,
    password_hasher: PasswordHasher | None = None,
) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)

    container = Container(config, users=users, password_hasher=password_hasher)

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    install_token_service(app, container.token_service)

    cors_kwargs: dict[str, object] = {"origins": config.security.allowed_origins}
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    else:
        cors_kwargs["send_wildcard"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.vehicles_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Frame-Options", "DENY")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(
        f"Flask app initialized store={container.store_kind} "
        f"sampling={config.vehicles.sampling} per_query={config.vehicles.per_query}"
    )
    return app
