# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from quora.infrastructure.admin_setup import promote_admin
from quora.infrastructure.container import Container
from quora.infrastructure.db import SessionLocal, init_db
from quora.interfaces.http.controllers.auth_controller import ACCESS_TOKEN_HEADER
from quora.shared.config import load_config
from quora.shared.errors import register_error_handler
from quora.shared.logging import logger, setup_logging
from quora.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    config = load_config()
    setup_logging(debug_mode=config.debug_logging)

    if container is None:
        init_db()
        promote_admin(SessionLocal, config.admin_username)
        container = Container(config=config)

    app = Flask(__name__)
    app.config["JSON_SORT_KEYS"] = False
    register_error_handler(app)
    configure_request_logging(app)

    CORS(
        app,
        origins=config.security.allowed_origins,
        expose_headers=[ACCESS_TOKEN_HEADER, "X-Request-ID"],
    )

    for controller in container.controllers():
        app.register_blueprint(controller.as_blueprint())

    @app.teardown_appcontext
    def _remove_session(exc: BaseException | None) -> None:
        SessionLocal.remove()

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")
        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")
        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
