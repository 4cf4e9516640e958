# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from quora.shared.config import load_config
from quora.shared.logging import logger

from .base import AppError

BASIC_CHALLENGE = 'Basic realm="quora", charset="UTF-8"'


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    if error.status == HTTPStatus.UNAUTHORIZED:
        # Only credential failures are 401; token failures are 403.
        response.headers["WWW-Authenticate"] = BASIC_CHALLENGE
    return response, error.status


def register_error_handler(
    app: Flask, *, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:
    debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        legacy = (exc.context or {}).get("legacy_code", "-")
        logger.info(
            f"{request.method} {request.path} -> {exc.code} ({legacy}) "
            f"status={int(exc.status)} user={getattr(g, 'user_id', None)}"
        )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        code = (exc.name or "http_error").lower().replace(" ", "_")
        return jsonify({"error": code}), exc.code or default_status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return jsonify({"error": "internal_error"}), default_status


__all__ = ["BASIC_CHALLENGE", "handle_app_error", "register_error_handler"]
