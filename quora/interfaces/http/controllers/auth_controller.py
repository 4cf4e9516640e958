# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request

from quora.application.services.session_manager import SessionManager
from quora.application.use_cases.users.register_user import RegisterUserUseCase
from quora.infrastructure.audit import AuditAction, audit_log
from quora.interfaces.http.credentials import bearer_token, client_ip, parse_basic_credentials
from quora.interfaces.http.dto.auth import (
    SigninResponseDTO,
    SignoutResponseDTO,
    SignupRequestDTO,
    SignupResponseDTO,
)
from quora.shared.errors import DomainError
from quora.shared.errors.validation import parse_body
from quora.shared.logging import fingerprint, logger
from quora.shared.middleware.rate_limit import rate_limit

ACCESS_TOKEN_HEADER = "access-token"


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        session_manager: SessionManager,
    ) -> None:
        self._register_use_case = register_use_case
        self._session_manager = session_manager

    @rate_limit()
    def signup(self) -> tuple[Response, int]:
        dto = parse_body(SignupRequestDTO, request.get_json(silent=True))

        user = self._register_use_case.execute(dto.to_candidate())

        audit_log(
            AuditAction.SIGNUP,
            user_id=user.id,
            ip_address=client_ip(request),
            details={"username": user.username},
        )
        logger.info(f"auth.signup: ok user_id={user.id}")
        return jsonify(SignupResponseDTO(id=user.uuid).model_dump()), 201

    @rate_limit()
    def signin(self) -> tuple[Response, int]:
        ip_address = client_ip(request)
        username, password = parse_basic_credentials(request.headers.get("Authorization"))

        try:
            user, session = self._session_manager.sign_in(username, password)
        except DomainError as exc:
            audit_log(
                AuditAction.SIGNIN_FAILED,
                ip_address=ip_address,
                details={"username": username, "error": exc.code},
                success=False,
            )
            raise

        g.user_id = user.id
        audit_log(
            AuditAction.SIGNIN_SUCCESS,
            user_id=user.id,
            ip_address=ip_address,
            details={"username": username},
        )

        response = jsonify(SigninResponseDTO(id=user.uuid).model_dump())
        response.headers[ACCESS_TOKEN_HEADER] = session.token
        response.headers["Access-Control-Expose-Headers"] = ACCESS_TOKEN_HEADER
        logger.info(f"auth.signin: ok user_id={user.id} token={fingerprint(session.token)}")
        return response, 200

    def signout(self) -> tuple[Response, int]:
        session = self._session_manager.sign_out(bearer_token(request))

        g.user_id = session.user_id
        audit_log(
            AuditAction.SIGNOUT,
            user_id=session.user_id,
            ip_address=client_ip(request),
        )
        logger.info(f"auth.signout: ok user_id={session.user_id}")
        return jsonify(SignoutResponseDTO(id=session.uuid).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/user")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/signin", view_func=self.signin, methods=["POST"])
        bp.add_url_rule("/signout", view_func=self.signout, methods=["POST"])
        return bp


__all__ = ["ACCESS_TOKEN_HEADER", "AuthController"]
