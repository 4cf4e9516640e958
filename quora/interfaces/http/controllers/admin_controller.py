# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request

from quora.application.use_cases.admin.delete_user import DeleteUserUseCase
from quora.infrastructure.audit import AuditAction, audit_log
from quora.interfaces.http.credentials import bearer_token, client_ip
from quora.interfaces.http.dto.auth import UserDeleteResponseDTO
from quora.shared.logging import logger


class AdminController:
    def __init__(self, *, delete_user: DeleteUserUseCase) -> None:
        self._delete_user = delete_user

    def delete_user(self, user_id: str) -> tuple[Response, int]:
        debug_mode = getattr(g, "debug_mode", False)

        try:
            deleted = self._delete_user.execute(user_id, bearer_token(request))
        except Exception as exc:
            if debug_mode:
                logger.exception(f"admin.delete_user failed for target={user_id}: {exc}")
            else:
                logger.info(f"admin.delete_user failed: {type(exc).__name__}")
            raise

        audit_log(
            AuditAction.USER_DELETED,
            ip_address=client_ip(request),
            details={"deleted_uuid": deleted.uuid, "username": deleted.username},
        )
        logger.info(f"admin.delete_user: deleted user_id={deleted.id}")
        return jsonify(UserDeleteResponseDTO(id=deleted.uuid).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__, url_prefix="/admin")
        bp.add_url_rule("/user/<user_id>", view_func=self.delete_user, methods=["DELETE"])
        return bp


__all__ = ["AdminController"]
