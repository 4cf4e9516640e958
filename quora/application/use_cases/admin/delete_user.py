# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from quora.application.services.session_manager import SessionManager
from quora.domain.authorization import AccessPolicy, authorize
from quora.domain.users.entities import User
from quora.domain.users.exceptions import UserNotFoundError
from quora.domain.users.repositories import UserRepository
from quora.shared.logging import logger


class DeleteUserUseCase:
    def __init__(self, *, users: UserRepository, sessions: SessionManager) -> None:
        self._users = users
        self._sessions = sessions

    def execute(self, user_uuid: str, token: str | None) -> User:
        acting = self._sessions.resolve_user(token)
        authorize(acting, None, AccessPolicy.ADMIN_ONLY)

        deleted = self._users.delete(user_uuid)
        if deleted is None:
            raise UserNotFoundError(
                context={"message": "User with entered uuid to be deleted does not exist"}
            )

        logger.info(f"admin: user_id={acting.id} deleted user uuid={user_uuid}")
        return deleted


__all__ = ["DeleteUserUseCase"]
