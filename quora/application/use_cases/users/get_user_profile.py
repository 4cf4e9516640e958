# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from quora.application.services.session_manager import SessionManager
from quora.domain.users.entities import User
from quora.domain.users.exceptions import UserNotFoundError
from quora.domain.users.repositories import UserRepository


class GetUserProfileUseCase:
    def __init__(self, *, users: UserRepository, sessions: SessionManager) -> None:
        self._users = users
        self._sessions = sessions

    def execute(self, user_uuid: str, token: str | None) -> User:
        self._sessions.resolve_user(token)
        user = self._users.find_by_uuid(user_uuid)
        if user is None:
            raise UserNotFoundError()
        return user
