# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from quora.application.services.session_manager import SessionManager
from quora.domain.content.entities import Question
from quora.domain.content.repositories import QuestionRepository
from quora.domain.users.exceptions import UserNotFoundError
from quora.domain.users.repositories import UserRepository


class ListQuestionsUseCase:
    def __init__(
        self,
        *,
        questions: QuestionRepository,
        users: UserRepository,
        sessions: SessionManager,
    ) -> None:
        self._questions = questions
        self._users = users
        self._sessions = sessions

    def all(self, token: str | None) -> Sequence[Question]:
        self._sessions.resolve_user(token)
        return self._questions.list_all()

    def by_user(self, user_uuid: str, token: str | None) -> Sequence[Question]:
        self._sessions.resolve_user(token)
        owner = self._users.find_by_uuid(user_uuid)
        if owner is None:
            raise UserNotFoundError(
                context={
                    "message": "User with entered uuid whose question details are to be seen "
                    "does not exist"
                }
            )
        return self._questions.list_by_owner(owner.id)
