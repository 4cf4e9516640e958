# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from quora.application.services.session_manager import SessionManager
from quora.domain.authorization import AccessPolicy, authorize
from quora.domain.content.entities import Answer
from quora.domain.content.exceptions import AnswerNotFoundError
from quora.domain.content.repositories import AnswerRepository
from quora.shared.logging import logger


class DeleteAnswerUseCase:
    def __init__(self, *, answers: AnswerRepository, sessions: SessionManager) -> None:
        self._answers = answers
        self._sessions = sessions

    def execute(self, answer_uuid: str, token: str | None) -> Answer:
        acting = self._sessions.resolve_user(token)
        answer = self._answers.find_by_uuid(answer_uuid)
        if answer is None:
            raise AnswerNotFoundError()

        authorize(acting, answer.owner_uuid, AccessPolicy.OWNER_OR_ADMIN)

        deleted = self._answers.delete(answer_uuid)
        if deleted is None:
            raise AnswerNotFoundError()
        logger.info(
            f"answers.delete: uuid={answer_uuid} by user_id={acting.id} "
            f"admin={acting.is_admin}"
        )
        return deleted
