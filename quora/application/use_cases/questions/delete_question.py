# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from quora.application.services.session_manager import SessionManager
from quora.domain.authorization import AccessPolicy, authorize
from quora.domain.content.entities import Question
from quora.domain.content.exceptions import QuestionNotFoundError
from quora.domain.content.repositories import QuestionRepository
from quora.shared.logging import logger


class DeleteQuestionUseCase:
    def __init__(self, *, questions: QuestionRepository, sessions: SessionManager) -> None:
        self._questions = questions
        self._sessions = sessions

    def execute(self, question_uuid: str, token: str | None) -> Question:
        acting = self._sessions.resolve_user(token)
        question = self._questions.find_by_uuid(question_uuid)
        if question is None:
            raise QuestionNotFoundError()

        authorize(acting, question.owner_uuid, AccessPolicy.OWNER_OR_ADMIN)

        deleted = self._questions.delete(question_uuid)
        if deleted is None:
            raise QuestionNotFoundError()
        logger.info(
            f"questions.delete: uuid={question_uuid} by user_id={acting.id} "
            f"admin={acting.is_admin}"
        )
        return deleted
