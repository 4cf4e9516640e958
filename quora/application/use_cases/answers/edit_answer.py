# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from quora.application.services.session_manager import SessionManager
from quora.domain.authorization import AccessPolicy, authorize
from quora.domain.content.entities import Answer
from quora.domain.content.exceptions import AnswerNotFoundError
from quora.domain.content.repositories import AnswerRepository
from quora.shared.logging import logger


class EditAnswerUseCase:
    def __init__(self, *, answers: AnswerRepository, sessions: SessionManager) -> None:
        self._answers = answers
        self._sessions = sessions

    def execute(self, answer_uuid: str, content: str, token: str | None) -> Answer:
        acting = self._sessions.resolve_user(token)
        answer = self._answers.find_by_uuid(answer_uuid)
        if answer is None:
            raise AnswerNotFoundError()

        authorize(acting, answer.owner_uuid, AccessPolicy.OWNER_ONLY)

        updated = self._answers.update_content(answer_uuid, content)
        if updated is None:
            raise AnswerNotFoundError()
        logger.info(f"answers.edit: uuid={answer_uuid} by user_id={acting.id}")
        return updated
