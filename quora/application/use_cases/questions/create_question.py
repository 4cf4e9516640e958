# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from quora.application.services.session_manager import SessionManager
from quora.domain.content.entities import Question
from quora.domain.content.repositories import QuestionRepository
from quora.shared.logging import logger


class CreateQuestionUseCase:
    def __init__(self, *, questions: QuestionRepository, sessions: SessionManager) -> None:
        self._questions = questions
        self._sessions = sessions

    def execute(self, content: str, token: str | None) -> Question:
        owner = self._sessions.resolve_user(token)
        question = self._questions.insert(
            uuid=str(uuid.uuid4()), content=content, owner_id=owner.id
        )
        logger.info(f"questions.create: uuid={question.uuid} owner_id={owner.id}")
        return question
