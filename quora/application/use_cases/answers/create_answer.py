# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from quora.application.services.session_manager import SessionManager
from quora.domain.content.entities import Answer
from quora.domain.content.exceptions import QuestionNotFoundError
from quora.domain.content.repositories import AnswerRepository, QuestionRepository
from quora.shared.logging import logger


class CreateAnswerUseCase:
    def __init__(
        self,
        *,
        answers: AnswerRepository,
        questions: QuestionRepository,
        sessions: SessionManager,
    ) -> None:
        self._answers = answers
        self._questions = questions
        self._sessions = sessions

    def execute(self, question_uuid: str, content: str, token: str | None) -> Answer:
        owner = self._sessions.resolve_user(token)
        question = self._questions.find_by_uuid(question_uuid)
        if question is None:
            raise QuestionNotFoundError()

        answer = self._answers.insert(
            uuid=str(uuid.uuid4()),
            content=content,
            owner_id=owner.id,
            question_id=question.id,
        )
        logger.info(
            f"answers.create: uuid={answer.uuid} question={question_uuid} owner_id={owner.id}"
        )
        return answer
