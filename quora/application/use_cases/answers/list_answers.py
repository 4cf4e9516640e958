# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from quora.application.services.session_manager import SessionManager
from quora.domain.content.entities import Answer, Question
from quora.domain.content.exceptions import NoAnswersForQuestionError, QuestionNotFoundError
from quora.domain.content.repositories import AnswerRepository, QuestionRepository


class ListAnswersUseCase:
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

    def execute(
        self, question_uuid: str, token: str | None
    ) -> tuple[Question, Sequence[Answer]]:
        self._sessions.resolve_user(token)
        question = self._questions.find_by_uuid(question_uuid)
        if question is None:
            raise QuestionNotFoundError()

        answers = self._answers.list_for_question(question.id)
        if not answers:
            raise NoAnswersForQuestionError()
        return question, answers
