# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from quora.application.use_cases.questions.create_question import CreateQuestionUseCase
from quora.application.use_cases.questions.delete_question import DeleteQuestionUseCase
from quora.application.use_cases.questions.edit_question import EditQuestionUseCase
from quora.application.use_cases.questions.list_questions import ListQuestionsUseCase
from quora.infrastructure.audit import AuditAction, audit_log
from quora.interfaces.http.credentials import bearer_token, client_ip
from quora.interfaces.http.dto.content import (
    QuestionDetailsDTO,
    QuestionRequestDTO,
    StatusResponseDTO,
)
from quora.shared.errors.validation import parse_body
from quora.shared.logging import logger


class QuestionController:
    def __init__(
        self,
        *,
        create_question: CreateQuestionUseCase,
        list_questions: ListQuestionsUseCase,
        edit_question: EditQuestionUseCase,
        delete_question: DeleteQuestionUseCase,
    ) -> None:
        self._create_question = create_question
        self._list_questions = list_questions
        self._edit_question = edit_question
        self._delete_question = delete_question

    def create(self) -> tuple[Response, int]:
        dto = parse_body(QuestionRequestDTO, request.get_json(silent=True))
        question = self._create_question.execute(dto.content, bearer_token(request))
        payload = StatusResponseDTO(id=question.uuid, status="QUESTION CREATED")
        return jsonify(payload.model_dump()), 201

    def all(self) -> tuple[Response, int]:
        questions = self._list_questions.all(bearer_token(request))
        logger.info(f"questions.all: returned {len(questions)} questions")
        return jsonify([QuestionDetailsDTO.from_question(q).model_dump() for q in questions]), 200

    def by_user(self, user_id: str) -> tuple[Response, int]:
        questions = self._list_questions.by_user(user_id, bearer_token(request))
        return jsonify([QuestionDetailsDTO.from_question(q).model_dump() for q in questions]), 200

    def edit(self, question_id: str) -> tuple[Response, int]:
        dto = parse_body(QuestionRequestDTO, request.get_json(silent=True))
        question = self._edit_question.execute(question_id, dto.content, bearer_token(request))
        payload = StatusResponseDTO(id=question.uuid, status="QUESTION EDITED")
        return jsonify(payload.model_dump()), 200

    def delete(self, question_id: str) -> tuple[Response, int]:
        question = self._delete_question.execute(question_id, bearer_token(request))
        audit_log(
            AuditAction.QUESTION_DELETED,
            ip_address=client_ip(request),
            details={"question_uuid": question.uuid, "owner_id": question.owner_id},
        )
        payload = StatusResponseDTO(id=question.uuid, status="QUESTION DELETED")
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("question", __name__, url_prefix="/question")
        bp.add_url_rule("/create", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/all", view_func=self.all, methods=["GET"])
        bp.add_url_rule("/all/<user_id>", view_func=self.by_user, methods=["GET"])
        bp.add_url_rule("/edit/<question_id>", view_func=self.edit, methods=["PUT"])
        bp.add_url_rule("/delete/<question_id>", view_func=self.delete, methods=["DELETE"])
        return bp


__all__ = ["QuestionController"]
