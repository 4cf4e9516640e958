# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from quora.application.use_cases.answers.create_answer import CreateAnswerUseCase
from quora.application.use_cases.answers.delete_answer import DeleteAnswerUseCase
from quora.application.use_cases.answers.edit_answer import EditAnswerUseCase
from quora.application.use_cases.answers.list_answers import ListAnswersUseCase
from quora.infrastructure.audit import AuditAction, audit_log
from quora.interfaces.http.credentials import bearer_token, client_ip
from quora.interfaces.http.dto.content import (
    AnswerDetailsDTO,
    AnswerEditRequestDTO,
    AnswerRequestDTO,
    StatusResponseDTO,
)
from quora.shared.errors.validation import parse_body


class AnswerController:
    def __init__(
        self,
        *,
        create_answer: CreateAnswerUseCase,
        edit_answer: EditAnswerUseCase,
        delete_answer: DeleteAnswerUseCase,
        list_answers: ListAnswersUseCase,
    ) -> None:
        self._create_answer = create_answer
        self._edit_answer = edit_answer
        self._delete_answer = delete_answer
        self._list_answers = list_answers

    def create(self, question_id: str) -> tuple[Response, int]:
        dto = parse_body(AnswerRequestDTO, request.get_json(silent=True))
        answer = self._create_answer.execute(question_id, dto.answer, bearer_token(request))
        payload = StatusResponseDTO(id=answer.uuid, status="ANSWER CREATED")
        return jsonify(payload.model_dump()), 201

    def edit(self, answer_id: str) -> tuple[Response, int]:
        dto = parse_body(AnswerEditRequestDTO, request.get_json(silent=True))
        answer = self._edit_answer.execute(answer_id, dto.content, bearer_token(request))
        payload = StatusResponseDTO(id=answer.uuid, status="ANSWER EDITED")
        return jsonify(payload.model_dump()), 200

    def delete(self, answer_id: str) -> tuple[Response, int]:
        answer = self._delete_answer.execute(answer_id, bearer_token(request))
        audit_log(
            AuditAction.ANSWER_DELETED,
            ip_address=client_ip(request),
            details={"answer_uuid": answer.uuid, "owner_id": answer.owner_id},
        )
        payload = StatusResponseDTO(id=answer.uuid, status="ANSWER DELETED")
        return jsonify(payload.model_dump()), 200

    def all_for_question(self, question_id: str) -> tuple[Response, int]:
        question, answers = self._list_answers.execute(question_id, bearer_token(request))
        return (
            jsonify([AnswerDetailsDTO.from_answer(a, question).model_dump() for a in answers]),
            200,
        )

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("answer", __name__)
        bp.add_url_rule(
            "/question/<question_id>/answer/create", view_func=self.create, methods=["POST"]
        )
        bp.add_url_rule("/answer/edit/<answer_id>", view_func=self.edit, methods=["PUT"])
        bp.add_url_rule("/answer/delete/<answer_id>", view_func=self.delete, methods=["DELETE"])
        bp.add_url_rule(
            "/answer/all/<question_id>", view_func=self.all_for_question, methods=["GET"]
        )
        return bp


__all__ = ["AnswerController"]
