# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from quora.shared.errors.base import DomainError


class QuestionNotFoundError(DomainError):
    code = "question_not_found"
    status = HTTPStatus.NOT_FOUND
    legacy_code = "QUES-001"
    message = "Entered question uuid does not exist"


class AnswerNotFoundError(DomainError):
    code = "answer_not_found"
    status = HTTPStatus.NOT_FOUND
    legacy_code = "ANS-001"
    message = "Entered Answer uuid does not exist"


class NoAnswersForQuestionError(DomainError):
    code = "no_answers"
    status = HTTPStatus.NOT_FOUND
    legacy_code = "ANS-002"
    message = "No Answer with specified Question Id exist"
