# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Answer, Question


class QuestionRepository(Protocol):
    def find_by_uuid(self, uuid: str) -> Question | None: ...
    def list_all(self) -> Sequence[Question]: ...
    def list_by_owner(self, owner_id: int) -> Sequence[Question]: ...
    def insert(self, *, uuid: str, content: str, owner_id: int) -> Question: ...
    def update_content(self, uuid: str, content: str) -> Question | None: ...
    def delete(self, uuid: str) -> Question | None: ...


class AnswerRepository(Protocol):
    def find_by_uuid(self, uuid: str) -> Answer | None: ...
    def list_for_question(self, question_id: int) -> Sequence[Answer]: ...
    def insert(self, *, uuid: str, content: str, owner_id: int, question_id: int) -> Answer: ...
    def update_content(self, uuid: str, content: str) -> Answer | None: ...
    def delete(self, uuid: str) -> Answer | None: ...
