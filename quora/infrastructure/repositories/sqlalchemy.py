# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session

from quora.domain.content.entities import Answer as DomainAnswer
from quora.domain.content.entities import Question as DomainQuestion
from quora.domain.content.repositories import AnswerRepository, QuestionRepository
from quora.infrastructure.db.models import Answer, Question
from quora.infrastructure.repositories.users.sqlalchemy_user_repository import aware
from quora.infrastructure.unit_of_work import unit_of_work_scope


def to_domain_question(row: Question) -> DomainQuestion:
    return DomainQuestion(
        id=row.id,
        uuid=row.uuid,
        content=row.content,
        created_at=aware(row.date),
        owner_id=row.user_id,
        owner_uuid=row.user.uuid,
    )


def to_domain_answer(row: Answer) -> DomainAnswer:
    return DomainAnswer(
        id=row.id,
        uuid=row.uuid,
        content=row.ans,
        created_at=aware(row.date),
        owner_id=row.user_id,
        owner_uuid=row.user.uuid,
        question_id=row.question_id,
        question_uuid=row.question.uuid,
    )


class SqlAlchemyQuestionRepository(QuestionRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_uuid(self, uuid: str) -> DomainQuestion | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Question).filter(Question.uuid == uuid).first()
            return to_domain_question(row) if row else None

    def list_all(self) -> Sequence[DomainQuestion]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(Question).order_by(Question.id.asc()).all()
            return [to_domain_question(row) for row in rows]

    def list_by_owner(self, owner_id: int) -> Sequence[DomainQuestion]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Question)
                .filter(Question.user_id == owner_id)
                .order_by(Question.id.asc())
                .all()
            )
            return [to_domain_question(row) for row in rows]

    def insert(self, *, uuid: str, content: str, owner_id: int) -> DomainQuestion:
        with unit_of_work_scope(self._session_factory) as session:
            row = Question(uuid=uuid, content=content, user_id=owner_id)
            session.add(row)
            session.flush()
            session.refresh(row)
            return to_domain_question(row)

    def update_content(self, uuid: str, content: str) -> DomainQuestion | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Question).filter(Question.uuid == uuid).first()
            if not row:
                return None
            row.content = content
            session.flush()
            return to_domain_question(row)

    def delete(self, uuid: str) -> DomainQuestion | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Question).filter(Question.uuid == uuid).first()
            if not row:
                return None
            deleted = to_domain_question(row)
            session.delete(row)
            return deleted


class SqlAlchemyAnswerRepository(AnswerRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_uuid(self, uuid: str) -> DomainAnswer | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Answer).filter(Answer.uuid == uuid).first()
            return to_domain_answer(row) if row else None

    def list_for_question(self, question_id: int) -> Sequence[DomainAnswer]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Answer)
                .filter(Answer.question_id == question_id)
                .order_by(Answer.id.asc())
                .all()
            )
            return [to_domain_answer(row) for row in rows]

    def insert(
        self, *, uuid: str, content: str, owner_id: int, question_id: int
    ) -> DomainAnswer:
        with unit_of_work_scope(self._session_factory) as session:
            row = Answer(uuid=uuid, ans=content, user_id=owner_id, question_id=question_id)
            session.add(row)
            session.flush()
            session.refresh(row)
            return to_domain_answer(row)

    def update_content(self, uuid: str, content: str) -> DomainAnswer | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Answer).filter(Answer.uuid == uuid).first()
            if not row:
                return None
            row.ans = content
            session.flush()
            return to_domain_answer(row)

    def delete(self, uuid: str) -> DomainAnswer | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Answer).filter(Answer.uuid == uuid).first()
            if not row:
                return None
            deleted = to_domain_answer(row)
            session.delete(row)
            return deleted
