# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import cached_property

from sqlalchemy.orm import Session

from quora.application.services.password_hashing import Pbkdf2CredentialHasher
from quora.application.services.session_manager import SessionManager
from quora.application.use_cases.admin.delete_user import DeleteUserUseCase
from quora.application.use_cases.answers.create_answer import CreateAnswerUseCase
from quora.application.use_cases.answers.delete_answer import DeleteAnswerUseCase
from quora.application.use_cases.answers.edit_answer import EditAnswerUseCase
from quora.application.use_cases.answers.list_answers import ListAnswersUseCase
from quora.application.use_cases.questions.create_question import CreateQuestionUseCase
from quora.application.use_cases.questions.delete_question import DeleteQuestionUseCase
from quora.application.use_cases.questions.edit_question import EditQuestionUseCase
from quora.application.use_cases.questions.list_questions import ListQuestionsUseCase
from quora.application.use_cases.users.get_user_profile import GetUserProfileUseCase
from quora.application.use_cases.users.register_user import RegisterUserUseCase
from quora.infrastructure.db import SessionLocal
from quora.infrastructure.repositories.sqlalchemy import (
    SqlAlchemyAnswerRepository,
    SqlAlchemyQuestionRepository,
)
from quora.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionRepository,
    SqlAlchemyUserRepository,
)
from quora.interfaces.http.controllers.admin_controller import AdminController
from quora.interfaces.http.controllers.answer_controller import AnswerController
from quora.interfaces.http.controllers.auth_controller import AuthController
from quora.interfaces.http.controllers.question_controller import QuestionController
from quora.interfaces.http.controllers.user_controller import UserController
from quora.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        session_factory: Callable[[], Session] = SessionLocal,
    ) -> None:
        self._config = config or load_config()
        self._session_factory = session_factory

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self._session_factory)

    @cached_property
    def session_repository(self) -> SqlAlchemySessionRepository:
        return SqlAlchemySessionRepository(self._session_factory)

    @cached_property
    def question_repository(self) -> SqlAlchemyQuestionRepository:
        return SqlAlchemyQuestionRepository(self._session_factory)

    @cached_property
    def answer_repository(self) -> SqlAlchemyAnswerRepository:
        return SqlAlchemyAnswerRepository(self._session_factory)

    # Services

    @cached_property
    def password_hasher(self) -> Pbkdf2CredentialHasher:
        return Pbkdf2CredentialHasher(iterations=self._config.security.password_hash_iterations)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            users=self.user_repository,
            sessions=self.session_repository,
            hasher=self.password_hasher,
            ttl=self._config.security.session_ttl,
            enforce_expiry=self._config.security.session_enforce_expiry,
        )

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def get_user_profile_use_case(self) -> GetUserProfileUseCase:
        return GetUserProfileUseCase(users=self.user_repository, sessions=self.session_manager)

    @cached_property
    def delete_user_use_case(self) -> DeleteUserUseCase:
        return DeleteUserUseCase(users=self.user_repository, sessions=self.session_manager)

    @cached_property
    def create_question_use_case(self) -> CreateQuestionUseCase:
        return CreateQuestionUseCase(
            questions=self.question_repository, sessions=self.session_manager
        )

    @cached_property
    def list_questions_use_case(self) -> ListQuestionsUseCase:
        return ListQuestionsUseCase(
            questions=self.question_repository,
            users=self.user_repository,
            sessions=self.session_manager,
        )

    @cached_property
    def edit_question_use_case(self) -> EditQuestionUseCase:
        return EditQuestionUseCase(questions=self.question_repository, sessions=self.session_manager)

    @cached_property
    def delete_question_use_case(self) -> DeleteQuestionUseCase:
        return DeleteQuestionUseCase(
            questions=self.question_repository, sessions=self.session_manager
        )

    @cached_property
    def create_answer_use_case(self) -> CreateAnswerUseCase:
        return CreateAnswerUseCase(
            answers=self.answer_repository,
            questions=self.question_repository,
            sessions=self.session_manager,
        )

    @cached_property
    def edit_answer_use_case(self) -> EditAnswerUseCase:
        return EditAnswerUseCase(answers=self.answer_repository, sessions=self.session_manager)

    @cached_property
    def delete_answer_use_case(self) -> DeleteAnswerUseCase:
        return DeleteAnswerUseCase(answers=self.answer_repository, sessions=self.session_manager)

    @cached_property
    def list_answers_use_case(self) -> ListAnswersUseCase:
        return ListAnswersUseCase(
            answers=self.answer_repository,
            questions=self.question_repository,
            sessions=self.session_manager,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            session_manager=self.session_manager,
        )

    @cached_property
    def user_controller(self) -> UserController:
        return UserController(get_profile=self.get_user_profile_use_case)

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(delete_user=self.delete_user_use_case)

    @cached_property
    def question_controller(self) -> QuestionController:
        return QuestionController(
            create_question=self.create_question_use_case,
            list_questions=self.list_questions_use_case,
            edit_question=self.edit_question_use_case,
            delete_question=self.delete_question_use_case,
        )

    @cached_property
    def answer_controller(self) -> AnswerController:
        return AnswerController(
            create_answer=self.create_answer_use_case,
            edit_answer=self.edit_answer_use_case,
            delete_answer=self.delete_answer_use_case,
            list_answers=self.list_answers_use_case,
        )

    def controllers(self) -> list:
        return [
            self.auth_controller,
            self.user_controller,
            self.admin_controller,
            self.question_controller,
            self.answer_controller,
        ]


__all__ = ["Container"]
