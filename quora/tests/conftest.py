from __future__ import annotations

import os
import tempfile
from datetime import UTC, datetime, timedelta

_TMP = tempfile.mkdtemp(prefix="quora-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'quora.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP, "quora.log")
os.environ["ENABLE_RATE_LIMIT"] = "false"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ.pop("ADMIN_USERNAME", None)

import pytest  # noqa: E402

from quora.application.services.session_manager import SessionManager  # noqa: E402
from quora.domain.content.entities import Answer, Question  # noqa: E402
from quora.domain.content.repositories import AnswerRepository, QuestionRepository  # noqa: E402
from quora.domain.users.entities import Role, Session, User  # noqa: E402
from quora.domain.users.exceptions import DuplicateEmailError, DuplicateUsernameError  # noqa: E402
from quora.domain.users.repositories import (  # noqa: E402
    CredentialHasher,
    SessionRepository,
    UserRepository,
)

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class DeterministicHasher(CredentialHasher):
    def __init__(self) -> None:
        self._seq = 0

    def hash(self, password: str) -> tuple[str, str]:
        self._seq += 1
        salt = f"salt{self._seq}"
        return salt, self.verify(password, salt)

    def verify(self, password: str, salt: str) -> str:
        return f"hashed:{salt}:{password}"

    def matches(self, password: str, salt: str, hashed: str) -> bool:
        return self.verify(password, salt) == hashed


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def find_by_uuid(self, uuid: str) -> User | None:
        return next((u for u in self._users.values() if u.uuid == uuid), None)

    def insert(self, user: User) -> User:
        if self.find_by_username(user.username) is not None:
            raise DuplicateUsernameError()
        if self.find_by_email(user.email) is not None:
            raise DuplicateEmailError()
        stored = User(
            id=self._seq,
            uuid=user.uuid,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            salt=user.salt,
            role=user.role,
            first_name=user.first_name,
            last_name=user.last_name,
        )
        self._seq += 1
        self._users[stored.id] = stored
        return stored

    def delete(self, uuid: str) -> User | None:
        user = self.find_by_uuid(uuid)
        if user is not None:
            self._users.pop(user.id)
        return user

    def count(self) -> int:
        return len(self._users)

    def promote(self, user_id: int) -> User:
        current = self._users[user_id]
        promoted = User(
            id=current.id,
            uuid=current.uuid,
            username=current.username,
            email=current.email,
            password_hash=current.password_hash,
            salt=current.salt,
            role=Role.ADMIN,
        )
        self._users[user_id] = promoted
        return promoted


class InMemorySessionRepository(SessionRepository):
    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._seq = 1

    def find_by_token(self, token: str) -> Session | None:
        return self._sessions.get(token)

    def insert(self, session: Session) -> Session:
        stored = Session(
            id=self._seq,
            uuid=session.uuid,
            user_id=session.user_id,
            token=session.token,
            issued_at=session.issued_at,
            expires_at=session.expires_at,
            logged_out_at=session.logged_out_at,
        )
        self._seq += 1
        self._sessions[stored.token] = stored
        return stored

    def update(self, session: Session) -> Session | None:
        stored = self._sessions.get(session.token)
        if stored is None or stored.is_logged_out or session.logged_out_at is None:
            return None
        self._sessions[session.token] = session
        return session

    def count(self) -> int:
        return len(self._sessions)


class InMemoryQuestionRepository(QuestionRepository):
    def __init__(self, users: InMemoryUserRepository, clock: FakeClock) -> None:
        self._users = users
        self._clock = clock
        self._questions: dict[str, Question] = {}
        self._seq = 1

    def find_by_uuid(self, uuid: str) -> Question | None:
        return self._questions.get(uuid)

    def list_all(self) -> list[Question]:
        return list(self._questions.values())

    def list_by_owner(self, owner_id: int) -> list[Question]:
        return [q for q in self._questions.values() if q.owner_id == owner_id]

    def insert(self, *, uuid: str, content: str, owner_id: int) -> Question:
        owner = self._users.find_by_id(owner_id)
        assert owner is not None
        question = Question(
            id=self._seq,
            uuid=uuid,
            content=content,
            created_at=self._clock(),
            owner_id=owner_id,
            owner_uuid=owner.uuid,
        )
        self._seq += 1
        self._questions[uuid] = question
        return question

    def update_content(self, uuid: str, content: str) -> Question | None:
        current = self._questions.get(uuid)
        if current is None:
            return None
        updated = Question(
            id=current.id,
            uuid=current.uuid,
            content=content,
            created_at=current.created_at,
            owner_id=current.owner_id,
            owner_uuid=current.owner_uuid,
        )
        self._questions[uuid] = updated
        return updated

    def delete(self, uuid: str) -> Question | None:
        return self._questions.pop(uuid, None)


class InMemoryAnswerRepository(AnswerRepository):
    def __init__(
        self,
        users: InMemoryUserRepository,
        questions: InMemoryQuestionRepository,
        clock: FakeClock,
    ) -> None:
        self._users = users
        self._questions = questions
        self._clock = clock
        self._answers: dict[str, Answer] = {}
        self._seq = 1

    def find_by_uuid(self, uuid: str) -> Answer | None:
        return self._answers.get(uuid)

    def list_for_question(self, question_id: int) -> list[Answer]:
        return [a for a in self._answers.values() if a.question_id == question_id]

    def insert(self, *, uuid: str, content: str, owner_id: int, question_id: int) -> Answer:
        owner = self._users.find_by_id(owner_id)
        question = next(
            q for q in self._questions.list_all() if q.id == question_id
        )
        assert owner is not None
        answer = Answer(
            id=self._seq,
            uuid=uuid,
            content=content,
            created_at=self._clock(),
            owner_id=owner_id,
            owner_uuid=owner.uuid,
            question_id=question_id,
            question_uuid=question.uuid,
        )
        self._seq += 1
        self._answers[uuid] = answer
        return answer

    def update_content(self, uuid: str, content: str) -> Answer | None:
        current = self._answers.get(uuid)
        if current is None:
            return None
        updated = Answer(
            id=current.id,
            uuid=current.uuid,
            content=content,
            created_at=current.created_at,
            owner_id=current.owner_id,
            owner_uuid=current.owner_uuid,
            question_id=current.question_id,
            question_uuid=current.question_uuid,
        )
        self._answers[uuid] = updated
        return updated

    def delete(self, uuid: str) -> Answer | None:
        return self._answers.pop(uuid, None)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def sessions() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def session_manager(
    users: InMemoryUserRepository,
    sessions: InMemorySessionRepository,
    hasher: DeterministicHasher,
    clock: FakeClock,
) -> SessionManager:
    return SessionManager(users=users, sessions=sessions, hasher=hasher, clock=clock)


@pytest.fixture()
def questions(users: InMemoryUserRepository, clock: FakeClock) -> InMemoryQuestionRepository:
    return InMemoryQuestionRepository(users, clock)


@pytest.fixture()
def answers(
    users: InMemoryUserRepository,
    questions: InMemoryQuestionRepository,
    clock: FakeClock,
) -> InMemoryAnswerRepository:
    return InMemoryAnswerRepository(users, questions, clock)
