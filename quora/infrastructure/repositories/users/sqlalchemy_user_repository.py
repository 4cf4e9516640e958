# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as OrmSession

from quora.domain.users.entities import Role
from quora.domain.users.entities import Session as DomainSession
from quora.domain.users.entities import User as DomainUser
from quora.domain.users.exceptions import DuplicateEmailError, DuplicateUsernameError
from quora.domain.users.repositories import SessionRepository, UserRepository
from quora.infrastructure.db.models import User, UserAuth
from quora.infrastructure.unit_of_work import unit_of_work_scope
from quora.shared.logging import logger


def aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def to_domain_user(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        uuid=row.uuid,
        username=row.username,
        email=row.email,
        password_hash=row.password,
        salt=row.salt,
        role=Role.parse(row.role),
        first_name=row.first_name,
        last_name=row.last_name,
        country=row.country,
        about_me=row.about_me,
        dob=row.dob,
        contact_number=row.contact_number,
    )


def to_domain_session(row: UserAuth) -> DomainSession:
    return DomainSession(
        id=row.id,
        uuid=row.uuid,
        user_id=row.user_id,
        token=row.access_token,
        issued_at=aware(row.login_at),
        expires_at=aware(row.expires_at),
        logged_out_at=aware(row.logout_at) if row.logout_at is not None else None,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], OrmSession]) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.username == username).first()
            return to_domain_user(row) if row else None

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return to_domain_user(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return to_domain_user(row) if row else None

    def find_by_uuid(self, uuid: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.uuid == uuid).first()
            return to_domain_user(row) if row else None

    def insert(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    uuid=user.uuid,
                    username=user.username,
                    email=user.email,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    password=user.password_hash,
                    salt=user.salt,
                    country=user.country,
                    about_me=user.about_me,
                    dob=user.dob,
                    role=user.role.value,
                    contact_number=user.contact_number,
                )
                session.add(row)
                session.flush()
                return to_domain_user(row)
        except IntegrityError:
            # A concurrent registration won the race between lookup and insert.
            if self.find_by_username(user.username) is not None:
                logger.info(f"users.insert: unique violation on username={user.username!r}")
                raise DuplicateUsernameError() from None
            if self.find_by_email(user.email) is not None:
                logger.info("users.insert: unique violation on email")
                raise DuplicateEmailError() from None
            raise

    def delete(self, uuid: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.uuid == uuid).first()
            if not row:
                return None
            deleted = to_domain_user(row)
            session.delete(row)
            return deleted


class SqlAlchemySessionRepository(SessionRepository):
    def __init__(self, session_factory: Callable[[], OrmSession]) -> None:
        self._session_factory = session_factory

    def find_by_token(self, token: str) -> DomainSession | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(UserAuth).filter(UserAuth.access_token == token).first()
            return to_domain_session(row) if row else None

    def insert(self, auth: DomainSession) -> DomainSession:
        with unit_of_work_scope(self._session_factory) as session:
            row = UserAuth(
                uuid=auth.uuid,
                user_id=auth.user_id,
                access_token=auth.token,
                login_at=auth.issued_at,
                expires_at=auth.expires_at,
                logout_at=auth.logged_out_at,
            )
            session.add(row)
            session.flush()
            return to_domain_session(row)

    def update(self, auth: DomainSession) -> DomainSession | None:
        """Record ``logged_out_at`` on a still-active session.

        Returns ``None`` when no active row matched, so a concurrent sign-out
        that already landed is reported as a miss.
        """
        if auth.logged_out_at is None:
            return None
        with unit_of_work_scope(self._session_factory) as session:
            changed = (
                session.query(UserAuth)
                .filter(UserAuth.access_token == auth.token, UserAuth.logout_at.is_(None))
                .update({UserAuth.logout_at: auth.logged_out_at}, synchronize_session=False)
            )
            if not changed:
                return None
            row = session.query(UserAuth).filter(UserAuth.access_token == auth.token).one()
            return to_domain_session(row)

    def delete_stale(self, cutoff: datetime, *, dry_run: bool = False) -> int:
        """Remove sessions that expired or were logged out before ``cutoff``."""
        with unit_of_work_scope(self._session_factory) as session:
            query = session.query(UserAuth).filter(
                (UserAuth.expires_at < cutoff)
                | (UserAuth.logout_at.is_not(None) & (UserAuth.logout_at < cutoff))
            )
            if dry_run:
                return query.count()
            return query.delete(synchronize_session=False)
