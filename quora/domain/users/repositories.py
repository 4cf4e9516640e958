# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Session, User


class UserRepository(Protocol):
    """Persistence boundary for users.

    Lookups return ``None`` on absence. ``insert`` must enforce username and
    email uniqueness atomically, raising ``DuplicateUsernameError`` or
    ``DuplicateEmailError`` when a concurrent writer got there first.
    """

    def find_by_username(self, username: str) -> User | None: ...
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def find_by_uuid(self, uuid: str) -> User | None: ...
    def insert(self, user: User) -> User: ...
    def delete(self, uuid: str) -> User | None: ...


class SessionRepository(Protocol):
    """``update`` only records a sign-out on a session that is still active
    and returns ``None`` when the stored row was already logged out."""

    def find_by_token(self, token: str) -> Session | None: ...
    def insert(self, session: Session) -> Session: ...
    def update(self, session: Session) -> Session | None: ...


class CredentialHasher(Protocol):
    def hash(self, password: str) -> tuple[str, str]: ...
    def verify(self, password: str, salt: str) -> str: ...
    def matches(self, password: str, salt: str, hashed: str) -> bool: ...
