# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from quora.domain.users.entities import NewUser, Role, User
from quora.domain.users.exceptions import DuplicateEmailError, DuplicateUsernameError
from quora.domain.users.repositories import CredentialHasher, UserRepository
from quora.shared.logging import logger


class RegisterUserUseCase:
    """Create a member account.

    The lookups give callers a precise error in the common case; the
    repository's unique constraints decide the race between concurrent
    registrations and raise the same two error kinds.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: CredentialHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, candidate: NewUser) -> User:
        if self._users.find_by_username(candidate.username) is not None:
            logger.info(f"register: username taken username={candidate.username!r}")
            raise DuplicateUsernameError()
        if self._users.find_by_email(candidate.email) is not None:
            logger.info("register: email already registered")
            raise DuplicateEmailError()

        salt, hashed = self._password_hasher.hash(candidate.password)
        user = User(
            id=0,
            uuid=str(uuid.uuid4()),
            username=candidate.username,
            email=candidate.email,
            password_hash=hashed,
            salt=salt,
            role=Role.MEMBER,
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            country=candidate.country,
            about_me=candidate.about_me,
            dob=candidate.dob,
            contact_number=candidate.contact_number,
        )
        persisted = self._users.insert(user)
        logger.info(f"register: ok user_id={persisted.id} uuid={persisted.uuid}")
        return persisted
