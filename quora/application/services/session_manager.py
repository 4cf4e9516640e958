# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token session issuance, resolution and invalidation.

A session moves from ACTIVE to LOGGED_OUT on sign-out (stored, one way) or
to EXPIRED once ``now >= expires_at`` (computed on read, never stored).
Tokens are opaque; identity and expiry are only recoverable through the
session repository.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from quora.domain.users.entities import Session, SessionState, User
from quora.domain.users.exceptions import (
    BadCredentialsError,
    NoSuchUserError,
    NotSignedInError,
    SessionExpiredError,
    SignedOutError,
)
from quora.domain.users.repositories import CredentialHasher, SessionRepository, UserRepository
from quora.shared.logging import fingerprint, logger

DEFAULT_TTL = timedelta(hours=1)
TOKEN_BYTES = 48
SIGN_OUT_LEGACY_CODE = "SGR-001"


def utcnow() -> datetime:
    return datetime.now(UTC)


def _new_token() -> str:
    return secrets.token_urlsafe(TOKEN_BYTES)


def _not_signed_in_for_sign_out() -> NotSignedInError:
    return NotSignedInError(
        context={"legacy_code": SIGN_OUT_LEGACY_CODE, "message": "User is not Signed in"}
    )


class SessionManager:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionRepository,
        hasher: CredentialHasher,
        ttl: timedelta = DEFAULT_TTL,
        enforce_expiry: bool = True,
        clock: Callable[[], datetime] = utcnow,
        token_factory: Callable[[], str] = _new_token,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._hasher = hasher
        self._ttl = ttl
        self._enforce_expiry = enforce_expiry
        self._clock = clock
        self._token_factory = token_factory

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def sign_in(self, username: str, password: str) -> tuple[User, Session]:
        user = self._users.find_by_username(username)
        if user is None:
            logger.info(f"session.sign_in: unknown username={username!r}")
            raise NoSuchUserError()

        if not self._hasher.matches(password, user.salt, user.password_hash):
            logger.info(f"session.sign_in: bad credentials user_id={user.id}")
            raise BadCredentialsError()

        issued_at = self._clock()
        session = self._sessions.insert(
            Session(
                id=0,
                uuid=user.uuid,
                user_id=user.id,
                token=self._token_factory(),
                issued_at=issued_at,
                expires_at=issued_at + self._ttl,
            )
        )
        logger.info(
            f"session.sign_in: issued {fingerprint(session.token)} user_id={user.id} "
            f"exp={session.expires_at.isoformat()}"
        )
        return user, session

    def resolve_session(self, token: str | None) -> Session:
        session = self._sessions.find_by_token(token) if token else None
        if session is None:
            logger.debug(f"session.resolve: no session for {fingerprint(token)}")
            raise NotSignedInError()

        state = session.state(self._clock())
        if state is SessionState.LOGGED_OUT:
            logger.debug(f"session.resolve: {fingerprint(token)} is logged out")
            raise SignedOutError()
        if state is SessionState.EXPIRED:
            if self._enforce_expiry:
                logger.debug(f"session.resolve: {fingerprint(token)} expired")
                raise SessionExpiredError()
            logger.debug(f"session.resolve: {fingerprint(token)} expired, expiry not enforced")
        return session

    def resolve_user(self, token: str | None) -> User:
        session = self.resolve_session(token)
        user = self._users.find_by_id(session.user_id)
        if user is None:
            logger.warning(
                f"session.resolve: {fingerprint(token)} refers to missing user_id={session.user_id}"
            )
            raise NotSignedInError()
        return user

    def sign_out(self, token: str | None) -> Session:
        session = self._sessions.find_by_token(token) if token else None
        if session is None or session.is_logged_out:
            logger.info(f"session.sign_out: {fingerprint(token)} not signed in")
            raise _not_signed_in_for_sign_out()

        updated = self._sessions.update(session.logged_out(self._clock()))
        if updated is None:
            logger.info(f"session.sign_out: {fingerprint(token)} already signed out elsewhere")
            raise _not_signed_in_for_sign_out()
        logger.info(f"session.sign_out: {fingerprint(token)} user_id={updated.user_id}")
        return updated
