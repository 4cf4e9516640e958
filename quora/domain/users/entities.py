# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"

    @classmethod
    def parse(cls, value: str) -> Role:
        # Legacy rows spell members "nonadmin".
        if value == "nonadmin":
            return cls.MEMBER
        return cls(value)


class SessionState(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    LOGGED_OUT = "logged_out"


@dataclass(slots=True, frozen=True)
class NewUser:
    """Registration candidate, carries the plaintext password until hashed."""

    username: str
    email: str
    password: str
    first_name: str = ""
    last_name: str = ""
    country: str | None = None
    about_me: str | None = None
    dob: str | None = None
    contact_number: str | None = None


@dataclass(slots=True, frozen=True)
class User:

    id: int
    uuid: str
    username: str
    email: str
    password_hash: str
    salt: str
    role: Role = Role.MEMBER
    first_name: str = ""
    last_name: str = ""
    country: str | None = None
    about_me: str | None = None
    dob: str | None = None
    contact_number: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(slots=True, frozen=True)
class Session:

    id: int
    uuid: str
    user_id: int
    token: str
    issued_at: datetime
    expires_at: datetime
    logged_out_at: datetime | None = None

    @property
    def is_logged_out(self) -> bool:
        return self.logged_out_at is not None

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def state(self, now: datetime) -> SessionState:
        if self.is_logged_out:
            return SessionState.LOGGED_OUT
        if self.is_expired(now):
            return SessionState.EXPIRED
        return SessionState.ACTIVE

    def logged_out(self, now: datetime) -> Session:
        if self.logged_out_at is not None:
            return self
        return replace(self, logged_out_at=now)
