# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .authorization import AccessPolicy, AuthorizationDeniedError, authorize, decide
from .content.entities import Answer, Question
from .users.entities import NewUser, Role, Session, SessionState, User

__all__ = [
    "AccessPolicy",
    "Answer",
    "AuthorizationDeniedError",
    "NewUser",
    "Question",
    "Role",
    "Session",
    "SessionState",
    "User",
    "authorize",
    "decide",
]
