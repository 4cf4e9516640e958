# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ownership and role checks shared by every protected resource operation.

Three variants exist and must not be merged:

* ``OWNER_ONLY``      edit-class operations; an admin who is not the owner
                      is denied.
* ``OWNER_OR_ADMIN``  delete-class operations on questions and answers.
* ``ADMIN_ONLY``      user deletion; ownership is irrelevant.

``decide`` is pure. ``authorize`` wraps it and raises on denial.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus

from quora.domain.users.entities import User
from quora.shared.errors.base import DomainError


class AccessPolicy(str, Enum):
    OWNER_ONLY = "owner_only"
    OWNER_OR_ADMIN = "owner_or_admin"
    ADMIN_ONLY = "admin_only"


class DenialReason(str, Enum):
    NOT_OWNER = "not_owner"
    NOT_ADMIN = "not_admin"


@dataclass(slots=True, frozen=True)
class Decision:
    allowed: bool
    reason: DenialReason | None = None

    def __bool__(self) -> bool:
        return self.allowed


ALLOW = Decision(allowed=True)

_MESSAGES = {
    (AccessPolicy.OWNER_ONLY, DenialReason.NOT_OWNER): "Only the owner can edit this resource",
    (AccessPolicy.OWNER_OR_ADMIN, DenialReason.NOT_OWNER): (
        "Only the owner or admin can delete this resource"
    ),
    (AccessPolicy.ADMIN_ONLY, DenialReason.NOT_ADMIN): (
        "Unauthorized Access, Entered user is not an admin"
    ),
}


class AuthorizationDeniedError(DomainError):
    code = "authorization_denied"
    status = HTTPStatus.FORBIDDEN
    legacy_code = "ATHR-003"

    def __init__(self, reason: DenialReason, *, message: str | None = None) -> None:
        context = {"reason": reason.value}
        if message:
            context["message"] = message
        super().__init__(context=context)
        self.reason = reason


def decide(user: User, owner_uuid: str | None, policy: AccessPolicy) -> Decision:
    is_owner = owner_uuid is not None and user.uuid == owner_uuid

    if policy is AccessPolicy.OWNER_ONLY:
        return ALLOW if is_owner else Decision(False, DenialReason.NOT_OWNER)
    if policy is AccessPolicy.OWNER_OR_ADMIN:
        return ALLOW if is_owner or user.is_admin else Decision(False, DenialReason.NOT_OWNER)
    if policy is AccessPolicy.ADMIN_ONLY:
        return ALLOW if user.is_admin else Decision(False, DenialReason.NOT_ADMIN)
    raise ValueError(f"unknown access policy: {policy!r}")


def authorize(user: User, owner_uuid: str | None, policy: AccessPolicy) -> None:
    decision = decide(user, owner_uuid, policy)
    if decision.allowed:
        return
    reason = decision.reason
    if reason is None:
        reason = (
            DenialReason.NOT_ADMIN if policy is AccessPolicy.ADMIN_ONLY else DenialReason.NOT_OWNER
        )
    raise AuthorizationDeniedError(reason, message=_MESSAGES.get((policy, reason)))
