# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from typing import Any

from quora.shared.logging import logger


class AuditAction(str, Enum):
    # Authentication
    SIGNUP = "signup"
    SIGNIN_SUCCESS = "signin_success"
    SIGNIN_FAILED = "signin_failed"
    SIGNOUT = "signout"

    # Administration
    USER_DELETED = "user_deleted"

    # Content moderation
    QUESTION_DELETED = "question_deleted"
    ANSWER_DELETED = "answer_deleted"


_SENSITIVE_KEYS = ("password", "token", "salt", "secret", "authorization")


def _sanitize_details(details: dict[str, Any]) -> dict[str, Any]:
    sanitized = {}
    for key, value in details.items():
        if any(sensitive in key.lower() for sensitive in _SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value
    return sanitized


def audit_log(
    action: AuditAction,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    """Emit a single structured audit line on the ``audit`` logger channel."""
    safe_details = _sanitize_details(details) if details else {}

    message = (
        f"AUDIT: {action.value} | "
        f"user_id={user_id} | "
        f"ip={ip_address} | "
        f"success={success}"
    )
    if safe_details:
        message += f" | details={safe_details}"

    bound = logger.bind(channel="audit")
    if success:
        bound.info(message)
    else:
        bound.warning(message)


__all__ = ["AuditAction", "audit_log"]
