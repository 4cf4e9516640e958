# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session

from quora.domain.users.entities import Role
from quora.infrastructure.db.models import User
from quora.infrastructure.unit_of_work import unit_of_work_scope
from quora.shared.errors import InfrastructureError
from quora.shared.logging import logger


class AdminSetupError(InfrastructureError):
    def __init__(self, username: str) -> None:
        super().__init__(
            "admin_setup_failed",
            context={
                "username": username,
                "message": (
                    f"ADMIN_USERNAME '{username}' not found in database. "
                    "Please create this user first or update ADMIN_USERNAME."
                ),
            },
        )


def promote_admin(session_factory: Callable[[], Session], username: str | None) -> bool:
    """Grant the admin role to an existing account.

    Registration only ever creates members; this is the operator path for
    creating the first admin. Returns True when the role changed.
    """
    if not username:
        logger.info("admin_setup: No ADMIN_USERNAME configured, skipping admin setup")
        return False

    with unit_of_work_scope(session_factory) as session:
        user = session.query(User).filter(User.username == username).first()
        if user is None:
            raise AdminSetupError(username)

        if Role.parse(user.role) is Role.ADMIN:
            logger.info(f"admin_setup: User '{username}' already has admin privileges")
            return False

        user.role = Role.ADMIN.value
        logger.info(f"admin_setup: Granted admin privileges to user '{username}'")
        return True


__all__ = ["AdminSetupError", "promote_admin"]
