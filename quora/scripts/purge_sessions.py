# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Remove stale sign-in sessions.

Sessions are never deleted while serving requests; an expired or logged-out
row stays around so its token keeps resolving to "signed out". Run this
periodically to drop rows that are old enough to no longer matter.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from quora.infrastructure.db import SessionLocal, init_db
from quora.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionRepository,
)
from quora.shared.logging import logger, setup_logging


def purge(older_than: timedelta, *, dry_run: bool = False, now: datetime | None = None) -> int:
    cutoff = (now or datetime.now(UTC)) - older_than
    repository = SqlAlchemySessionRepository(SessionLocal)
    count = repository.delete_stale(cutoff, dry_run=dry_run)
    logger.info(
        f"purge_sessions: {'would delete' if dry_run else 'deleted'} {count} "
        f"sessions older than {cutoff.isoformat()}"
    )
    return count


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Delete expired and logged-out sessions")
    parser.add_argument(
        "--older-than-days",
        type=int,
        default=30,
        help="Only delete sessions that ended more than this many days ago",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Count matching sessions without deleting them",
    )
    args = parser.parse_args(argv)
    if args.older_than_days < 0:
        parser.error("--older-than-days must be non-negative")

    setup_logging()
    init_db()
    count = purge(timedelta(days=args.older_than_days), dry_run=args.dry_run)
    if args.dry_run:
        print(f"{count} sessions would be deleted")
    else:
        print(f"Deleted {count} sessions")


if __name__ == "__main__":
    main()
