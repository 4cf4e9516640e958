# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Question:
    """A user-owned resource; ownership checks compare ``owner_uuid``."""

    id: int
    uuid: str
    content: str
    created_at: datetime
    owner_id: int
    owner_uuid: str


@dataclass(slots=True, frozen=True)
class Answer:

    id: int
    uuid: str
    content: str
    created_at: datetime
    owner_id: int
    owner_uuid: str
    question_id: int
    question_uuid: str
