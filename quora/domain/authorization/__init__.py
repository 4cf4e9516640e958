# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .policy import (
    AccessPolicy,
    AuthorizationDeniedError,
    Decision,
    DenialReason,
    authorize,
    decide,
)

__all__ = [
    "AccessPolicy",
    "AuthorizationDeniedError",
    "Decision",
    "DenialReason",
    "authorize",
    "decide",
]
