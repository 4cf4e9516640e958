# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import Pbkdf2CredentialHasher
from .services.session_manager import SessionManager
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "Pbkdf2CredentialHasher",
    "RegisterUserUseCase",
    "SessionManager",
]
