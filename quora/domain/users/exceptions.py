# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from quora.shared.errors.base import DomainError


class DuplicateUsernameError(DomainError):
    code = "duplicate_username"
    status = HTTPStatus.CONFLICT
    legacy_code = "SGR-001"
    message = "Try any other Username, this Username has already been taken"


class DuplicateEmailError(DomainError):
    code = "duplicate_email"
    status = HTTPStatus.CONFLICT
    legacy_code = "SGR-002"
    message = "This user has already been registered, try with any other emailId"


class NoSuchUserError(DomainError):
    code = "no_such_user"
    status = HTTPStatus.UNAUTHORIZED
    legacy_code = "ATH-001"
    message = "This username does not exist"


class BadCredentialsError(DomainError):
    code = "bad_credentials"
    status = HTTPStatus.UNAUTHORIZED
    legacy_code = "ATH-002"
    message = "Password failed"


class MalformedCredentialsError(DomainError):
    code = "malformed_credentials"
    status = HTTPStatus.UNAUTHORIZED
    legacy_code = "ATH-102"
    message = "Authentication failed - Invalid Credential input"


class NotSignedInError(DomainError):
    code = "not_signed_in"
    status = HTTPStatus.FORBIDDEN
    legacy_code = "ATHR-001"
    message = "User has not signed in"


class SignedOutError(DomainError):
    code = "signed_out"
    status = HTTPStatus.FORBIDDEN
    legacy_code = "ATHR-002"
    message = "User is signed out"


class SessionExpiredError(SignedOutError):
    code = "session_expired"
    message = "User session has expired, sign in again"


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
    legacy_code = "USR-001"
    message = "User with entered uuid does not exist"
