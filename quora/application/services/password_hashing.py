"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import hmac

from werkzeug.security import gen_salt

from quora.domain.users.repositories import CredentialHasher

SALT_LENGTH = 32
DEFAULT_ITERATIONS = 100_000


class Pbkdf2CredentialHasher(CredentialHasher):
    """PBKDF2-HMAC-SHA256 with a per-user random salt stored next to the hash.

    Salt and hash are kept as separate columns, so ``verify`` recomputes the
    digest from a stored salt instead of parsing a combined hash string.
    Empty passwords are hashed like any other value.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        self._iterations = iterations

    def hash(self, password: str) -> tuple[str, str]:
        salt = gen_salt(SALT_LENGTH)
        return salt, self.verify(password, salt)

    def verify(self, password: str, salt: str) -> str:
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt.encode("utf-8"), self._iterations
        )
        return digest.hex()

    def matches(self, password: str, salt: str, hashed: str) -> bool:
        return hmac.compare_digest(self.verify(password, salt), hashed)
