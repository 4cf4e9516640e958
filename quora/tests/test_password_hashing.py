from __future__ import annotations

from quora.application.services.password_hashing import Pbkdf2CredentialHasher


def test_hash_then_matches() -> None:
    hasher = Pbkdf2CredentialHasher(iterations=1000)

    salt, hashed = hasher.hash("secret123")

    assert hasher.matches("secret123", salt, hashed)
    assert not hasher.matches("secret124", salt, hashed)


def test_verify_is_deterministic_for_same_salt() -> None:
    hasher = Pbkdf2CredentialHasher(iterations=1000)

    assert hasher.verify("pw", "fixed-salt") == hasher.verify("pw", "fixed-salt")
    assert hasher.verify("pw", "fixed-salt") != hasher.verify("pw", "other-salt")


def test_salts_are_random_per_hash() -> None:
    hasher = Pbkdf2CredentialHasher(iterations=1000)

    first_salt, first_hash = hasher.hash("same")
    second_salt, second_hash = hasher.hash("same")

    assert first_salt != second_salt
    assert first_hash != second_hash
    assert "same" not in first_hash


def test_empty_password_is_hashed() -> None:
    hasher = Pbkdf2CredentialHasher(iterations=1000)

    salt, hashed = hasher.hash("")

    assert hashed
    assert hasher.matches("", salt, hashed)
    assert not hasher.matches(" ", salt, hashed)


def test_iteration_count_changes_digest() -> None:
    low = Pbkdf2CredentialHasher(iterations=1000)
    high = Pbkdf2CredentialHasher(iterations=2000)

    assert low.verify("pw", "salt") != high.verify("pw", "salt")
