from __future__ import annotations

import pytest

from quora.domain.authorization import AccessPolicy, AuthorizationDeniedError, authorize, decide
from quora.domain.authorization import policy as policy_module
from quora.domain.authorization.policy import Decision, DenialReason
from quora.domain.users.entities import Role, User


def _user(uuid: str, role: Role = Role.MEMBER) -> User:
    return User(
        id=1,
        uuid=uuid,
        username=uuid,
        email=f"{uuid}@example.com",
        password_hash="h",
        salt="s",
        role=role,
    )


OWNER = _user("owner")
STRANGER = _user("stranger")
ADMIN = _user("admin", Role.ADMIN)


@pytest.mark.parametrize(
    ("user", "policy", "allowed"),
    [
        (OWNER, AccessPolicy.OWNER_ONLY, True),
        (STRANGER, AccessPolicy.OWNER_ONLY, False),
        (ADMIN, AccessPolicy.OWNER_ONLY, False),
        (OWNER, AccessPolicy.OWNER_OR_ADMIN, True),
        (STRANGER, AccessPolicy.OWNER_OR_ADMIN, False),
        (ADMIN, AccessPolicy.OWNER_OR_ADMIN, True),
        (OWNER, AccessPolicy.ADMIN_ONLY, False),
        (ADMIN, AccessPolicy.ADMIN_ONLY, True),
    ],
)
def test_decide_matrix(user: User, policy: AccessPolicy, allowed: bool) -> None:
    assert decide(user, "owner", policy).allowed is allowed


def test_admin_only_ignores_ownership() -> None:
    assert decide(ADMIN, None, AccessPolicy.ADMIN_ONLY)
    assert not decide(OWNER, "owner", AccessPolicy.ADMIN_ONLY)


def test_missing_owner_never_matches() -> None:
    assert not decide(OWNER, None, AccessPolicy.OWNER_ONLY)


def test_denial_reasons() -> None:
    assert decide(STRANGER, "owner", AccessPolicy.OWNER_ONLY).reason is DenialReason.NOT_OWNER
    assert decide(STRANGER, None, AccessPolicy.ADMIN_ONLY).reason is DenialReason.NOT_ADMIN


def test_authorize_raises_with_reason_and_message() -> None:
    with pytest.raises(AuthorizationDeniedError) as exc_info:
        authorize(ADMIN, "owner", AccessPolicy.OWNER_ONLY)

    error = exc_info.value
    assert error.code == "authorization_denied"
    assert error.status == 403
    assert error.reason is DenialReason.NOT_OWNER
    assert error.context["legacy_code"] == "ATHR-003"
    assert error.context["message"] == "Only the owner can edit this resource"


def test_authorize_allows_silently() -> None:
    assert authorize(OWNER, "owner", AccessPolicy.OWNER_ONLY) is None


@pytest.mark.parametrize(
    ("access", "reason"),
    [
        (AccessPolicy.OWNER_ONLY, DenialReason.NOT_OWNER),
        (AccessPolicy.OWNER_OR_ADMIN, DenialReason.NOT_OWNER),
        (AccessPolicy.ADMIN_ONLY, DenialReason.NOT_ADMIN),
    ],
)
def test_authorize_denies_when_decision_has_no_reason(
    monkeypatch: pytest.MonkeyPatch, access: AccessPolicy, reason: DenialReason
) -> None:
    monkeypatch.setattr(policy_module, "decide", lambda *_args: Decision(allowed=False))

    with pytest.raises(AuthorizationDeniedError) as exc_info:
        authorize(_user("u-1", Role.ADMIN), "u-1", access)
    assert exc_info.value.reason is reason
