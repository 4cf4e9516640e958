from __future__ import annotations

import base64
from datetime import UTC, datetime, timedelta

import pytest

from quora.app import create_app
from quora.domain.users.entities import User as DomainUser
from quora.domain.users.exceptions import DuplicateEmailError, DuplicateUsernameError
from quora.infrastructure.admin_setup import AdminSetupError, promote_admin
from quora.infrastructure.db import ENGINE, Base, SessionLocal
from quora.infrastructure.db.models import Question, User, UserAuth
from quora.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionRepository,
    SqlAlchemyUserRepository,
)
from quora.scripts.purge_sessions import purge


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    SessionLocal.remove()
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def client():
    app = create_app()
    with app.test_client() as client:
        yield client


def _basic(username: str, password: str) -> dict[str, str]:
    raw = f"{username}:{password}".encode()
    return {"Authorization": "Basic " + base64.b64encode(raw).decode()}


def _signup(client, username: str, password: str = "pw") -> str:
    response = client.post(
        "/user/signup",
        json={
            "userName": username,
            "emailAddress": f"{username}@example.com",
            "password": password,
            "firstName": username.title(),
        },
    )
    assert response.status_code == 201
    return response.get_json()["id"]


def _signin(client, username: str, password: str = "pw") -> str:
    response = client.post("/user/signin", headers=_basic(username, password))
    assert response.status_code == 200
    return response.headers["access-token"]


def test_owner_edit_and_sign_out_flow(client) -> None:
    _signup(client, "alice", "pw1")
    _signup(client, "bob", "pw2")
    alice = _signin(client, "alice", "pw1")
    bob = _signin(client, "bob", "pw2")

    created = client.post(
        "/question/create", json={"content": "What is Python?"}, headers={"Authorization": alice}
    )
    assert created.status_code == 201
    question_id = created.get_json()["id"]

    denied = client.put(
        f"/question/edit/{question_id}",
        json={"content": "Hijacked"},
        headers={"Authorization": bob},
    )
    assert denied.status_code == 403
    assert denied.get_json()["error"] == "authorization_denied"

    listed = client.get("/question/all", headers={"Authorization": bob})
    assert listed.get_json() == [{"id": question_id, "content": "What is Python?"}]

    assert client.post("/user/signout", headers={"Authorization": alice}).status_code == 200

    after = client.post(
        "/question/create", json={"content": "Again?"}, headers={"Authorization": alice}
    )
    assert after.status_code == 403
    assert after.get_json()["error"] == "signed_out"

    session = SessionLocal()
    try:
        auth = session.query(UserAuth).filter(UserAuth.access_token == alice).one()
        assert auth.logout_at is not None
        assert session.query(Question).count() == 1
    finally:
        session.close()


def test_sign_in_stores_one_hour_session(client) -> None:
    _signup(client, "alice")
    token = _signin(client, "alice")

    session = SessionLocal()
    try:
        auth = session.query(UserAuth).filter(UserAuth.access_token == token).one()
        assert auth.expires_at - auth.login_at == timedelta(hours=1)
        user = session.query(User).filter(User.username == "alice").one()
        assert user.password != "pw"
        assert user.salt
        assert user.role == "member"
    finally:
        session.close()


def test_duplicate_signup_keeps_one_row(client) -> None:
    _signup(client, "alice")

    response = client.post(
        "/user/signup",
        json={"userName": "alice2", "emailAddress": "alice@example.com", "password": "pw"},
    )

    assert response.status_code == 409
    assert response.get_json()["error"] == "duplicate_email"
    session = SessionLocal()
    try:
        assert session.query(User).count() == 1
    finally:
        session.close()


def test_answers_and_admin_moderation(client) -> None:
    _signup(client, "alice")
    bob_id = _signup(client, "bob")
    _signup(client, "root")
    promote_admin(SessionLocal, "root")
    alice = _signin(client, "alice")
    bob = _signin(client, "bob")
    admin = _signin(client, "root")

    question_id = client.post(
        "/question/create", json={"content": "Tabs or spaces?"}, headers={"Authorization": alice}
    ).get_json()["id"]

    empty = client.get(f"/answer/all/{question_id}", headers={"Authorization": bob})
    assert empty.status_code == 404
    assert empty.get_json()["error"] == "no_answers"

    answer = client.post(
        f"/question/{question_id}/answer/create",
        json={"answer": "Spaces."},
        headers={"Authorization": bob},
    )
    assert answer.status_code == 201
    answer_id = answer.get_json()["id"]

    edited = client.put(
        f"/answer/edit/{answer_id}", json={"content": "Four spaces."}, headers={"Authorization": bob}
    )
    assert edited.get_json() == {"id": answer_id, "status": "ANSWER EDITED"}

    listed = client.get(f"/answer/all/{question_id}", headers={"Authorization": alice})
    assert listed.get_json() == [
        {"id": answer_id, "question_content": "Tabs or spaces?", "answer_content": "Four spaces."}
    ]

    by_user = client.get(f"/question/all/{bob_id}", headers={"Authorization": alice})
    assert by_user.get_json() == []

    profile = client.get(f"/userprofile/{bob_id}", headers={"Authorization": alice})
    assert profile.get_json()["user_name"] == "bob"

    not_admin = client.delete(f"/admin/user/{bob_id}", headers={"Authorization": alice})
    assert not_admin.status_code == 403

    removed = client.delete(f"/answer/delete/{answer_id}", headers={"Authorization": admin})
    assert removed.get_json() == {"id": answer_id, "status": "ANSWER DELETED"}

    deleted = client.delete(f"/admin/user/{bob_id}", headers={"Authorization": admin})
    assert deleted.get_json() == {"id": bob_id, "status": "USER SUCCESSFULLY DELETED"}

    # Sessions go with the user.
    gone = client.get("/question/all", headers={"Authorization": bob})
    assert gone.status_code == 403
    assert gone.get_json()["error"] == "not_signed_in"


def test_promote_admin_unknown_user() -> None:
    with pytest.raises(AdminSetupError) as exc_info:
        promote_admin(SessionLocal, "nobody")
    assert exc_info.value.code == "admin_setup_failed"
    assert exc_info.value.context["username"] == "nobody"


def test_purge_removes_only_stale_sessions(client) -> None:
    _signup(client, "alice")
    stale = _signin(client, "alice")
    fresh = _signin(client, "alice")
    client.post("/user/signout", headers={"Authorization": stale})

    later = datetime.now(UTC) + timedelta(days=1)
    assert purge(timedelta(hours=2), dry_run=True, now=later) == 2
    assert purge(timedelta(days=2), now=later) == 0

    # Only the logged-out session ended before the cutoff.
    assert purge(timedelta(minutes=30), now=datetime.now(UTC) + timedelta(minutes=31)) == 1

    session = SessionLocal()
    try:
        remaining = [row.access_token for row in session.query(UserAuth).all()]
    finally:
        session.close()
    assert remaining == [fresh]


def _account(uuid: str, username: str, email: str) -> DomainUser:
    return DomainUser(
        id=0,
        uuid=uuid,
        username=username,
        email=email,
        password_hash="hash",
        salt="salt",
    )


def test_user_insert_maps_unique_violations() -> None:
    repo = SqlAlchemyUserRepository(SessionLocal)
    repo.insert(_account("u-1", "alice", "alice@example.com"))

    with pytest.raises(DuplicateUsernameError):
        repo.insert(_account("u-2", "alice", "other@example.com"))
    with pytest.raises(DuplicateEmailError):
        repo.insert(_account("u-3", "alice2", "alice@example.com"))

    session = SessionLocal()
    try:
        assert session.query(User).count() == 1
    finally:
        session.close()


def test_session_update_does_not_overwrite_earlier_sign_out(client) -> None:
    _signup(client, "alice")
    token = _signin(client, "alice")
    repo = SqlAlchemySessionRepository(SessionLocal)
    before = repo.find_by_token(token)

    assert client.post("/user/signout", headers={"Authorization": token}).status_code == 200
    first = repo.find_by_token(token)

    late = before.logged_out(first.logged_out_at + timedelta(minutes=5))
    assert repo.update(late) is None
    assert repo.find_by_token(token).logged_out_at == first.logged_out_at
