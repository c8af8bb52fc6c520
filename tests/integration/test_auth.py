"""Integration tests for sign-up, sign-in and caller resolution."""

from __future__ import annotations

import jwt

from tests.helpers.assertions import assert_json_keys, assert_problem
from tests.helpers.auth import expired_token
from tests.helpers.http import data_of, run_operation


def _sign_up(client, email="a@x.com", password="pw1", name="Ann"):
    return run_operation(
        client, "signUp", {"email": email, "password": password, "name": name}
    )


def test_sign_up_then_sign_in(client) -> None:
    """A user can register and obtain a token that identifies them."""

    # Register
    created = data_of(_sign_up(client))
    assert_json_keys(created, {"user", "token"})
    assert_json_keys(created["user"], {"id", "name", "email", "avatar"})
    assert "password" not in created["user"]

    # Login
    signed_in = data_of(
        run_operation(client, "signIn", {"email": "a@x.com", "password": "pw1"})
    )
    assert signed_in["user"]["id"] == created["user"]["id"]

    # The fresh token authenticates the caller
    created_list = data_of(
        run_operation(client, "createTaskList", {"title": "Mine"}, token=signed_in["token"])
    )
    assert [u["id"] for u in created_list["users"]] == [created["user"]["id"]]


def test_sign_in_with_wrong_password_is_unauthorized(client) -> None:
    _sign_up(client)

    resp = run_operation(client, "signIn", {"email": "a@x.com", "password": "pw2"})

    body = assert_problem(resp, 401, "unauthorized")
    assert body["detail"] == "Invalid credentials"


def test_sign_in_with_unknown_email_is_unauthorized(client) -> None:
    resp = run_operation(client, "signIn", {"email": "ghost@x.com", "password": "pw1"})

    assert_problem(resp, 401, "unauthorized")


def test_duplicate_email_is_rejected(client) -> None:
    assert _sign_up(client).status_code == 200

    resp = _sign_up(client, email="A@X.com", name="Other")

    body = assert_problem(resp, 422, "validation_error")
    assert body["details"] == {"field": "email"}


def test_sign_up_requires_all_fields(client) -> None:
    resp = run_operation(client, "signUp", {"email": "a@x.com"})

    body = assert_problem(resp, 422, "validation_error")
    assert {"password", "name"} <= set(body["details"]["errors"])


def test_expired_token_is_treated_as_anonymous(client, user) -> None:
    token = expired_token(str(user["_id"]))

    resp = run_operation(client, "myTaskLists", token=token)

    assert_problem(resp, 401, "unauthorized")


def test_garbage_token_is_treated_as_anonymous(client) -> None:
    resp = run_operation(client, "myTaskLists", token="garbage")

    assert_problem(resp, 401, "unauthorized")


def test_sign_up_ignores_existing_credential(client, auth_token) -> None:
    """Public operations work regardless of the header content."""

    resp = run_operation(
        client,
        "signUp",
        {"email": "new@x.com", "password": "pw1", "name": "New"},
        token=auth_token,
    )

    assert data_of(resp)["user"]["email"] == "new@x.com"


def test_signed_token_without_expiry_is_treated_as_anonymous(app, client, user) -> None:
    timeless = jwt.encode({"sub": str(user["_id"])}, app.config["JWT_SECRET_KEY"], algorithm="HS256")

    resp = run_operation(client, "myTaskLists", token=timeless)

    assert_problem(resp, 401, "unauthorized")


def test_sign_in_with_non_email_identifier_is_unauthorized(client) -> None:
    resp = run_operation(client, "signIn", {"email": "nobody", "password": "x"})

    body = assert_problem(resp, 401, "unauthorized")
    assert body["detail"] == "Invalid credentials"
