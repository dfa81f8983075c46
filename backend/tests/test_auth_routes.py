from todo_api import crud
from todo_api.models import AccessToken

from conftest import EMAIL, PASSWORD


def test_login_returns_token(client, user):
    resp = client.post("/api/login", json={"email": EMAIL, "password": PASSWORD})
    assert resp.status_code == 200
    assert set(resp.json()) == {"token"}


def test_login_unknown_user_is_401(client, db):
    resp = client.post("/api/login", json={"email": "a@b.com", "password": "secret"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "The provided credentials are incorrect."}
    assert db.query(AccessToken).count() == 0


def test_login_wrong_password_is_401(client, user):
    resp = client.post("/api/login", json={"email": EMAIL, "password": "nope"})
    assert resp.status_code == 401


def test_login_validation(client):
    resp = client.post("/api/login", json={"email": "not-an-email"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["message"] == "The given data was invalid."
    assert set(body["errors"]) == {"email", "password"}


def test_current_user(auth_client, user):
    resp = auth_client.get("/api/user")
    assert resp.status_code == 200
    assert resp.json()["email"] == EMAIL
    assert resp.json()["id"] == user.id
    assert "password_hash" not in resp.json()


def test_logout_revokes_token(auth_client):
    resp = auth_client.post("/api/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": "logout"}

    assert auth_client.get("/api/todos").status_code == 401
    assert auth_client.post("/api/logout").status_code == 401


def test_logout_without_token(client):
    resp = client.post("/api/logout")
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_gate_rejects_non_bearer_scheme(client, token):
    resp = client.get("/api/todos", headers={"Authorization": f"Basic {token}"})
    assert resp.status_code == 401


def test_gate_rejects_unknown_token(client, user):
    resp = client.get("/api/todos", headers={"Authorization": "Bearer 1|made-up"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Unauthenticated."}


def test_health_is_public(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_login_with_mixed_case_domain(client, db):
    crud.create_user(db, "Bob@Example.COM", "pw")
    resp = client.post("/api/login", json={"email": "Bob@Example.COM", "password": "pw"})
    assert resp.status_code == 200


def test_malformed_json_is_reported_on_body(client):
    resp = client.post(
        "/api/login",
        content='{"email": "a@b.com",',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 422
    assert list(resp.json()["errors"]) == ["body"]
