from datetime import timedelta

from flask_jwt_extended import create_access_token


def test_register_returns_token_and_user(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "Anna@Example.com", "password": "secret123", "name": "Anna"},
    )
    assert response.status_code == 201
    body = response.get_json()
    assert body["success"] is True
    assert body["payload"]["token"]
    assert body["payload"]["user"]["email"] == "anna@example.com"
    assert body["payload"]["user"]["role"] == "user"
    assert "password_hash" not in body["payload"]["user"]


def test_register_duplicate_email_conflict(client, user):
    response = client.post(
        "/api/auth/register",
        json={"email": user["email"], "password": "another1", "name": "Clone"},
    )
    assert response.status_code == 409
    assert response.get_json()["success"] is False


def test_register_validation(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "secret123", "name": "X"},
    )
    assert response.status_code == 400

    response = client.post(
        "/api/auth/register",
        json={"email": "short@example.com", "password": "123", "name": "X"},
    )
    assert response.status_code == 400


def test_login_and_me(client, user):
    response = client.post(
        "/api/auth/login",
        json={"email": user["email"], "password": user["password"]},
    )
    assert response.status_code == 200
    token = response.get_json()["payload"]["token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.get_json()["payload"]["id"] == user["id"]


def test_login_wrong_password(client, user):
    response = client.post(
        "/api/auth/login",
        json={"email": user["email"], "password": "wrong-password"},
    )
    assert response.status_code == 401
    assert response.get_json()["message"] == "Credenziali non valide."


def test_protected_route_without_token(client):
    response = client.get("/api/carbon/entries")
    assert response.status_code == 401
    assert response.get_json()["success"] is False


def test_protected_route_with_garbage_token(client):
    response = client.get(
        "/api/carbon/entries", headers={"Authorization": "Bearer not.a.token"}
    )
    assert response.status_code == 401


def test_expired_token_rejected(app, client, user):
    with app.app_context():
        token = create_access_token(
            identity=str(user["id"]), expires_delta=timedelta(seconds=-1)
        )
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_of_deleted_user_rejected(client, user, admin):
    response = client.delete(f"/api/admin/users/{user['id']}", headers=admin["headers"])
    assert response.status_code == 200

    response = client.get("/api/auth/me", headers=user["headers"])
    assert response.status_code == 401
