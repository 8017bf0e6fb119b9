"""
Fixture condivise: app con SQLite in memoria, client di test e utenti autenticati.
"""

import pytest

from climate import create_app
from climate.extensions import db
from climate.models import User
from config import TestConfig


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        import climate.models  # noqa: F401
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(app, client):
    """
    Registra un utente tramite API e restituisce id, token e header.
    Con role diverso da "user" il ruolo viene impostato direttamente sul DB.
    """
    counter = {"n": 0}

    def _make_user(name: str = None, role: str = "user", password: str = "secret123"):
        counter["n"] += 1
        name = name or f"Utente {counter['n']}"
        email = f"user{counter['n']}@example.com"

        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201, response.get_json()
        payload = response.get_json()["payload"]
        user_id = payload["user"]["id"]

        if role != "user":
            with app.app_context():
                user = db.session.get(User, user_id)
                user.role = role
                db.session.commit()

        return {
            "id": user_id,
            "email": email,
            "password": password,
            "token": payload["token"],
            "headers": _auth_headers(payload["token"]),
        }

    return _make_user


@pytest.fixture
def user(make_user):
    return make_user("Alice")


@pytest.fixture
def other_user(make_user):
    return make_user("Bob")


@pytest.fixture
def admin(make_user):
    return make_user("Admin", role="admin")
