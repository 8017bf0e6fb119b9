"""
Bootstrap amministrativo: servizio create_admin_user e comandi della CLI manage.py.
"""

import pytest

import manage
from climate import create_app
from climate.extensions import db
from climate.models import NewsArticle, User
from climate.services import create_admin_user
from climate.services.errors import ConflictError
from config import TestConfig


def test_create_admin_user_sets_admin_role(app):
    with app.app_context():
        user = create_admin_user("Boss@Example.com", "secret123", "Boss")
        assert user.role == "admin"
        assert user.email == "boss@example.com"
        assert user.check_password("secret123")


def test_create_admin_user_rejects_duplicate_email(app):
    with app.app_context():
        create_admin_user("boss@example.com", "secret123", "Boss")
        with pytest.raises(ConflictError):
            create_admin_user("boss@example.com", "altrapassword", "Boss 2")
        assert User.query.count() == 1


def test_admin_created_from_cli_can_log_in(app, client):
    with app.app_context():
        create_admin_user("boss@example.com", "secret123", "Boss")

    response = client.post(
        "/api/auth/login", json={"email": "boss@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    headers = {"Authorization": f"Bearer {response.get_json()['payload']['token']}"}
    assert client.get("/api/admin/stats", headers=headers).status_code == 200


@pytest.fixture
def cli_config(tmp_path, monkeypatch):
    # SQLite su file: ogni comando crea la propria app e deve vedere le stesse tabelle
    class CliConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'cli.db'}"

    monkeypatch.setattr(manage, "DevConfig", CliConfig)
    return CliConfig


def test_cli_bootstrap_commands(cli_config):
    assert manage.main(["create-db"]) == 0
    assert manage.main(["create-admin", "root@example.com", "secret123", "Root"]) == 0
    # Stessa e-mail: errore riportato con exit code non nullo
    assert manage.main(["create-admin", "root@example.com", "secret123", "Root"]) == 1
    assert manage.main(["fetch-news"]) == 0
    assert manage.main(["fetch-news"]) == 0

    app = create_app(cli_config)
    with app.app_context():
        admins = User.query.filter_by(role="admin").all()
        assert [u.email for u in admins] == ["root@example.com"]
        assert NewsArticle.query.count() == 3
        db.session.remove()
        db.engine.dispose()


def test_cli_create_admin_defaults(cli_config):
    assert manage.main(["create-db"]) == 0
    assert manage.main(["create-admin"]) == 0

    app = create_app(cli_config)
    with app.app_context():
        user = User.query.filter_by(email="admin@example.com").one()
        assert user.name == "Admin User"
        assert user.role == "admin"
        db.session.remove()
        db.engine.dispose()
