import pytest

from climate import create_app
from config import TestConfig


def test_healthcheck(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_security_headers(client):
    response = client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert response.headers["Cross-Origin-Resource-Policy"] == "cross-origin"


def test_cors_allows_configured_origin(client):
    response = client.get(
        "/api/news/articles", headers={"Origin": "http://localhost:5173"}
    )
    assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_development_landing_message(client):
    response = client.get("/dashboard")
    assert response.status_code == 200
    body = response.get_json()
    assert "/api/carbon" in body["apiRoutes"]
    assert body["frontendUrl"] == "http://localhost:5173"


def test_unknown_api_route_is_json_404(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.get_json()["success"] is False


@pytest.fixture
def prod_like_app(tmp_path):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html>spa</html>")
    (dist / "assets" / "app.js").write_text("console.log('ok')")

    class ServeClientConfig(TestConfig):
        SERVE_CLIENT = True
        CLIENT_DIST_DIR = str(dist)

    return create_app(ServeClientConfig)


def test_serves_built_client_with_spa_fallback(prod_like_app):
    client = prod_like_app.test_client()

    asset = client.get("/assets/app.js")
    assert asset.status_code == 200
    assert b"console.log" in asset.data

    page = client.get("/community/42")
    assert page.status_code == 200
    assert b"spa" in page.data


def test_rate_limit_returns_json_429():
    class LimitedConfig(TestConfig):
        RATELIMIT_ENABLED = True
        RATELIMIT_DEFAULT = "2 per minute"

    client = create_app(LimitedConfig).test_client()

    statuses = [client.get("/health").status_code for _ in range(3)]
    assert statuses == [200, 200, 429]

    body = client.get("/health").get_json()
    assert body["success"] is False
    assert body["payload"] is None


def test_unexpected_error_returns_generic_500(app, client, monkeypatch):
    import climate.api.api_news as api_news

    def boom(**_kwargs):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(api_news, "list_articles", boom)
    response = client.get("/api/news/articles")
    assert response.status_code == 500
    body = response.get_json()
    assert body["message"] == "Errore interno del server."
    assert "exploded" not in body["message"]
