import pytest

from climate.extensions import db
from climate.models import Vote


@pytest.fixture
def post(client, user):
    response = client.post(
        "/api/community/posts",
        json={"title": "Bici al lavoro", "content": "Chi viene?", "category": "transport"},
        headers=user["headers"],
    )
    assert response.status_code == 201
    return response.get_json()["payload"]


def _comment(client, author, post_id, content="Ci sono!"):
    response = client.post(
        "/api/community/comments",
        json={"post_id": post_id, "content": content},
        headers=author["headers"],
    )
    assert response.status_code == 201
    return response.get_json()["payload"]


def test_create_post_requires_auth(client):
    response = client.post("/api/community/posts", json={"title": "x", "content": "y"})
    assert response.status_code == 401


def test_create_post_validation(client, user):
    response = client.post(
        "/api/community/posts", json={"title": "  ", "content": "y"}, headers=user["headers"]
    )
    assert response.status_code == 400


def test_list_posts_with_author_and_filter(client, user, post):
    client.post(
        "/api/community/posts",
        json={"title": "Orto urbano", "content": "...", "category": "food"},
        headers=user["headers"],
    )

    payload = client.get("/api/community/posts").get_json()["payload"]
    assert [p["title"] for p in payload] == ["Orto urbano", "Bici al lavoro"]
    assert payload[0]["author_name"] == "Alice"

    filtered = client.get("/api/community/posts?category=transport").get_json()["payload"]
    assert [p["id"] for p in filtered] == [post["id"]]

    limited = client.get("/api/community/posts?limit=1").get_json()["payload"]
    assert len(limited) == 1


def test_get_post_with_ordered_comments(client, user, other_user, post):
    _comment(client, other_user, post["id"], "primo")
    _comment(client, user, post["id"], "secondo")

    response = client.get(f"/api/community/posts/{post['id']}")
    assert response.status_code == 200
    detail = response.get_json()["payload"]
    assert detail["author_name"] == "Alice"
    assert detail["author_role"] == "user"
    assert [c["content"] for c in detail["comments"]] == ["primo", "secondo"]
    assert detail["comments"][0]["author_name"] == "Bob"


def test_get_missing_post(client):
    assert client.get("/api/community/posts/999").status_code == 404


def test_author_can_update_post(client, user, post):
    response = client.put(
        f"/api/community/posts/{post['id']}",
        json={"title": "Bici al lavoro (aggiornato)", "content": "Partenza alle 8"},
        headers=user["headers"],
    )
    assert response.status_code == 200
    assert response.get_json()["payload"]["title"] == "Bici al lavoro (aggiornato)"


def test_non_author_cannot_modify_post(client, other_user, post):
    response = client.put(
        f"/api/community/posts/{post['id']}",
        json={"title": "hack", "content": "hack"},
        headers=other_user["headers"],
    )
    assert response.status_code == 403

    response = client.delete(f"/api/community/posts/{post['id']}", headers=other_user["headers"])
    assert response.status_code == 403


def test_missing_post_is_404_before_permission_check(client, other_user):
    response = client.delete("/api/community/posts/4242", headers=other_user["headers"])
    assert response.status_code == 404


def test_admin_can_delete_post(client, user, other_user, admin, post):
    _comment(client, other_user, post["id"])

    assert client.delete(
        f"/api/community/posts/{post['id']}", headers=other_user["headers"]
    ).status_code == 403

    response = client.delete(f"/api/community/posts/{post['id']}", headers=admin["headers"])
    assert response.status_code == 200
    assert client.get(f"/api/community/posts/{post['id']}").status_code == 404


def test_comment_on_missing_post(client, user):
    response = client.post(
        "/api/community/comments", json={"post_id": 999, "content": "ciao"}, headers=user["headers"]
    )
    assert response.status_code == 404


def test_comment_permissions(client, user, other_user, admin, post):
    comment = _comment(client, other_user, post["id"])

    # L'autore del post non è l'autore del commento
    response = client.put(
        f"/api/community/comments/{comment['id']}",
        json={"content": "modificato"},
        headers=user["headers"],
    )
    assert response.status_code == 403

    response = client.put(
        f"/api/community/comments/{comment['id']}",
        json={"content": "modificato"},
        headers=other_user["headers"],
    )
    assert response.status_code == 200
    assert response.get_json()["payload"]["content"] == "modificato"

    assert client.delete(
        f"/api/community/comments/{comment['id']}", headers=user["headers"]
    ).status_code == 403
    assert client.delete(
        f"/api/community/comments/{comment['id']}", headers=admin["headers"]
    ).status_code == 200
    assert client.delete(
        f"/api/community/comments/{comment['id']}", headers=admin["headers"]
    ).status_code == 404


def test_revote_overwrites_direction(app, client, user, other_user, post):
    response = client.post(
        "/api/community/votes",
        json={"post_id": post["id"], "vote_type": "up"},
        headers=other_user["headers"],
    )
    assert response.status_code == 200
    assert response.get_json()["payload"]["vote_score"] == 1

    response = client.post(
        "/api/community/votes",
        json={"post_id": post["id"], "vote_type": "down"},
        headers=other_user["headers"],
    )
    assert response.get_json()["payload"]["vote_score"] == -1

    with app.app_context():
        votes = Vote.query.filter_by(user_id=other_user["id"], post_id=post["id"]).all()
        assert len(votes) == 1
        assert votes[0].vote_type == "down"


def test_vote_score_counts_all_users(client, user, other_user, make_user, post):
    third = make_user("Carla")
    for voter, direction in ((user, "up"), (other_user, "up"), (third, "down")):
        response = client.post(
            "/api/community/votes",
            json={"post_id": post["id"], "vote_type": direction},
            headers=voter["headers"],
        )
    assert response.get_json()["payload"]["vote_score"] == 1

    listed = client.get("/api/community/posts").get_json()["payload"]
    assert listed[0]["vote_score"] == 1
    assert client.get(f"/api/community/posts/{post['id']}").get_json()["payload"]["vote_score"] == 1


def test_vote_validation(client, user, post):
    response = client.post(
        "/api/community/votes",
        json={"post_id": post["id"], "vote_type": "sideways"},
        headers=user["headers"],
    )
    assert response.status_code == 400

    response = client.post(
        "/api/community/votes",
        json={"post_id": 999, "vote_type": "up"},
        headers=user["headers"],
    )
    assert response.status_code == 404


def test_vote_unique_constraint(app, user, post):
    from sqlalchemy.exc import IntegrityError

    with app.app_context():
        db.session.add(Vote(user_id=user["id"], post_id=post["id"], vote_type="up"))
        db.session.add(Vote(user_id=user["id"], post_id=post["id"], vote_type="down"))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_create_report(client, user, other_user, post):
    response = client.post(
        "/api/community/reports",
        json={"post_id": post["id"], "reason": "spam"},
        headers=other_user["headers"],
    )
    assert response.status_code == 201
    report = response.get_json()["payload"]
    assert report["status"] == "pending"
    assert report["reported_user_id"] == user["id"]

    response = client.post(
        "/api/community/reports", json={"reason": "spam"}, headers=other_user["headers"]
    )
    assert response.status_code == 400
