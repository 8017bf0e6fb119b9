"""
API JSON per la community.

GET    /api/community/posts                (pubblico, ?category=&limit=&offset=)
GET    /api/community/posts/<post_id>      (pubblico, include commenti)
POST   /api/community/posts
PUT    /api/community/posts/<post_id>      (autore o admin)
DELETE /api/community/posts/<post_id>      (autore o admin)
POST   /api/community/comments
PUT    /api/community/comments/<id>        (autore o admin)
DELETE /api/community/comments/<id>        (autore o admin)
POST   /api/community/votes
POST   /api/community/reports
"""

from __future__ import annotations

from flask import Blueprint, request

from climate.api.responses import api_response, get_json_body
from climate.middleware import get_current_user, login_required
from climate.services import (
    add_comment,
    cast_vote,
    create_post,
    create_report,
    delete_comment,
    delete_post,
    get_post_detail,
    list_posts,
    update_comment,
    update_post,
)
from climate.services.validation import parse_pagination

api_community_bp = Blueprint("api_community", __name__)


# ---------------------------------------------------------------------
# Post
# ---------------------------------------------------------------------
@api_community_bp.route("/posts", methods=["GET"])
def api_list_posts():
    limit, offset = parse_pagination(request.args)
    category = request.args.get("category") or None
    return api_response(list_posts(category=category, limit=limit, offset=offset))


@api_community_bp.route("/posts/<int:post_id>", methods=["GET"])
def api_get_post(post_id: int):
    return api_response(get_post_detail(post_id))


@api_community_bp.route("/posts", methods=["POST"])
@login_required
def api_create_post():
    """
    Body JSON atteso:
    {
      "title": "...",
      "content": "...",
      "category": "..."   # opzionale
    }
    """
    post = create_post(get_current_user().id, get_json_body())
    return api_response(post, "Post creato.", 201)


@api_community_bp.route("/posts/<int:post_id>", methods=["PUT"])
@login_required
def api_update_post(post_id: int):
    post = update_post(get_current_user(), post_id, get_json_body())
    return api_response(post, "Post aggiornato.")


@api_community_bp.route("/posts/<int:post_id>", methods=["DELETE"])
@login_required
def api_delete_post(post_id: int):
    delete_post(get_current_user(), post_id)
    return api_response(None, "Post eliminato.")


# ---------------------------------------------------------------------
# Commenti
# ---------------------------------------------------------------------
@api_community_bp.route("/comments", methods=["POST"])
@login_required
def api_add_comment():
    """Body JSON atteso: {"post_id": 1, "content": "..."}"""
    comment = add_comment(get_current_user().id, get_json_body())
    return api_response(comment, "Commento aggiunto.", 201)


@api_community_bp.route("/comments/<int:comment_id>", methods=["PUT"])
@login_required
def api_update_comment(comment_id: int):
    comment = update_comment(get_current_user(), comment_id, get_json_body())
    return api_response(comment, "Commento aggiornato.")


@api_community_bp.route("/comments/<int:comment_id>", methods=["DELETE"])
@login_required
def api_delete_comment(comment_id: int):
    delete_comment(get_current_user(), comment_id)
    return api_response(None, "Commento eliminato.")


# ---------------------------------------------------------------------
# Voti e segnalazioni
# ---------------------------------------------------------------------
@api_community_bp.route("/votes", methods=["POST"])
@login_required
def api_vote():
    """
    Body JSON atteso: {"post_id": 1, "vote_type": "up|down"}

    Un secondo voto dello stesso utente sostituisce il precedente.
    """
    vote_score, vote_type = cast_vote(get_current_user().id, get_json_body())
    return api_response(
        {"vote_score": vote_score, "vote_type": vote_type},
        "Voto registrato.",
    )


@api_community_bp.route("/reports", methods=["POST"])
@login_required
def api_create_report():
    """
    Body JSON atteso:
    {
      "reason": "...",
      "post_id": 1,            # opzionale
      "reported_user_id": 2    # opzionale (almeno uno dei due)
    }
    """
    report = create_report(get_current_user().id, get_json_body())
    return api_response(report.to_dict(), "Segnalazione inviata.", 201)
