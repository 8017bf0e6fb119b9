"""
API JSON per le notizie sul clima.

GET    /api/news/articles              (pubblico, ?category=&limit=&offset=)
GET    /api/news/articles/<article_id> (pubblico)
GET    /api/news/bookmarks
POST   /api/news/bookmarks
DELETE /api/news/bookmarks/<bookmark_id>
POST   /api/news/fetch-news            (solo admin)
"""

from __future__ import annotations

from flask import Blueprint, request

from climate.api.responses import api_response, get_json_body
from climate.middleware import admin_required, get_current_user, login_required
from climate.services import (
    add_bookmark,
    fetch_news,
    get_article,
    list_articles,
    list_bookmarks,
    remove_bookmark,
)
from climate.services.validation import parse_pagination

api_news_bp = Blueprint("api_news", __name__)


@api_news_bp.route("/articles", methods=["GET"])
def api_list_articles():
    limit, offset = parse_pagination(request.args)
    category = request.args.get("category") or None
    articles = list_articles(category=category, limit=limit, offset=offset)
    return api_response([a.to_dict() for a in articles])


@api_news_bp.route("/articles/<int:article_id>", methods=["GET"])
def api_get_article(article_id: int):
    return api_response(get_article(article_id).to_dict())


@api_news_bp.route("/bookmarks", methods=["GET"])
@login_required
def api_list_bookmarks():
    bookmarks = list_bookmarks(get_current_user().id)
    return api_response([b.to_dict(with_article=True) for b in bookmarks])


@api_news_bp.route("/bookmarks", methods=["POST"])
@login_required
def api_add_bookmark():
    """
    Body JSON atteso: {"article_id": 123}

    201 se il segnalibro è nuovo, 200 con il segnalibro esistente
    se l'articolo era già salvato.
    """
    data = get_json_body()
    bookmark, created = add_bookmark(get_current_user().id, data.get("article_id"))
    if created:
        return api_response(bookmark.to_dict(), "Articolo salvato.", 201)
    return api_response(bookmark.to_dict(), "Articolo già salvato.")


@api_news_bp.route("/bookmarks/<int:bookmark_id>", methods=["DELETE"])
@login_required
def api_remove_bookmark(bookmark_id: int):
    remove_bookmark(get_current_user().id, bookmark_id)
    return api_response(None, "Segnalibro rimosso.")


@api_news_bp.route("/fetch-news", methods=["POST"])
@admin_required
def api_fetch_news():
    result = fetch_news()
    return api_response(result, "Notizie recuperate e salvate.")
