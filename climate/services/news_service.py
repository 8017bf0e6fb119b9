"""
Servizi per le notizie sul clima e i segnalibri degli utenti.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from climate.models import Bookmark, NewsArticle
from climate.services.errors import NotFoundError
from climate.services.logging import log_structured_event
from climate.services.unit_of_work import UnitOfWork
from climate.services.validation import parse_id

# Articoli di esempio usati dal seeding (in attesa di un vero provider di notizie)
SAMPLE_ARTICLES = [
    {
        "title": "Global Temperatures Reach Record High",
        "summary": "Scientists report unprecedented global warming trends",
        "url": "https://example.com/news1",
        "source": "Climate News Network",
        "category": "climate-science",
    },
    {
        "title": "Renewable Energy Investments Surge",
        "summary": "Solar and wind power investments exceed fossil fuels",
        "url": "https://example.com/news2",
        "source": "Green Energy Today",
        "category": "renewable-energy",
    },
    {
        "title": "New Carbon Capture Technology Breakthrough",
        "summary": "Innovative method shows promise for reducing emissions",
        "url": "https://example.com/news3",
        "source": "Environmental Tech",
        "category": "technology",
    },
]


def list_articles(
    category: Optional[str] = None, limit: int = 20, offset: int = 0
) -> List[NewsArticle]:
    with UnitOfWork() as uow:
        return uow.articles.search(category=category, limit=limit, offset=offset)


def get_article(article_id: int) -> NewsArticle:
    with UnitOfWork() as uow:
        article = uow.articles.get_by_id(article_id)
    if article is None:
        raise NotFoundError("Articolo non trovato.")
    return article


def add_bookmark(user_id: int, article_id) -> Tuple[Bookmark, bool]:
    """
    Salva un articolo tra i segnalibri dell'utente.

    Ritorna (bookmark, created): se l'articolo era già salvato viene
    restituito il segnalibro esistente con created=False.
    """
    article_id = parse_id(article_id, "article_id")

    with UnitOfWork() as uow:
        if uow.articles.get_by_id(article_id) is None:
            raise NotFoundError("Articolo non trovato.")

        existing = uow.bookmarks.get_for_article(user_id, article_id)
        if existing is not None:
            return existing, False

        bookmark = Bookmark(user_id=user_id, article_id=article_id)
        uow.bookmarks.add(bookmark)
        try:
            uow.commit()
        except IntegrityError:
            # Doppio invio concorrente: vince la riga già scritta
            existing = uow.bookmarks.get_for_article(user_id, article_id)
            if existing is None:
                raise
            return existing, False

    log_structured_event(
        "add_bookmark", user_id=user_id, article_id=article_id, bookmark_id=bookmark.id
    )
    return bookmark, True


def list_bookmarks(user_id: int) -> List[Bookmark]:
    with UnitOfWork() as uow:
        return uow.bookmarks.list_by_user(user_id)


def remove_bookmark(user_id: int, bookmark_id: int) -> None:
    with UnitOfWork() as uow:
        bookmark = uow.bookmarks.get_owned(bookmark_id, user_id)
        if bookmark is None:
            raise NotFoundError("Segnalibro non trovato.")
        uow.bookmarks.delete(bookmark)
        uow.commit()

    log_structured_event("remove_bookmark", user_id=user_id, bookmark_id=bookmark_id)


def fetch_news() -> dict:
    """
    Popola la tabella news_articles con gli articoli di esempio,
    saltando gli URL già presenti.
    """
    inserted = 0
    now = datetime.utcnow()

    with UnitOfWork() as uow:
        for data in SAMPLE_ARTICLES:
            if uow.articles.get_by_url(data["url"]) is not None:
                continue
            uow.articles.add(NewsArticle(published_at=now, **data))
            inserted += 1
        uow.commit()

    log_structured_event("fetch_news", fetched=len(SAMPLE_ARTICLES), inserted=inserted)
    return {"count": len(SAMPLE_ARTICLES), "inserted": inserted}
