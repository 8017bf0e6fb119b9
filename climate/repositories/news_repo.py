"""
Repository per NewsArticle e Bookmark.
"""
from typing import Optional, List

from sqlalchemy.orm import joinedload

from climate.models import Bookmark, NewsArticle
from climate.repositories.base import SqlAlchemyRepository

class NewsArticleRepository(SqlAlchemyRepository[NewsArticle]):
    def __init__(self, session):
        super().__init__(session, NewsArticle)

    def get_by_url(self, url: str) -> Optional[NewsArticle]:
        if not url:
            return None
        return self.session.query(NewsArticle).filter_by(url=url).first()

    def search(
        self,
        *,
        category: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[NewsArticle]:
        """Articoli dal più recente, con filtro categoria opzionale."""
        query = self.session.query(NewsArticle)
        if category:
            query = query.filter(NewsArticle.category == category)
        return (
            query.order_by(NewsArticle.published_at.desc(), NewsArticle.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )


class BookmarkRepository(SqlAlchemyRepository[Bookmark]):
    def __init__(self, session):
        super().__init__(session, Bookmark)

    def get_owned(self, bookmark_id: int, user_id: int) -> Optional[Bookmark]:
        return (
            self.session.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
            .one_or_none()
        )

    def get_for_article(self, user_id: int, article_id: int) -> Optional[Bookmark]:
        return (
            self.session.query(Bookmark)
            .filter(Bookmark.user_id == user_id, Bookmark.article_id == article_id)
            .first()
        )

    def list_by_user(self, user_id: int) -> List[Bookmark]:
        """Segnalibri dell'utente con i dati dell'articolo, dal più recente."""
        return (
            self.session.query(Bookmark)
            .options(joinedload(Bookmark.article))
            .filter(Bookmark.user_id == user_id)
            .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
            .all()
        )
