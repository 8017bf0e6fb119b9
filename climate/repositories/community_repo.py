"""
Repository per la community: Post, Comment, Vote.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import joinedload

from climate.models import Comment, Post, Vote
from climate.repositories.base import SqlAlchemyRepository

# Punteggio: +1 per ogni voto "up", -1 per ogni voto "down"
_SCORE_EXPR = func.coalesce(
    func.sum(
        case((Vote.vote_type == "up", 1), (Vote.vote_type == "down", -1), else_=0)
    ),
    0,
)


class PostRepository(SqlAlchemyRepository[Post]):
    def __init__(self, session):
        super().__init__(session, Post)

    def get_by_id(self, post_id: int) -> Optional[Post]:
        """Restituisce il post con l'autore già caricato."""
        if post_id is None:
            return None
        return (
            self.session.query(Post)
            .options(joinedload(Post.author))
            .filter(Post.id == post_id)
            .one_or_none()
        )

    def search(
        self,
        *,
        category: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        query = self.session.query(Post).options(joinedload(Post.author))
        if category:
            query = query.filter(Post.category == category)
        return (
            query.order_by(Post.created_at.desc(), Post.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )


class CommentRepository(SqlAlchemyRepository[Comment]):
    def __init__(self, session):
        super().__init__(session, Comment)

    def list_by_post(self, post_id: int) -> List[Comment]:
        """Commenti del post in ordine cronologico, con l'autore."""
        return (
            self.session.query(Comment)
            .options(joinedload(Comment.author))
            .filter(Comment.post_id == post_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )


class VoteRepository(SqlAlchemyRepository[Vote]):
    def __init__(self, session):
        super().__init__(session, Vote)

    def get_for_user_post(self, user_id: int, post_id: int) -> Optional[Vote]:
        return (
            self.session.query(Vote)
            .filter(Vote.user_id == user_id, Vote.post_id == post_id)
            .one_or_none()
        )

    def score_for_post(self, post_id: int) -> int:
        score = (
            self.session.query(_SCORE_EXPR)
            .filter(Vote.post_id == post_id)
            .scalar()
        )
        return int(score or 0)

    def scores_for_posts(self, post_ids: Iterable[int]) -> Dict[int, int]:
        """Punteggi per più post in una sola query (i post senza voti valgono 0)."""
        ids = list(post_ids)
        if not ids:
            return {}
        rows = (
            self.session.query(Vote.post_id, _SCORE_EXPR)
            .filter(Vote.post_id.in_(ids))
            .group_by(Vote.post_id)
            .all()
        )
        scores = {post_id: 0 for post_id in ids}
        for post_id, score in rows:
            scores[post_id] = int(score or 0)
        return scores
