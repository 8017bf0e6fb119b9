"""
Modello Bookmark (tabella: bookmarks).

Segnalibro di un utente su un articolo. La coppia (user_id, article_id)
è unica: salvare due volte lo stesso articolo non crea righe duplicate.
"""

from datetime import datetime

from climate.extensions import db


class Bookmark(db.Model):
    __tablename__ = "bookmarks"
    __table_args__ = (
        db.UniqueConstraint("user_id", "article_id", name="uq_bookmarks_user_article"),
    )

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    article_id = db.Column(
        db.Integer,
        db.ForeignKey("news_articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )

    user = db.relationship("User", back_populates="bookmarks")
    article = db.relationship("NewsArticle", back_populates="bookmarks", lazy="joined")

    def to_dict(self, with_article: bool = False) -> dict:
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "article_id": self.article_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if with_article and self.article is not None:
            data.update(
                {
                    "title": self.article.title,
                    "source": self.article.source,
                    "url": self.article.url,
                    "published_at": (
                        self.article.published_at.isoformat()
                        if self.article.published_at
                        else None
                    ),
                }
            )
        return data

    def __repr__(self) -> str:
        return f"<Bookmark id={self.id} user_id={self.user_id} article_id={self.article_id}>"
