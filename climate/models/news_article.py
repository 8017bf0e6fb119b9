"""
Modello NewsArticle (tabella: news_articles).

Articoli di notizie sul clima, popolati dall'endpoint di seeding
e in sola lettura per gli utenti.
"""

from datetime import datetime

from climate.extensions import db


class NewsArticle(db.Model):
    __tablename__ = "news_articles"

    id = db.Column(db.Integer, primary_key=True)

    title = db.Column(db.String(255), nullable=False)
    summary = db.Column(db.Text, nullable=True)
    source = db.Column(db.String(128), nullable=True)
    url = db.Column(db.String(500), nullable=False, unique=True)
    category = db.Column(db.String(64), nullable=True, index=True)

    published_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )

    bookmarks = db.relationship(
        "Bookmark",
        back_populates="article",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "source": self.source,
            "url": self.url,
            "category": self.category,
            "published_at": self.published_at.isoformat() if self.published_at else None,
        }

    def __repr__(self) -> str:
        return f"<NewsArticle id={self.id} url={self.url!r}>"
