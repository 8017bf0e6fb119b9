"""
Modello Post (tabella: posts).

Discussione della community. Il punteggio voti non è salvato:
viene ricalcolato dai voti (up - down) in lettura.
"""

from datetime import datetime

from climate.extensions import db


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(64), nullable=True, index=True)

    created_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    author = db.relationship("User", back_populates="posts", lazy="joined")
    comments = db.relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )
    votes = db.relationship(
        "Vote",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    def to_dict(self, vote_score: int = 0) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "author_name": self.author.name if self.author else None,
            "author_role": self.author.role if self.author else None,
            "vote_score": int(vote_score or 0),
        }

    def __repr__(self) -> str:
        return f"<Post id={self.id} user_id={self.user_id} title={self.title!r}>"
