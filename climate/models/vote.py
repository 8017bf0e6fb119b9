"""
Modello Vote (tabella: votes).

Al massimo un voto per coppia (utente, post): il vincolo di unicità
protegge l'upsert anche da doppi invii concorrenti.
"""

from datetime import datetime

from climate.extensions import db

VOTE_TYPES = ("up", "down")


class Vote(db.Model):
    __tablename__ = "votes"
    __table_args__ = (
        db.UniqueConstraint("user_id", "post_id", name="uq_votes_user_post"),
        db.CheckConstraint("vote_type IN ('up', 'down')", name="ck_votes_vote_type"),
    )

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    vote_type = db.Column(db.String(8), nullable=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    user = db.relationship("User", back_populates="votes")
    post = db.relationship("Post", back_populates="votes")

    def __repr__(self) -> str:
        return (
            f"<Vote id={self.id} user_id={self.user_id} post_id={self.post_id} "
            f"vote_type={self.vote_type!r}>"
        )
