"""
Modello Report (tabella: reports).

Segnalazione di moderazione su un utente e/o un post.
Stato: "pending", "reviewed" o "resolved"; l'admin può impostare
qualunque stato direttamente, senza progressione obbligata.
"""

from datetime import datetime

from climate.extensions import db

REPORT_STATUSES = ("pending", "reviewed", "resolved")


class Report(db.Model):
    __tablename__ = "reports"
    __table_args__ = (
        db.CheckConstraint(
            "status IN ('pending', 'reviewed', 'resolved')", name="ck_reports_status"
        ),
    )

    id = db.Column(db.Integer, primary_key=True)

    # I riferimenti restano nulli se utente o post vengono eliminati
    reporter_user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    reported_user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    reason = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(16), nullable=False, default="pending", index=True)

    created_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    reporter = db.relationship(
        "User",
        foreign_keys=[reporter_user_id],
        backref="reports_filed",
    )
    reported = db.relationship(
        "User",
        foreign_keys=[reported_user_id],
        backref="reports_received",
    )
    post = db.relationship("Post", backref="reports")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "reporter_user_id": self.reporter_user_id,
            "reported_user_id": self.reported_user_id,
            "post_id": self.post_id,
            "reason": self.reason,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<Report id={self.id} status={self.status!r}>"
