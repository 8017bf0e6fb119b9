"""
Modello User (tabella: users).

Rappresenta un utente della piattaforma. Il ruolo è limitato a
"user", "moderator" o "admin" (vedi USER_ROLES).
"""

from datetime import datetime

from werkzeug.security import check_password_hash, generate_password_hash

from climate.extensions import db

USER_ROLES = ("user", "moderator", "admin")


class User(db.Model):
    __tablename__ = "users"
    __table_args__ = (
        db.CheckConstraint(
            "role IN ('user', 'moderator', 'admin')", name="ck_users_role"
        ),
    )

    id = db.Column(db.Integer, primary_key=True)

    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(128), nullable=False)

    role = db.Column(db.String(32), nullable=False, default="user")

    created_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )

    # Relazioni (i contenuti dell'utente vengono eliminati insieme a lui)
    carbon_entries = db.relationship(
        "CarbonEntry",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    bookmarks = db.relationship(
        "Bookmark",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    posts = db.relationship(
        "Post",
        back_populates="author",
        cascade="all, delete-orphan",
    )
    comments = db.relationship(
        "Comment",
        back_populates="author",
        cascade="all, delete-orphan",
    )
    votes = db.relationship(
        "Vote",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} role={self.role!r}>"
