"""
Repository specifico per User.
Eredita le funzioni base (add, get, list) da SqlAlchemyRepository.
"""
from typing import Optional, List

from climate.models import User
from climate.repositories.base import SqlAlchemyRepository

class UserRepository(SqlAlchemyRepository[User]):
    def __init__(self, session):
        super().__init__(session, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Cerca utente per e-mail (già normalizzata in minuscolo)."""
        if not email:
            return None
        return self.session.query(User).filter_by(email=email).first()

    def list_newest_first(self) -> List[User]:
        return self.session.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
