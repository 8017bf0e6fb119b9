"""
Repository specifico per CarbonEntry.
Tutte le query sono filtrate per proprietario: nessun accesso incrociato tra utenti.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy import func

from climate.models import CarbonEntry
from climate.repositories.base import SqlAlchemyRepository

class CarbonEntryRepository(SqlAlchemyRepository[CarbonEntry]):
    def __init__(self, session):
        super().__init__(session, CarbonEntry)

    def list_by_user(self, user_id: int) -> List[CarbonEntry]:
        """Registrazioni dell'utente, dalla più recente."""
        return (
            self.session.query(CarbonEntry)
            .filter(CarbonEntry.user_id == user_id)
            .order_by(CarbonEntry.date.desc(), CarbonEntry.id.desc())
            .all()
        )

    def get_owned(self, entry_id: int, user_id: int) -> Optional[CarbonEntry]:
        return (
            self.session.query(CarbonEntry)
            .filter(CarbonEntry.id == entry_id, CarbonEntry.user_id == user_id)
            .one_or_none()
        )

    def totals_by_category(self, user_id: int) -> List[Tuple[str, float]]:
        rows = (
            self.session.query(
                CarbonEntry.category,
                func.coalesce(func.sum(CarbonEntry.calculated_emissions), 0),
            )
            .filter(CarbonEntry.user_id == user_id)
            .group_by(CarbonEntry.category)
            .order_by(CarbonEntry.category.asc())
            .all()
        )
        return [(category, float(total or 0)) for category, total in rows]

    def list_since(self, user_id: int, start: date) -> List[Tuple[date, float]]:
        """Coppie (data, emissioni) a partire da `start` incluso."""
        return (
            self.session.query(CarbonEntry.date, CarbonEntry.calculated_emissions)
            .filter(CarbonEntry.user_id == user_id)
            .filter(CarbonEntry.date >= start)
            .order_by(CarbonEntry.date.asc())
            .all()
        )

    def total_for_user(self, user_id: int) -> float:
        total = (
            self.session.query(func.coalesce(func.sum(CarbonEntry.calculated_emissions), 0))
            .filter(CarbonEntry.user_id == user_id)
            .scalar()
        )
        return float(total or 0)

    def count_active_users_on(self, day: date) -> int:
        """Numero di utenti distinti con almeno una registrazione nel giorno."""
        count = (
            self.session.query(func.count(func.distinct(CarbonEntry.user_id)))
            .filter(CarbonEntry.date == day)
            .scalar()
        )
        return int(count or 0)
