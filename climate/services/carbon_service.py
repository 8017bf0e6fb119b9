"""
Servizi per il tracciamento dell'impronta di carbonio (CarbonEntry).

Tutte le operazioni lavorano solo sulle registrazioni del chiamante.
"""
from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from climate.models import CarbonEntry
from climate.services.errors import NotFoundError
from climate.services.logging import log_structured_event
from climate.services.unit_of_work import UnitOfWork
from climate.services.validation import parse_date, parse_number, require_text

ANALYTICS_MONTHS = 6


@dataclass
class CarbonAnalytics:
    total_by_category: List[Dict[str, Any]] = field(default_factory=list)
    monthly_emissions: List[Dict[str, Any]] = field(default_factory=list)
    total_footprint: float = 0.0

    def to_dict(self) -> dict:
        return {
            "total_by_category": self.total_by_category,
            "monthly_emissions": self.monthly_emissions,
            "total_footprint": self.total_footprint,
        }


def _parse_entry_data(data: dict, *, default_date: Optional[date]) -> tuple:
    category = require_text(data.get("category"), "category", max_length=64)
    value = parse_number(data.get("value"), "value")
    entry_date = parse_date(data.get("date"), default=default_date)
    return category, value, entry_date


def list_entries(user_id: int) -> List[CarbonEntry]:
    with UnitOfWork() as uow:
        return uow.carbon_entries.list_by_user(user_id)


def create_entry(user_id: int, data: dict) -> CarbonEntry:
    """Crea una registrazione calcolando le emissioni dal fattore di categoria."""
    category, value, entry_date = _parse_entry_data(data, default_date=date.today())

    with UnitOfWork() as uow:
        entry = CarbonEntry(user_id=user_id, date=entry_date)
        entry.set_measure(category, value)
        uow.carbon_entries.add(entry)
        uow.commit()

    log_structured_event(
        "create_carbon_entry",
        user_id=user_id,
        entry_id=entry.id,
        category=entry.category,
        calculated_emissions=entry.calculated_emissions,
    )
    return entry


def update_entry(user_id: int, entry_id: int, data: dict) -> CarbonEntry:
    """Aggiorna una registrazione del chiamante e ricalcola le emissioni."""
    with UnitOfWork() as uow:
        entry = uow.carbon_entries.get_owned(entry_id, user_id)
        if entry is None:
            raise NotFoundError("Registrazione non trovata.")

        category, value, entry_date = _parse_entry_data(data, default_date=entry.date)
        entry.set_measure(category, value)
        entry.date = entry_date
        uow.commit()

    log_structured_event(
        "update_carbon_entry",
        user_id=user_id,
        entry_id=entry_id,
        calculated_emissions=entry.calculated_emissions,
    )
    return entry


def delete_entry(user_id: int, entry_id: int) -> None:
    with UnitOfWork() as uow:
        entry = uow.carbon_entries.get_owned(entry_id, user_id)
        if entry is None:
            raise NotFoundError("Registrazione non trovata.")
        uow.carbon_entries.delete(entry)
        uow.commit()

    log_structured_event("delete_carbon_entry", user_id=user_id, entry_id=entry_id)


def _shift_month(day: date, months: int) -> date:
    """Primo giorno del mese spostato di `months` (negativo = indietro)."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def get_analytics(user_id: int, today: Optional[date] = None) -> CarbonAnalytics:
    """
    Riepilogo dell'utente:
    - totale emissioni per categoria
    - totale per mese negli ultimi sei mesi (mese corrente incluso)
    - totale complessivo
    """
    today = today or date.today()
    start = _shift_month(today, -(ANALYTICS_MONTHS - 1))

    with UnitOfWork() as uow:
        by_category = uow.carbon_entries.totals_by_category(user_id)
        recent = uow.carbon_entries.list_since(user_id, start)
        total = uow.carbon_entries.total_for_user(user_id)

    # Raggruppamento per mese lato Python: portabile tra MySQL e SQLite
    months: "OrderedDict[str, float]" = OrderedDict()
    for entry_date, emissions in recent:
        key = entry_date.strftime("%Y-%m")
        months[key] = months.get(key, 0.0) + float(emissions or 0)

    return CarbonAnalytics(
        total_by_category=[
            {"category": category, "total_emissions": total_emissions}
            for category, total_emissions in by_category
        ],
        monthly_emissions=[
            {"month": month, "total_emissions": month_total}
            for month, month_total in months.items()
        ],
        total_footprint=total,
    )
