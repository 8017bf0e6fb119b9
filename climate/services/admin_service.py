"""
Servizi di amministrazione: statistiche, utenti e moderazione.
Le route che li espongono sono riservate al ruolo admin.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from climate.models import Report, User, USER_ROLES, REPORT_STATUSES
from climate.services.errors import NotFoundError, ValidationError
from climate.services.logging import log_structured_event
from climate.services.unit_of_work import UnitOfWork
from climate.services.validation import require_choice


def get_stats(today: Optional[date] = None) -> dict:
    """
    KPI della dashboard admin:
    - utenti totali
    - utenti attivi oggi (autori distinti di registrazioni con data odierna)
    - post totali
    """
    today = today or date.today()
    with UnitOfWork() as uow:
        return {
            "total_users": uow.users.count(),
            "active_today": uow.carbon_entries.count_active_users_on(today),
            "total_posts": uow.posts.count(),
        }


def list_users() -> List[User]:
    with UnitOfWork() as uow:
        return uow.users.list_newest_first()


def update_user_role(actor: User, user_id: int, role) -> User:
    role = require_choice(role, USER_ROLES, "Ruolo non valido.")

    with UnitOfWork() as uow:
        user = uow.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("Utente non trovato.")
        previous_role = user.role
        user.role = role
        uow.commit()

    log_structured_event(
        "update_user_role",
        actor_id=actor.id,
        user_id=user_id,
        previous_role=previous_role,
        role=role,
    )
    return user


def delete_user(actor: User, user_id: int) -> None:
    """Elimina l'utente e i suoi contenuti; le segnalazioni restano senza riferimento."""
    if actor.id == user_id:
        raise ValidationError("Non puoi eliminare il tuo stesso account.")

    with UnitOfWork() as uow:
        user = uow.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("Utente non trovato.")
        uow.users.delete(user)
        uow.commit()

    log_structured_event("delete_user", actor_id=actor.id, user_id=user_id)


def list_reports() -> List[dict]:
    with UnitOfWork() as uow:
        return uow.reports.list_with_labels()


def update_report_status(actor: User, report_id: int, status) -> Report:
    """Qualunque stato ammesso può essere impostato direttamente."""
    status = require_choice(status, REPORT_STATUSES, "Stato non valido.")

    with UnitOfWork() as uow:
        report = uow.reports.get_by_id(report_id)
        if report is None:
            raise NotFoundError("Segnalazione non trovata.")
        report.status = status
        uow.commit()

    log_structured_event(
        "update_report_status", actor_id=actor.id, report_id=report_id, status=status
    )
    return report
