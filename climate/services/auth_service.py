"""
Servizi di autenticazione: registrazione, login ed emissione token.
"""

from __future__ import annotations

from typing import Optional

from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError

from climate.models import User, USER_ROLES
from climate.services.errors import AuthenticationError, ConflictError, ValidationError
from climate.services.logging import log_structured_event
from climate.services.unit_of_work import UnitOfWork
from climate.services.validation import parse_email, require_text

MIN_PASSWORD_LENGTH = 6


def _create_user(uow: UnitOfWork, email, password, name, role: str) -> User:
    email = parse_email(email)
    name = require_text(name, "name", max_length=128)
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"La password deve contenere almeno {MIN_PASSWORD_LENGTH} caratteri."
        )
    if role not in USER_ROLES:
        raise ValidationError("Ruolo non valido.")

    if uow.users.get_by_email(email) is not None:
        raise ConflictError("Esiste già un utente con questa e-mail.")

    user = User(email=email, name=name, role=role)
    user.set_password(password)
    uow.users.add(user)
    try:
        uow.commit()
    except IntegrityError:
        # Registrazione concorrente con la stessa e-mail
        raise ConflictError("Esiste già un utente con questa e-mail.")
    return user


def register_user(email, password, name) -> User:
    """Registra un nuovo utente con ruolo 'user'."""
    with UnitOfWork() as uow:
        user = _create_user(uow, email, password, name, role="user")

    log_structured_event("register_user", user_id=user.id)
    return user


def create_admin_user(email: str, password: str, name: str) -> User:
    """Bootstrap di un amministratore (usato dalla CLI create-admin)."""
    with UnitOfWork() as uow:
        user = _create_user(uow, email, password, name, role="admin")

    log_structured_event("create_admin_user", user_id=user.id)
    return user


def authenticate(email, password) -> User:
    """Verifica le credenziali; stesso messaggio per e-mail sconosciuta e password errata."""
    if not isinstance(email, str) or not isinstance(password, str):
        raise ValidationError("E-mail e password sono obbligatorie.")

    with UnitOfWork() as uow:
        user: Optional[User] = uow.users.get_by_email(email.strip().lower())

    if user is None or not user.check_password(password):
        log_structured_event("login_failed", level="warning", email=email.strip().lower())
        raise AuthenticationError("Credenziali non valide.")

    log_structured_event("login", user_id=user.id)
    return user


def issue_token(user: User) -> str:
    """Token di accesso: identità = id utente, claim aggiuntivo con il ruolo."""
    return create_access_token(
        identity=str(user.id),
        additional_claims={"role": user.role},
    )
