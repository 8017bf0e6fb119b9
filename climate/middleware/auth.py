"""
Middleware di autenticazione basato su token JWT (Flask-JWT-Extended).

- Il client invia `Authorization: Bearer <token>`.
- Il token porta l'id utente come identità: a ogni richiesta protetta
  l'utente viene ricaricato dal DB, quindi il ruolo usato per i permessi
  è sempre quello attuale e un utente eliminato non è più autenticato.
- Token assente, non valido, scaduto o di un utente inesistente -> 401
  prima che la route venga eseguita.
"""

from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify
from flask_jwt_extended import get_current_user as _jwt_current_user
from flask_jwt_extended import jwt_required, verify_jwt_in_request

from climate.extensions import db, jwt
from climate.models import User
from climate.services.errors import PermissionDeniedError

# Alias leggibile nelle route: richiede un token valido
login_required = jwt_required()


def _unauthorized(message: str):
    return jsonify({"success": False, "message": message, "payload": None}), 401


def init_auth(app: Flask) -> None:
    """Registra i callback di Flask-JWT-Extended sull'istanza globale `jwt`."""

    @jwt.user_lookup_loader
    def load_user_from_token(_jwt_header, jwt_data):
        identity = jwt_data.get("sub")
        try:
            user_id = int(identity)
        except (TypeError, ValueError):
            return None
        return db.session.get(User, user_id)

    @jwt.unauthorized_loader
    def missing_token(_reason):
        return _unauthorized("Accesso negato. Token mancante.")

    @jwt.invalid_token_loader
    def invalid_token(_reason):
        return _unauthorized("Token non valido.")

    @jwt.expired_token_loader
    def expired_token(_jwt_header, _jwt_payload):
        return _unauthorized("Token scaduto.")

    @jwt.user_lookup_error_loader
    def unknown_user(_jwt_header, _jwt_payload):
        return _unauthorized("Token non valido.")


def get_current_user() -> User:
    """Utente autenticato della richiesta corrente (dopo login_required)."""
    return _jwt_current_user()


def admin_required(fn):
    """
    Decoratore per le route riservate agli amministratori.
    Token mancante/non valido -> 401, ruolo diverso da admin -> 403.
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        user = get_current_user()
        if user is None or not user.is_admin:
            raise PermissionDeniedError("Accesso riservato agli amministratori.")
        return fn(*args, **kwargs)

    return wrapper
