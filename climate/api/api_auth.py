"""
API JSON di autenticazione.

POST /api/auth/register   -> crea utente (ruolo "user") e restituisce token
POST /api/auth/login      -> verifica credenziali e restituisce token
GET  /api/auth/me         -> profilo dell'utente autenticato
"""

from __future__ import annotations

from flask import Blueprint

from climate.api.responses import api_response, get_json_body
from climate.middleware import get_current_user, login_required
from climate.services import authenticate, issue_token, register_user

api_auth_bp = Blueprint("api_auth", __name__)


@api_auth_bp.route("/register", methods=["POST"])
def api_register():
    """
    Body JSON atteso:
    {
      "email": "...",
      "password": "...",   # almeno 6 caratteri
      "name": "..."
    }
    """
    data = get_json_body()
    user = register_user(data.get("email"), data.get("password"), data.get("name"))
    return api_response(
        {"token": issue_token(user), "user": user.to_dict()},
        "Registrazione completata.",
        201,
    )


@api_auth_bp.route("/login", methods=["POST"])
def api_login():
    data = get_json_body()
    user = authenticate(data.get("email"), data.get("password"))
    return api_response(
        {"token": issue_token(user), "user": user.to_dict()},
        "Login effettuato.",
    )


@api_auth_bp.route("/me", methods=["GET"])
@login_required
def api_me():
    return api_response(get_current_user().to_dict())
