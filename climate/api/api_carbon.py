"""
API JSON per il tracciamento dell'impronta di carbonio.

Tutti gli endpoint richiedono autenticazione e lavorano solo
sulle registrazioni dell'utente chiamante.

GET    /api/carbon/entries
POST   /api/carbon/entries
PUT    /api/carbon/entries/<entry_id>
DELETE /api/carbon/entries/<entry_id>
GET    /api/carbon/analytics
"""

from __future__ import annotations

from flask import Blueprint

from climate.api.responses import api_response, get_json_body
from climate.middleware import get_current_user, login_required
from climate.services import (
    create_entry,
    delete_entry,
    get_analytics,
    list_entries,
    update_entry,
)

api_carbon_bp = Blueprint("api_carbon", __name__)


@api_carbon_bp.route("/entries", methods=["GET"])
@login_required
def api_list_entries():
    entries = list_entries(get_current_user().id)
    return api_response([e.to_dict() for e in entries])


@api_carbon_bp.route("/entries", methods=["POST"])
@login_required
def api_create_entry():
    """
    Body JSON atteso:
    {
      "category": "transport|food|energy|...",
      "value": 10,
      "date": "YYYY-MM-DD"   # opzionale, default oggi
    }

    Le emissioni sono calcolate lato server (value x fattore di categoria).
    """
    entry = create_entry(get_current_user().id, get_json_body())
    return api_response(entry.to_dict(), "Registrazione aggiunta.", 201)


@api_carbon_bp.route("/entries/<int:entry_id>", methods=["PUT"])
@login_required
def api_update_entry(entry_id: int):
    entry = update_entry(get_current_user().id, entry_id, get_json_body())
    return api_response(entry.to_dict(), "Registrazione aggiornata.")


@api_carbon_bp.route("/entries/<int:entry_id>", methods=["DELETE"])
@login_required
def api_delete_entry(entry_id: int):
    delete_entry(get_current_user().id, entry_id)
    return api_response(None, "Registrazione eliminata.")


@api_carbon_bp.route("/analytics", methods=["GET"])
@login_required
def api_analytics():
    """
    Output (payload):
    {
      "total_by_category": [{"category": "...", "total_emissions": ...}],
      "monthly_emissions": [{"month": "YYYY-MM", "total_emissions": ...}],
      "total_footprint": ...
    }
    """
    return api_response(get_analytics(get_current_user().id).to_dict())
