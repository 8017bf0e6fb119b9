"""
API JSON di amministrazione (tutte riservate al ruolo admin).

GET    /api/admin/stats
GET    /api/admin/users
PUT    /api/admin/users/<user_id>/role
DELETE /api/admin/users/<user_id>
GET    /api/admin/reports
PUT    /api/admin/reports/<report_id>
"""

from __future__ import annotations

from flask import Blueprint

from climate.api.responses import api_response, get_json_body
from climate.middleware import admin_required, get_current_user
from climate.services import (
    delete_user,
    get_stats,
    list_reports,
    list_users,
    update_report_status,
    update_user_role,
)

api_admin_bp = Blueprint("api_admin", __name__)


@api_admin_bp.route("/stats", methods=["GET"])
@admin_required
def api_stats():
    return api_response(get_stats())


@api_admin_bp.route("/users", methods=["GET"])
@admin_required
def api_list_users():
    return api_response([u.to_dict() for u in list_users()])


@api_admin_bp.route("/users/<int:user_id>/role", methods=["PUT"])
@admin_required
def api_update_user_role(user_id: int):
    """Body JSON atteso: {"role": "user|moderator|admin"}"""
    data = get_json_body()
    user = update_user_role(get_current_user(), user_id, data.get("role"))
    return api_response(user.to_dict(), "Ruolo aggiornato.")


@api_admin_bp.route("/users/<int:user_id>", methods=["DELETE"])
@admin_required
def api_delete_user(user_id: int):
    delete_user(get_current_user(), user_id)
    return api_response(None, "Utente eliminato.")


@api_admin_bp.route("/reports", methods=["GET"])
@admin_required
def api_list_reports():
    return api_response(list_reports())


@api_admin_bp.route("/reports/<int:report_id>", methods=["PUT"])
@admin_required
def api_update_report(report_id: int):
    """Body JSON atteso: {"status": "pending|reviewed|resolved"}"""
    data = get_json_body()
    report = update_report_status(get_current_user(), report_id, data.get("status"))
    return api_response(report.to_dict(), "Stato segnalazione aggiornato.")
