"""
Formato comune delle risposte JSON:

{
  "success": true|false,
  "message": "...",
  "payload": ... | null
}
"""

from __future__ import annotations

from typing import Any

from flask import jsonify, request


def api_response(payload: Any = None, message: str = "", status: int = 200):
    return jsonify({"success": True, "message": message, "payload": payload}), status


def api_error(message: str, status: int):
    return jsonify({"success": False, "message": message, "payload": None}), status


def get_json_body() -> dict:
    """Body JSON della richiesta; qualunque cosa non sia un oggetto vale {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
