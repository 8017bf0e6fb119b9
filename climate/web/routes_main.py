"""
Route principali non-API.

- In produzione (SERVE_CLIENT) con la build del frontend presente,
  serve i file statici e ripiega su index.html per il routing lato client.
- Altrimenti risponde con un messaggio JSON che indica dove gira il
  frontend e quali prefissi API sono disponibili.
"""

import os

from flask import Blueprint, abort, current_app, jsonify, send_from_directory

main_bp = Blueprint("main", __name__)

API_PREFIXES = [
    "/api/auth",
    "/api/carbon",
    "/api/news",
    "/api/community",
    "/api/admin",
]


def _client_dist_dir():
    if not current_app.config.get("SERVE_CLIENT"):
        return None
    dist_dir = current_app.config.get("CLIENT_DIST_DIR")
    if dist_dir and os.path.isfile(os.path.join(dist_dir, "index.html")):
        return dist_dir
    return None


@main_bp.route("/", defaults={"path": ""})
@main_bp.route("/<path:path>")
def index(path: str):
    # Le rotte API sconosciute restano 404 JSON
    if path == "api" or path.startswith("api/"):
        abort(404)

    dist_dir = _client_dist_dir()
    if dist_dir is None:
        return jsonify(
            {
                "message": "Development mode: frontend is served by the Vite dev server",
                "frontendUrl": current_app.config.get("CLIENT_URL"),
                "apiRoutes": API_PREFIXES,
            }
        )

    if path and os.path.isfile(os.path.join(dist_dir, path)):
        return send_from_directory(dist_dir, path)
    return send_from_directory(dist_dir, "index.html")
