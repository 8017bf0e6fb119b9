"""
Pacchetto principale dell'applicazione Flask (piattaforma clima).
"""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix

from config import DevConfig
from .extensions import init_extensions


def create_app(config_class=DevConfig) -> Flask:
    app = Flask(__name__, instance_relative_config=True, static_folder=None)
    app.config.from_object(config_class)

    # Dietro un reverse proxy: fidati del primo hop (rate limiting per IP reale)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    init_extensions(app)

    from .middleware import init_auth, init_security_headers
    init_auth(app)
    init_security_headers(app)

    _register_error_handlers(app)
    _register_blueprints(app)

    app.logger.info("Applicazione Flask inizializzata.")

    @app.route("/health")
    def healthcheck():
        return jsonify({"status": "ok"}), 200

    return app


def _register_blueprints(app: Flask) -> None:
    from .api import (
        api_auth_bp,
        api_carbon_bp,
        api_news_bp,
        api_community_bp,
        api_admin_bp,
    )

    app.register_blueprint(api_auth_bp, url_prefix="/api/auth")
    app.register_blueprint(api_carbon_bp, url_prefix="/api/carbon")
    app.register_blueprint(api_news_bp, url_prefix="/api/news")
    app.register_blueprint(api_community_bp, url_prefix="/api/community")
    app.register_blueprint(api_admin_bp, url_prefix="/api/admin")

    # Web (frontend / messaggio di sviluppo): per ultimo, contiene il catch-all
    from .web import main_bp
    app.register_blueprint(main_bp)


def _register_error_handlers(app: Flask) -> None:
    from .api.responses import api_error
    from .extensions import db
    from .services.errors import ServiceError

    @app.errorhandler(ServiceError)
    def handle_service_error(error: ServiceError):
        if error.status_code >= 500:
            app.logger.error("Errore di servizio: %s", error.message)
        return api_error(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        return api_error(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        db.session.rollback()
        app.logger.error(
            "Errore non gestito durante la richiesta",
            exc_info=error,
            extra={"component": "api", "error_type": type(error).__name__},
        )
        return api_error("Errore interno del server.", 500)
