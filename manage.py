#!/usr/bin/env python3
"""
Script di gestione della piattaforma clima.

Uso:
    python manage.py runserver                            # Avvia il server di sviluppo
    python manage.py create-db                            # Crea le tabelle del database
    python manage.py create-admin [EMAIL PASSWORD NAME]   # Crea un amministratore
    python manage.py fetch-news                           # Popola gli articoli di esempio
"""

import argparse
import logging
import os

from sqlalchemy.exc import OperationalError as SAOperationalError

from climate import create_app
from climate.extensions import db
from config import DevConfig, ProdConfig

# ---------------------------------------------------------------------
# Logger CLI (fuori dal contesto Flask)
# ---------------------------------------------------------------------
cli_logger = logging.getLogger("manage_cli")
cli_logger.setLevel(logging.INFO)

if not cli_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(levelname)s: %(name)s: %(message)s")
    )
    cli_logger.addHandler(handler)


# ---------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------
def _import_all_models() -> None:
    """Assicura che tutti i modelli siano registrati prima di create_all()."""
    import climate.models  # noqa: F401


# ---------------------------------------------------------------------
# Comandi
# ---------------------------------------------------------------------
def create_db(app) -> int:
    """Crea tutte le tabelle del database definite nei modelli SQLAlchemy."""
    with app.app_context():
        cli_logger.info("Tentativo di creare tutte le tabelle nel database...")
        try:
            _import_all_models()
            db.create_all()
        except SAOperationalError as e:
            cli_logger.error("Errore di connessione o permessi sul database: %s", e)
            cli_logger.info(
                "Verifica che il database sia attivo e che l'utente '%s' abbia accesso a '%s'.",
                app.config.get("DB_USER"),
                app.config.get("DB_NAME"),
            )
            return 1
        cli_logger.info("Database creato con successo.")
        return 0


def create_admin(app, email: str, password: str, name: str) -> int:
    """Crea un utente con ruolo admin."""
    from climate.services import create_admin_user
    from climate.services.errors import ServiceError

    with app.app_context():
        try:
            user = create_admin_user(email, password, name)
        except ServiceError as e:
            cli_logger.error("Impossibile creare l'amministratore: %s", e.message)
            return 1

        cli_logger.info("Amministratore creato con successo.")
        cli_logger.info("ID: %s", user.id)
        cli_logger.info("Email: %s", user.email)
        cli_logger.info("Nome: %s", user.name)
        cli_logger.info("Ruolo: %s", user.role)
        return 0


def fetch_news(app) -> int:
    from climate.services import fetch_news as run_fetch_news

    with app.app_context():
        result = run_fetch_news()
        cli_logger.info(
            "Articoli elaborati: %s, nuovi inseriti: %s",
            result["count"],
            result["inserted"],
        )
        return 0


def run_server(app) -> int:
    """Avvia il server di sviluppo Flask (LAN-ready)."""
    host = os.environ.get("FLASK_RUN_HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", os.environ.get("FLASK_RUN_PORT", "5000")))
    debug = app.config.get("DEBUG", False)

    app.logger.info("Avvio del server su http://%s:%s", host, port)
    app.run(host=host, port=port, debug=debug)
    return 0


# ---------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Gestione della piattaforma clima."
    )
    parser.add_argument(
        "--production",
        action="store_true",
        help="Usa la configurazione di produzione.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("runserver", help="Avvia il server di sviluppo.")
    subparsers.add_parser("create-db", help="Crea le tabelle del database.")
    subparsers.add_parser("fetch-news", help="Popola gli articoli di esempio.")

    admin_parser = subparsers.add_parser("create-admin", help="Crea un amministratore.")
    admin_parser.add_argument("email", nargs="?", default="admin@example.com")
    admin_parser.add_argument("password", nargs="?", default="admin123")
    admin_parser.add_argument("name", nargs="?", default="Admin User")

    args = parser.parse_args(argv)

    app = create_app(ProdConfig if args.production else DevConfig)

    if args.command == "runserver":
        return run_server(app)
    if args.command == "create-db":
        return create_db(app)
    if args.command == "create-admin":
        return create_admin(app, args.email, args.password, args.name)
    if args.command == "fetch-news":
        return fetch_news(app)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
