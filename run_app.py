"""
Avvio rapido dell'app Flask con un singolo comando:

    python run_app.py

Usa la factory create_app(); con APP_ENV=production carica ProdConfig,
altrimenti la configurazione di sviluppo.
"""

from __future__ import annotations

import os

from climate import create_app
from config import DevConfig, ProdConfig


def main() -> None:
    is_production = os.environ.get("APP_ENV", "development") == "production"
    app = create_app(ProdConfig if is_production else DevConfig)

    host = os.environ.get("FLASK_RUN_HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", os.environ.get("FLASK_RUN_PORT", "5000")))

    app.logger.info(
        "Avvio dell'applicazione tramite run_app.py",
        extra={"component": "launcher", "mode": "production" if is_production else "development"},
    )
    app.run(host=host, port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()
