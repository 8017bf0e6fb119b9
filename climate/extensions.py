"""
Modulo che contiene le estensioni Flask condivise (db, jwt, cors, rate limiting, logger).
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict

from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_sqlalchemy import SQLAlchemy

# Istanze globali, inizializzate in create_app()
db = SQLAlchemy()
jwt = JWTManager()
cors = CORS()


class JsonFormatter(logging.Formatter):
    """
    Formatter personalizzato che produce log in formato JSON.

    Campi principali:
    - timestamp: ISO 8601
    - level: livello di log (INFO, ERROR, ecc.)
    - logger: nome del logger
    - module: modulo sorgente
    - message: messaggio di log
    - extra: eventuali campi extra passati come extra={...}
    """

    # Attributi standard del LogRecord da non riportare tra gli "extra"
    standard_attrs = {
        "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
        "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
        "created", "msecs", "relativeCreated", "thread", "threadName",
        "processName", "process", "taskName", "message",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.standard_attrs
        }
        if extra_fields:
            log_record["extra"] = extra_fields

        return json.dumps(log_record, ensure_ascii=False, default=str)


def init_extensions(app: Flask) -> None:
    """
    Inizializza tutte le estensioni collegate all'app Flask.

    Questa funzione viene chiamata da create_app().
    """
    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", [])}},
        supports_credentials=True,
    )
    _init_rate_limiting(app)
    _init_logging(app)


def _init_rate_limiting(app: Flask) -> Limiter:
    """
    Un limiter per ogni app, con i limiti letti dalla sua configurazione.
    Il superamento del limite produce 429 (gestito come HTTPException).
    """
    return Limiter(
        get_remote_address,
        app=app,
        default_limits=[app.config.get("RATELIMIT_DEFAULT", "100 per 15 minutes")],
        storage_uri=app.config.get("RATELIMIT_STORAGE_URI", "memory://"),
        enabled=app.config.get("RATELIMIT_ENABLED", True),
    )


def _init_logging(app: Flask) -> None:
    """
    Configura il logging applicativo:

    - handler su file con RotatingFileHandler
    - handler su console (stream)
    - formatter JSON strutturato
    """
    log_dir = app.config.get("LOG_DIR")
    log_file_name = app.config.get("LOG_FILE_NAME", "app.log")
    log_level_name = app.config.get("LOG_LEVEL", "INFO")

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_file_name)

    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    json_formatter = JsonFormatter()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(json_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(json_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Evita handler duplicati se create_app viene chiamata più volte (es. nei test)
    if not getattr(root_logger, "_json_logging_configured", False):
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)
        root_logger._json_logging_configured = True  # type: ignore[attr-defined]
    else:
        file_handler.close()

    app.logger.setLevel(log_level)

    app.logger.info(
        "Logging JSON inizializzato.",
        extra={
            "component": "logging",
            "log_path": log_path,
            "level": log_level_name,
        },
    )
