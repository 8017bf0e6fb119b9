"""
Modulo di configurazione per l'applicazione Flask.
"""

import os
from datetime import timedelta
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent


def _split_origins(value: str) -> list:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Config:
    """Configurazione base, comune a tutti gli ambienti."""

    # Chiave segreta: in produzione deve essere sovrascritta da variabile d'ambiente
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # --- CONFIGURAZIONE DATABASE MYSQL --------------------------------------
    DB_USER = os.environ.get("DB_USER", "climate")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "climate")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = os.environ.get("DB_PORT", "3306")
    DB_NAME = os.environ.get("DB_NAME", "climate_platform")

    # Stringa di connessione composta in modo parametrico
    DEFAULT_DB_URL = (
        f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    )

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", DEFAULT_DB_URL)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- AUTENTICAZIONE (JWT) -------------------------------------------------
    # Il token è l'unica credenziale: nessuna sessione lato server
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET", "climate_secret_key")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        hours=int(os.environ.get("JWT_EXPIRES_HOURS", "24"))
    )
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_TYPE = "Bearer"

    # --- CLIENT / CORS -------------------------------------------------------
    CLIENT_URL = os.environ.get("CLIENT_URL", "http://localhost:5173")
    CORS_ORIGINS = _split_origins(
        os.environ.get(
            "CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
        )
    )

    # Build del frontend (servito solo in produzione)
    CLIENT_DIST_DIR = os.environ.get(
        "CLIENT_DIST_DIR", str(BASE_DIR / "client" / "dist")
    )
    SERVE_CLIENT = False

    # --- RATE LIMITING ---------------------------------------------------------
    RATELIMIT_ENABLED = False
    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "1000 per minute")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True

    # Limite dimensione body JSON
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    # --- LOGGING -------------------------------------------------------------
    LOG_DIR = os.environ.get("LOG_DIR", str(BASE_DIR / "logs"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE_NAME = os.environ.get("LOG_FILE_NAME", "app.log")


class DevConfig(Config):
    """Configurazione per ambiente di sviluppo."""
    DEBUG = True
    ENV = "development"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class ProdConfig(Config):
    """Configurazione per ambiente di produzione."""
    DEBUG = False
    ENV = "production"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    CORS_ORIGINS = _split_origins(
        os.environ.get("CORS_ORIGINS", Config.CLIENT_URL)
    )
    SERVE_CLIENT = True

    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "100 per 15 minutes")


class TestConfig(Config):
    """Configurazione per la test-suite (SQLite in memoria)."""
    TESTING = True
    DEBUG = False
    ENV = "testing"

    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    LOG_DIR = os.environ.get("LOG_DIR", str(BASE_DIR / "logs" / "test"))
    LOG_LEVEL = "WARNING"
