"""
Eccezioni del livello servizi.

Ogni eccezione porta con sé lo status HTTP con cui l'API la restituisce
(vedi gli error handler registrati in create_app()).
"""

from __future__ import annotations


class ServiceError(Exception):
    """Errore applicativo generico: input non valido."""

    status_code = 400

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ServiceError):
    status_code = 400


class AuthenticationError(ServiceError):
    status_code = 401


class PermissionDeniedError(ServiceError):
    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 409
