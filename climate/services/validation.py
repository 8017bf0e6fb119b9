"""
Funzioni di parsing/validazione dell'input condivise dai servizi.
Sollevano ValidationError (400) con un messaggio leggibile dal client.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional, Tuple

from climate.services.errors import ValidationError

DEFAULT_LIMIT = 20
MAX_LIMIT = 100

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_text(value: Any, field: str, *, max_length: Optional[int] = None) -> str:
    """Stringa obbligatoria e non vuota (spazi esclusi)."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Il campo '{field}' è obbligatorio.")
    text = value.strip()
    if max_length is not None and len(text) > max_length:
        raise ValidationError(
            f"Il campo '{field}' supera la lunghezza massima ({max_length})."
        )
    return text


def optional_text(value: Any, *, max_length: Optional[int] = None) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("Valore testuale non valido.")
    text = value.strip()
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"Testo troppo lungo (max {max_length}).")
    return text or None


def parse_email(value: Any) -> str:
    email = require_text(value, "email", max_length=255).lower()
    if not _EMAIL_RE.match(email):
        raise ValidationError("Indirizzo e-mail non valido.")
    return email


def parse_number(value: Any, field: str) -> float:
    # bool è una sottoclasse di int: va escluso esplicitamente
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Il campo '{field}' deve essere numerico.")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Il campo '{field}' deve essere numerico.")
    if number != number or number in (float("inf"), float("-inf")):
        raise ValidationError(f"Il campo '{field}' deve essere numerico.")
    return number


def parse_id(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field} mancante o non valido.")
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} mancante o non valido.")
    if parsed <= 0:
        raise ValidationError(f"{field} mancante o non valido.")
    return parsed


def parse_date(value: Any, *, default: Optional[date] = None) -> Optional[date]:
    """Accetta 'YYYY-MM-DD' o un timestamp ISO 8601; vuoto -> default."""
    if value in (None, ""):
        return default
    if not isinstance(value, str):
        raise ValidationError("Data non valida (formato atteso YYYY-MM-DD).")
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Data non valida (formato atteso YYYY-MM-DD).")


def parse_pagination(args) -> Tuple[int, int]:
    """
    Legge limit/offset dalla query string.

    - limit: default 20, limitato a 1..100 (negativo -> errore)
    - offset: default 0, non negativo
    """
    raw_limit = args.get("limit")
    raw_offset = args.get("offset")

    try:
        limit = int(raw_limit) if raw_limit not in (None, "") else DEFAULT_LIMIT
        offset = int(raw_offset) if raw_offset not in (None, "") else 0
    except (TypeError, ValueError):
        raise ValidationError("Parametri di paginazione non validi.")

    if limit < 0 or offset < 0:
        raise ValidationError("Parametri di paginazione non validi.")

    limit = max(1, min(limit, MAX_LIMIT))
    return limit, offset


def require_choice(value: Any, choices, message: str) -> str:
    if value not in choices:
        raise ValidationError(message)
    return value
