"""
Pacchetto per le API JSON usate dal client single-page.

Contiene:
- api_auth_bp      -> registrazione, login, profilo
- api_carbon_bp    -> registrazioni impronta di carbonio e analytics
- api_news_bp      -> notizie e segnalibri
- api_community_bp -> post, commenti, voti, segnalazioni
- api_admin_bp     -> statistiche, utenti, moderazione
"""

from .api_auth import api_auth_bp
from .api_carbon import api_carbon_bp
from .api_news import api_news_bp
from .api_community import api_community_bp
from .api_admin import api_admin_bp

__all__ = [
    "api_auth_bp",
    "api_carbon_bp",
    "api_news_bp",
    "api_community_bp",
    "api_admin_bp",
]
