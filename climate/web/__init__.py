"""
Route non-API: frontend in produzione, messaggio informativo in sviluppo.
"""

from .routes_main import main_bp

__all__ = ["main_bp"]
