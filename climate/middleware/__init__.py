"""
Middleware dell'applicazione: autenticazione JWT e header di sicurezza.
"""

from .auth import init_auth, login_required, admin_required, get_current_user
from .security import init_security_headers

__all__ = [
    "init_auth",
    "login_required",
    "admin_required",
    "get_current_user",
    "init_security_headers",
]
