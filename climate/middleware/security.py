"""
Header di sicurezza HTTP aggiunti a ogni risposta.
"""

from flask import Flask, Response

_DEFAULT_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    # Consente il caricamento cross-origin (es. font da CDN)
    "Cross-Origin-Resource-Policy": "cross-origin",
    "X-XSS-Protection": "0",
}


def init_security_headers(app: Flask) -> None:
    hsts = not app.config.get("DEBUG", False) and not app.config.get("TESTING", False)

    @app.after_request
    def set_security_headers(response: Response) -> Response:
        for header, value in _DEFAULT_HEADERS.items():
            response.headers.setdefault(header, value)
        if hsts:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=15552000; includeSubDomains"
            )
        return response
