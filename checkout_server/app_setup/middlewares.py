"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS limité à l'origine du client (credentials autorisés).
- register_security_middleware: en-têtes de sécurité sur toutes les réponses.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from checkout_server.config import Settings

def register_basic_middlewares(app: FastAPI, settings: Settings) -> None:
    """Seule l'origine CLIENT_URL est autorisée; les cookies/credentials passent."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        return response
