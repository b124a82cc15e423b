"""
Registre central des routers.
- Payments: /create-checkout-session, /webhook
- Health: /health
"""
from fastapi import FastAPI
from checkout_server.payments import views as payments_views
from checkout_server.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    app.include_router(health_router)
    app.include_router(payments_views.router)
