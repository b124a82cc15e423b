# module checkout_server.app
from typing import Optional

from fastapi import FastAPI

from checkout_server.config import Settings, load_settings
from checkout_server.app_setup.middlewares import register_basic_middlewares, register_security_middleware
from checkout_server.app_setup.exceptions import register_exception_handlers
from checkout_server.app_setup.routers import register_routers
from checkout_server.app_setup.lifespan import lifespan as app_lifespan

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Crée et configure l'instance FastAPI du serveur de checkout.
    Étapes:
      1) Settings: fournis par l'appelant (tests) ou lus depuis l'environnement,
         puis attachés à app.state (injectés dans les vues via Depends(get_settings)).
      2) register_basic_middlewares: CORS (origine CLIENT_URL, credentials).
      3) register_security_middleware: en-têtes de sécurité.
      4) register_exception_handlers: HTTPException -> {"error": ...}.
      5) register_routers: health + payments.
    """
    settings = settings or load_settings()
    app = FastAPI(title="Stripe Checkout Server", lifespan=app_lifespan)
    app.state.settings = settings
    register_basic_middlewares(app, settings)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
