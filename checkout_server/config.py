# checkout_server.config
from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv
from fastapi import Request

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)

"""
Configuration centrale du serveur de checkout.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise les secrets Stripe et l'URL du client (CORS + redirections)
- Construit un objet Settings immuable, créé une seule fois au démarrage
  puis injecté dans les vues via Depends(get_settings)
"""

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_URL = "https://lovable.app"
DEFAULT_PORT = 3000


def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    client_url: str = DEFAULT_CLIENT_URL
    port: int = DEFAULT_PORT
    log_level: str = "info"

    @property
    def success_url(self) -> str:
        # {CHECKOUT_SESSION_ID} est substitué par Stripe au moment de la redirection
        return f"{self.client_url}/success?session_id={{CHECKOUT_SESSION_ID}}"

    @property
    def cancel_url(self) -> str:
        return self.client_url


def load_settings() -> Settings:
    """
    Lit l'environnement et retourne un Settings figé.
    - CLIENT_URL: sans slash final, défaut https://lovable.app
    - PORT: défaut 3000 (port d'écoute utilisé par __main__)
    - Les clés Stripe manquantes ne bloquent pas le démarrage (warning seulement)
    """
    client_url = _clean_env(os.getenv("CLIENT_URL")) or DEFAULT_CLIENT_URL
    client_url = client_url.rstrip("/")
    settings = Settings(
        stripe_secret_key=_clean_env(os.getenv("STRIPE_SECRET_KEY")),
        stripe_webhook_secret=_clean_env(os.getenv("STRIPE_WEBHOOK_SECRET")),
        client_url=client_url,
        port=int(_clean_env(os.getenv("PORT")) or DEFAULT_PORT),
        log_level=(_clean_env(os.getenv("LOG_LEVEL")) or "info").lower(),
    )
    if not settings.stripe_secret_key:
        logger.warning("STRIPE_SECRET_KEY manquant: la création de sessions échouera")
    if not settings.stripe_webhook_secret:
        logger.warning("STRIPE_WEBHOOK_SECRET manquant: tous les webhooks seront rejetés")
    return settings


def get_settings(request: Request) -> Settings:
    """Dépendance FastAPI: Settings attaché à l'app par create_app()."""
    return request.app.state.settings
