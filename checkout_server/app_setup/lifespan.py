"""
Lifespan FastAPI: journalise le démarrage et l'arrêt du serveur.
Aucune ressource partagée n'est ouverte (service sans état).
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("uvicorn.error")
    settings = app.state.settings
    logger.info("Checkout server starting: client_url=%s port=%s", settings.client_url, settings.port)
    yield
    logger.info("Checkout server stopped")
