"""
Gestionnaires d'exceptions.
- Les HTTPException sont rendues en JSON {"error": "<detail>"}, format attendu
  par le client front pour tous les endpoints de l'API.
"""
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def json_error(request: Request, exc: HTTPException):
        if exc.status_code >= 500:
            logger.error("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )
