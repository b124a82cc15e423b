"""
Point d'entrée principal du serveur de checkout.

Usage:
    python -m checkout_server

Lance uvicorn avec les Settings lus depuis l'environnement:
- PORT: port d'écoute (par défaut 3000)
- LOG_LEVEL: niveau de logs uvicorn (ex: "info", "debug")
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
"""
import os
import uvicorn

from checkout_server.config import load_settings

def main() -> None:
    settings = load_settings()
    # Activer le reload uniquement si explicitement demandé (ex: en local)
    reload_flag = os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")
    uvicorn.run(
        "checkout_server.asgi:app",
        host="0.0.0.0",
        port=settings.port,
        reload=reload_flag,
        log_level=settings.log_level,
    )

if __name__ == "__main__":
    main()
