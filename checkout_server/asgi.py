"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: uvicorn, gunicorn avec workers uvicorn)
  importe `checkout_server.asgi:app`.
- Les Settings sont lus une seule fois ici, à l'import.
"""

from checkout_server.app import create_app

app = create_app()
