"""Serveur de checkout Stripe: sessions d'abonnement avec paliers de réduction et webhooks."""

__version__ = "1.0.0"
