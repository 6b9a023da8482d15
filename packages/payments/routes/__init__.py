"""Payment API routes."""

from packages.payments.routes import payment_intents

__all__ = ["payment_intents"]
