"""Checkout API routes."""

from packages.checkout.routes import plans, quotes

__all__ = ["plans", "quotes"]
