"""Analytics API routes."""

from packages.analytics.routes import web_vitals

__all__ = ["web_vitals"]
