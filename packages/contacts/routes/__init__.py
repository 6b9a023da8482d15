"""Contact API routes."""

from packages.contacts.routes import contact

__all__ = ["contact"]
