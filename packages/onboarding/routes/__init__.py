"""Onboarding API routes."""

from packages.onboarding.routes import onboarding

__all__ = ["onboarding"]
