"""Processor integrations used by the checkout flow."""
