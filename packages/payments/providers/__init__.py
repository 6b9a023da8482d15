"""Payment processor integrations."""
