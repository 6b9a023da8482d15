from enum import Enum


class Environment(str, Enum):
    """Environment profiles."""

    LOCAL = "local"
    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


# Generic messages shown to users when the real cause is operator-facing
CONFIGURATION_ERROR_MESSAGE = "Server configuration error"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
