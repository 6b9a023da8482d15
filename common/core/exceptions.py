from typing import Optional

from common.core.constants import CONFIGURATION_ERROR_MESSAGE


class AppException(Exception):
    """Base application exception.

    Carries the message shown to the caller and the HTTP status used when the
    exception reaches the API boundary.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @property
    def public_message(self) -> str:
        return self.message


class NotFoundError(AppException):
    """Resource not found exception."""

    status_code = 404


class ValidationError(AppException):
    """Client-correctable input error."""

    status_code = 400


class ConfigurationError(AppException):
    """Operator-correctable error, e.g. missing credentials.

    The detail is logged server side; callers only see a generic message.
    """

    status_code = 500

    @property
    def public_message(self) -> str:
        return CONFIGURATION_ERROR_MESSAGE


class UpstreamError(AppException):
    """A third-party service (payment processor, CRM) rejected the request."""

    status_code = 500


class ProcessingError(AppException):
    """Processing error exception."""

    status_code = 500


class CheckoutStateError(AppException):
    """An operation was attempted in a checkout state that does not allow it."""

    status_code = 409


class StalePaymentIntentError(CheckoutStateError):
    """The held payment intent was issued for a different amount."""
