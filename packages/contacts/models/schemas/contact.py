"""
API schemas for contact form submissions.

Field names follow the browser payload (camelCase).
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContactRequest(BaseModel):
    """Contact, waitlist or invoice-order submission."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    plan_name: Optional[str] = None
    billing_cycle: Optional[str] = None
    employee_count: Optional[Any] = None
    is_waitlist: bool = False


class ContactResponse(BaseModel):
    """Acknowledgement returned to the form."""

    success: bool
    message: Optional[str] = None
