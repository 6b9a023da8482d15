"""Domain models for CRM contacts."""

from typing import Optional
from pydantic import BaseModel


class ContactSubmission(BaseModel):
    """A validated contact ready to forward to the CRM."""

    name: str
    email: str
    phone: str
    company: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    plan_name: str = ""
    billing_cycle: str = ""
    employee_count: Optional[int] = None
    is_waitlist: bool = False


class ContactResult(BaseModel):
    """Outcome of forwarding a contact."""

    success: bool = True
    message: Optional[str] = None
