"""Field checks shared by the contact and onboarding forms."""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PHONE_DIGITS = 10


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email or ""))


def phone_digits(phone: str) -> str:
    return re.sub(r"\D", "", phone or "")


def is_valid_phone(phone: str) -> bool:
    """At least ten digits once formatting characters are removed."""
    return len(phone_digits(phone)) >= MIN_PHONE_DIGITS
