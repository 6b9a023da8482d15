"""
Price calculation for checkout.

Amounts are computed with Decimal arithmetic and rounded half-up to whole
minor currency units (cents), so the charged value never depends on binary
floating point.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from common.core.exceptions import ValidationError
from packages.checkout.models.domain.enums import BillingCycle
from packages.checkout.models.domain.plans import Plan

MIN_EMPLOYEE_COUNT = 1
DEFAULT_EMPLOYEE_COUNT = 5
CENTS_PER_UNIT = Decimal(100)

CURRENCY_SYMBOLS = {
    "usd": "$",
    "cad": "$",
    "eur": "€",
    "gbp": "£",
}


def normalize_employee_count(employee_count: int) -> int:
    """Clamp seat counts below the minimum up to one seat.

    Non-integers (including bools) are rejected rather than truncated.
    """
    if isinstance(employee_count, bool) or not isinstance(employee_count, int):
        raise ValidationError("Employee count must be a whole number")
    return max(employee_count, MIN_EMPLOYEE_COUNT)


def compute_amount_cents(
    plan: Plan,
    employee_count: int,
    billing_cycle: Union[BillingCycle, str] = BillingCycle.MONTHLY,
) -> int:
    """
    Compute the charge for a plan in cents.

    - monthly: price * seats * 100
    - annual:  price * seats * 12 * 0.9 * 100

    Args:
        plan: Selected plan
        employee_count: Number of seats (clamped to at least 1)
        billing_cycle: Monthly or annual billing

    Returns:
        Non-negative integer amount in minor currency units
    """
    seats = normalize_employee_count(employee_count)
    cycle = BillingCycle(billing_cycle)

    total = (
        plan.monthly_price_per_seat
        * seats
        * cycle.months
        * cycle.discount_multiplier
        * CENTS_PER_UNIT
    )
    return int(total.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_amount(amount_cents: int, currency: str = "usd") -> str:
    """Format cents for display, e.g. 49500 -> "$495.00"."""
    units = (Decimal(amount_cents) / CENTS_PER_UNIT).quantize(Decimal("0.01"))
    symbol = CURRENCY_SYMBOLS.get(currency.lower())
    if symbol:
        return f"{symbol}{units:,.2f}"
    return f"{units:,.2f} {currency.upper()}"
