"""
Quote API routes.

Server-side mirror of the checkout page's price calculation.
"""

from fastapi import APIRouter, Depends, Query

from common.core.exceptions import NotFoundError
from packages.checkout.catalog import PlanCatalog, get_plan_catalog
from packages.checkout.models.domain.enums import BillingCycle
from packages.checkout.models.schemas.checkout import QuoteResponse
from packages.checkout.pricing import (
    DEFAULT_EMPLOYEE_COUNT,
    compute_amount_cents,
    format_amount,
    normalize_employee_count,
)

router = APIRouter()


@router.get("/quote", response_model=QuoteResponse, response_model_by_alias=True)
async def get_quote(
    plan: str = Query(..., description="Plan name, case-insensitive"),
    employees: int = Query(DEFAULT_EMPLOYEE_COUNT),
    billing_cycle: BillingCycle = Query(BillingCycle.MONTHLY),
    catalog: PlanCatalog = Depends(get_plan_catalog),
):
    """Quote the amount in cents for a plan, seat count and billing cycle."""
    selected = catalog.from_query(plan)
    if selected is None:
        raise NotFoundError("Plan not found")

    seats = normalize_employee_count(employees)
    amount_cents = compute_amount_cents(selected, seats, billing_cycle)
    return QuoteResponse(
        plan=selected.name,
        employee_count=seats,
        billing_cycle=billing_cycle,
        amount_cents=amount_cents,
        amount_formatted=format_amount(amount_cents),
    )
