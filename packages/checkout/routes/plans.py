"""
Plans API routes.

Public endpoint for retrieving the plans offered at checkout.
"""

from fastapi import APIRouter, Depends

from packages.checkout.catalog import PlanCatalog, get_plan_catalog
from packages.checkout.models.schemas.checkout import PlanResponse, PlansResponse
from packages.checkout.pricing import compute_amount_cents, format_amount

router = APIRouter()


@router.get("", response_model=PlansResponse, response_model_by_alias=True)
async def get_plans(catalog: PlanCatalog = Depends(get_plan_catalog)):
    """
    Get all available plans.

    Prices are per seat per month. This endpoint is public for pricing pages.
    """
    plans = []
    for plan in catalog:
        price_cents = compute_amount_cents(plan, 1)
        plans.append(
            PlanResponse(
                name=plan.name,
                price=format_amount(price_cents),
                price_cents=price_cents,
                description=plan.description,
                features=list(plan.features),
            )
        )
    return PlansResponse(plans=plans)
