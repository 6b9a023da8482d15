"""
Plan catalog.

Static, read-only table of the plans offered at checkout. Shared by every
request and checkout session; never mutated after construction.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Iterable, Optional

from packages.checkout.models.domain.plans import Plan

DEFAULT_PLANS = (
    Plan(
        name="Basic",
        monthly_price_per_seat=Decimal("99.00"),
        description="Perfect for small teams needing essential IT security and communication tools",
        features=(
            "Password Manager",
            "Business Email Solution",
            "Email Support (Business Hours)",
            "Basic Security Monitoring",
            "Setup & Onboarding Assistance",
        ),
    ),
    Plan(
        name="Standard",
        monthly_price_per_seat=Decimal("249.00"),
        description="Our most popular option for growing businesses needing comprehensive IT support",
        features=(
            "Everything in Basic",
            "Professional Web Hosting",
            "Microsoft Collaboration Tools",
            "Quarterly IT Assessment",
            "Extended Technical Support",
            "Cloud Backup Solutions",
            "30-day email & phone support",
        ),
    ),
    Plan(
        name="Premium",
        monthly_price_per_seat=Decimal("449.00"),
        description="Complete IT management solution for businesses requiring enterprise-grade technology",
        features=(
            "Everything in Standard",
            "24/7 Priority Support",
            "Server Monitoring & Management",
            "Reduced Web Design Rates",
            "Advanced Security Suite",
            "Dedicated Account Manager",
            "On-site Consultations",
            "Unlimited Device Support",
        ),
    ),
)


class PlanCatalog:
    """Case-insensitive lookup over a fixed set of plans."""

    def __init__(self, plans: Iterable[Plan]):
        self._plans = tuple(plans)
        self._by_key: dict[str, Plan] = {}
        for plan in self._plans:
            if plan.key in self._by_key:
                raise ValueError(f"Duplicate plan name: {plan.name}")
            self._by_key[plan.key] = plan

    def __len__(self) -> int:
        return len(self._plans)

    def __iter__(self):
        return iter(self._plans)

    def all(self) -> list[Plan]:
        return list(self._plans)

    def find(self, name: Optional[str]) -> Optional[Plan]:
        """Find a plan by name, ignoring case. Unknown names return None."""
        if not name or not name.strip():
            return None
        return self._by_key.get(name.strip().lower())

    def from_query(self, plan_param: Optional[str]) -> Optional[Plan]:
        """Resolve the checkout page's ?plan= parameter.

        No default plan is substituted when the value does not match.
        """
        return self.find(plan_param)


@lru_cache
def get_plan_catalog() -> PlanCatalog:
    """Shared catalog instance (FastAPI dependency)."""
    return PlanCatalog(DEFAULT_PLANS)
