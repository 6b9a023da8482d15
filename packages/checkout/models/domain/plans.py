"""Domain models for subscription plans."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Plan(BaseModel):
    """A subscription plan priced per seat per month."""

    model_config = ConfigDict(frozen=True)

    name: str
    monthly_price_per_seat: Decimal = Field(..., gt=0)
    description: str = ""
    features: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.name.strip().lower()
