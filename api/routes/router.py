from fastapi import APIRouter

from api.routes import health
from packages.analytics.routes import web_vitals
from packages.checkout.routes import plans, quotes
from packages.contacts.routes import contact
from packages.onboarding.routes import onboarding
from packages.payments.routes import payment_intents

api_router = APIRouter()

# Health check
api_router.include_router(health.router, prefix="/health", tags=["health"])

# Pricing (public)
api_router.include_router(plans.router, prefix="/plans", tags=["checkout"])
api_router.include_router(quotes.router, prefix="/checkout", tags=["checkout"])

# Payments (public, rate limited per client)
api_router.include_router(
    payment_intents.router, prefix="/stripe", tags=["payments"]
)

# Forms
api_router.include_router(contact.router, prefix="/contact", tags=["contact"])
api_router.include_router(
    onboarding.router, prefix="/onboarding", tags=["onboarding"]
)
api_router.include_router(web_vitals.router, prefix="/analytics", tags=["analytics"])
