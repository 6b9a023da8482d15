"""
Unit tests for plan and quote API routes.
"""

import pytest


@pytest.mark.asyncio
class TestPlanRoutes:
    """Tests for GET /api/plans."""

    async def test_lists_plans(self, client):
        response = await client.get("/api/plans")

        assert response.status_code == 200
        plans = response.json()["plans"]
        assert [plan["name"] for plan in plans] == ["Basic", "Standard", "Premium"]
        assert plans[0]["price"] == "$99.00"
        assert plans[0]["priceCents"] == 9900
        assert plans[0]["features"]


@pytest.mark.asyncio
class TestQuoteRoutes:
    """Tests for GET /api/checkout/quote."""

    async def test_monthly_quote(self, client):
        response = await client.get("/api/checkout/quote", params={"plan": "basic"})

        assert response.status_code == 200
        assert response.json() == {
            "plan": "Basic",
            "employeeCount": 5,
            "billingCycle": "monthly",
            "amountCents": 49500,
            "amountFormatted": "$495.00",
        }

    async def test_annual_quote(self, client):
        response = await client.get(
            "/api/checkout/quote",
            params={"plan": "BASIC", "employees": 5, "billing_cycle": "annual"},
        )

        assert response.status_code == 200
        assert response.json()["amountCents"] == 534600

    async def test_seats_clamped(self, client):
        response = await client.get(
            "/api/checkout/quote", params={"plan": "premium", "employees": 0}
        )

        assert response.json()["employeeCount"] == 1
        assert response.json()["amountCents"] == 44900

    async def test_unknown_plan(self, client):
        response = await client.get("/api/checkout/quote", params={"plan": "gold"})

        assert response.status_code == 404
        assert response.json() == {"error": "Plan not found"}

    async def test_invalid_billing_cycle(self, client):
        response = await client.get(
            "/api/checkout/quote", params={"plan": "basic", "billing_cycle": "weekly"}
        )

        assert response.status_code == 400
