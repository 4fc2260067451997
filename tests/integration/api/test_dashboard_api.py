"""Integration tests for Dashboard API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


class TestDashboardAPI:

    @pytest.mark.asyncio
    async def test_empty_dashboard(self, client: AsyncClient):
        response = await client.get("/api/dashboard/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["total_customers"] == 0
        assert data["today_invoices"] == 0
        assert Decimal(data["total_revenue"]) == Decimal("0")
        assert Decimal(data["gold_processed"]) == Decimal("0")

    @pytest.mark.asyncio
    async def test_stats_reflect_paid_invoices_and_calculations(self, client: AsyncClient):
        customer = (
            await client.post("/api/customers", json={"customer_id": "CU001", "name": "Rajesh Kumar", "phone": "1"})
        ).json()
        rate_item = {"weight": "5", "purity": "92", "rate": "525"}
        await client.post(
            "/api/invoices",
            json={"customer_id": customer["id"], "items": [rate_item], "making_charges": "500", "status": "paid"},
        )
        await client.post("/api/invoices", json={"customer_id": customer["id"], "items": [rate_item]})
        await client.post("/api/calculations", json={"weight": "10", "purity": "91.6"})
        await client.post("/api/calculations", json={"weight": "5.5", "purity": "75"})

        data = (await client.get("/api/dashboard/stats")).json()

        assert data["total_customers"] == 1
        assert data["today_invoices"] == 1
        assert Decimal(data["total_revenue"]) == Decimal("3002.45")
        assert Decimal(data["gold_processed"]) == Decimal("15.500")
