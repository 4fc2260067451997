"""Integration tests for Gold Calculation API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


class TestCalculationsAPI:

    @pytest.mark.asyncio
    async def test_create_calculation(self, client: AsyncClient):
        response = await client.post(
            "/api/calculations",
            json={"weight": "10", "purity": "91.6", "gold_rate": "6000", "description": "22K chain"},
        )

        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["pure_gold_weight"]) == Decimal("9.160")
        assert Decimal(data["total_value"]) == Decimal("54960.00")

    @pytest.mark.asyncio
    async def test_purity_above_hundred(self, client: AsyncClient):
        response = await client.post("/api/calculations", json={"weight": "10", "purity": "120"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "purity" in error["details"]["fields"]

    @pytest.mark.asyncio
    async def test_non_numeric_weight(self, client: AsyncClient):
        response = await client.post("/api/calculations", json={"weight": "heavy", "purity": "91.6"})

        assert response.status_code == 400
        assert "weight" in response.json()["error"]["details"]["fields"]

    @pytest.mark.asyncio
    async def test_unknown_customer(self, client: AsyncClient):
        response = await client.post(
            "/api/calculations",
            json={"customer_id": "missing", "weight": "10", "purity": "91.6"},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CUSTOMER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_filtered_by_customer(self, client: AsyncClient):
        customer = (
            await client.post("/api/customers", json={"customer_id": "CU001", "name": "Rajesh Kumar", "phone": "1"})
        ).json()
        await client.post("/api/calculations", json={"weight": "10", "purity": "91.6"})
        await client.post(
            "/api/calculations",
            json={"customer_id": customer["id"], "weight": "5", "purity": "75"},
        )

        everything = await client.get("/api/calculations")
        linked = await client.get("/api/calculations", params={"customerId": customer["id"]})

        assert len(everything.json()) == 2
        assert len(linked.json()) == 1
        assert Decimal(linked.json()[0]["pure_gold_weight"]) == Decimal("3.750")

    @pytest.mark.asyncio
    async def test_read_back_matches_stored_inputs(self, client: AsyncClient, db_session):
        response = await client.post(
            "/api/calculations",
            json={"weight": "100", "purity": "91.666", "gold_rate": "1000"},
        )
        assert response.status_code == 201
        db_session.expire_all()

        stored = (await client.get("/api/calculations")).json()[0]

        weight, purity = Decimal(stored["weight"]), Decimal(stored["purity"])
        assert purity == Decimal("91.67")
        assert Decimal(stored["pure_gold_weight"]) == (weight * purity / 100).quantize(Decimal("0.001"))
        assert Decimal(stored["total_value"]) == Decimal("91670.00")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"weight": "100000000", "purity": "91.6"}, "weight"),
            ({"weight": "10", "purity": "91.6", "gold_rate": "1e12"}, "gold_rate"),
            ({"weight": "9999999", "purity": "100", "gold_rate": "9999999999"}, "total_value"),
        ],
    )
    async def test_values_too_large_to_store(self, client: AsyncClient, payload, field):
        response = await client.post("/api/calculations", json=payload)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert field in error["details"]["fields"]
