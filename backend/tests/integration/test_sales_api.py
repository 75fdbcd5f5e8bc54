from datetime import date

import pytest


@pytest.fixture
async def product(make_product):
    return await make_product("Black Oud", price=100)


async def record(client, headers, product_id, sale_date, total):
    return await client.post("/api/sales", json={
        "product_id": product_id,
        "quantity": 1,
        "total_amount": total,
        "sale_date": sale_date
    }, headers=headers)


class TestSalesEndpoints:
    """Tests for /api/sales reporting."""

    @pytest.mark.asyncio
    async def test_record_and_report(self, client, admin_headers, product):
        response = await record(client, admin_headers, product.id, "2025-02-10", 120.0)
        assert response.status_code == 201
        assert response.json()["product_id"] == product.id
        await record(client, admin_headers, product.id, "2025-02-11", 30.0)
        await record(client, admin_headers, product.id, "2025-04-01", 50.0)

        monthly = await client.get("/api/sales/monthly", params={"year": 2025}, headers=admin_headers)
        assert monthly.status_code == 200
        assert monthly.json() == [
            {"month": "2025-02", "total": 150.0},
            {"month": "2025-04", "total": 50.0},
        ]

        daily = await client.get(
            "/api/sales/range", params={"start": "2025-02-01", "end": "2025-02-28"}, headers=admin_headers
        )
        assert daily.json() == [
            {"date": "2025-02-10", "total": 120.0},
            {"date": "2025-02-11", "total": 30.0},
        ]

        chart = await client.get("/api/sales/chart", params={"year": 2025}, headers=admin_headers)
        data = chart.json()
        assert data["labels"][1] == "February"
        assert data["datasets"][0]["data"][1] == 150.0
        assert len(data["datasets"][0]["data"]) == 12

    @pytest.mark.asyncio
    async def test_monthly_defaults_to_current_year(self, client, admin_headers, product):
        today = date.today().isoformat()
        await record(client, admin_headers, product.id, today, 10.0)

        response = await client.get("/api/sales/monthly", headers=admin_headers)
        assert response.json() == [{"month": today[:7], "total": 10.0}]

    @pytest.mark.asyncio
    async def test_range_validation(self, client, admin_headers):
        response = await client.get(
            "/api/sales/range", params={"start": "2025-03-01", "end": "2025-01-01"}, headers=admin_headers
        )
        assert response.status_code == 400

        response = await client.get("/api/sales/range", params={"start": "2025-03-01"}, headers=admin_headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_record_unknown_product(self, client, admin_headers):
        response = await record(client, admin_headers, 999, "2025-01-01", 10.0)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_sales_are_admin_only(self, client, customer_headers):
        assert (await client.get("/api/sales/monthly", headers=customer_headers)).status_code == 403
        assert (await client.get("/api/sales/monthly")).status_code == 401
