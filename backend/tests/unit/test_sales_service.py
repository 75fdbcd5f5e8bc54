from datetime import date

import pytest
from sqlalchemy import select

from app.errors import ErrorType
from app.exceptions import AppException
from app.schemas.sales import SaleCreate
from app.models import Sale
from app.services import product_service, sales_service


@pytest.fixture
async def sales(session, make_product):
    product = await make_product("Black Oud", price=100)
    rows = [
        (date(2025, 1, 5), 100.0),
        (date(2025, 1, 5), 50.5),
        (date(2025, 1, 20), 25.0),
        (date(2025, 3, 1), 200.0),
        (date(2024, 12, 31), 999.0),
    ]
    for sale_date, total in rows:
        await sales_service.record_sale(session, SaleCreate(
            product_id=product.id, quantity=1, total_amount=total, sale_date=sale_date
        ))
    return product


class TestRecordSale:
    """Tests for recording sales."""

    @pytest.mark.asyncio
    async def test_unknown_product(self, session):
        with pytest.raises(AppException) as exc_info:
            await sales_service.record_sale(session, SaleCreate(
                product_id=42, quantity=1, total_amount=10, sale_date=date(2025, 1, 1)
            ))
        assert exc_info.value.error_type == ErrorType.NOT_FOUND

    @pytest.mark.asyncio
    async def test_sale_kept_when_product_deleted(self, session, sales):
        await product_service.delete_product(session, sales.id)

        product_ids = (await session.scalars(select(Sale.product_id))).all()
        assert len(product_ids) == 5
        assert set(product_ids) == {None}


class TestReports:
    """Tests for monthly and date-range sales aggregation."""

    @pytest.mark.asyncio
    async def test_monthly(self, session, sales):
        result = await sales_service.monthly_sales(session, 2025)
        assert [(m.month, m.total) for m in result] == [("2025-01", 175.5), ("2025-03", 200.0)]

    @pytest.mark.asyncio
    async def test_monthly_empty_year(self, session, sales):
        assert await sales_service.monthly_sales(session, 2030) == []

    @pytest.mark.asyncio
    async def test_range_inclusive(self, session, sales):
        result = await sales_service.range_sales(session, date(2024, 12, 31), date(2025, 1, 5))
        assert [(d.date, d.total) for d in result] == [
            (date(2024, 12, 31), 999.0),
            (date(2025, 1, 5), 150.5),
        ]

    @pytest.mark.asyncio
    async def test_range_start_after_end(self, session):
        with pytest.raises(AppException) as exc_info:
            await sales_service.range_sales(session, date(2025, 2, 1), date(2025, 1, 1))
        assert exc_info.value.error_type == ErrorType.VALIDATION

    @pytest.mark.asyncio
    async def test_monthly_chart_zero_fills(self, session, sales):
        chart = await sales_service.monthly_chart(session, 2025)

        assert len(chart.labels) == 12
        assert chart.labels[0] == "January"
        assert chart.labels[11] == "December"
        assert chart.datasets[0]["label"] == "Sales"
        data = chart.datasets[0]["data"]
        assert data[0] == 175.5
        assert data[1] == 0
        assert data[2] == 200.0
        assert sum(data) == 375.5
