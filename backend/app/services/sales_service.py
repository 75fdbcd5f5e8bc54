"""Sales reporting for the admin dashboard."""
import calendar
import logging
from datetime import date

from sqlalchemy import extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ErrorType
from app.exceptions import AppException
from app.models import Sale
from app.schemas.chart import ChartData
from app.schemas.sales import SaleCreate, MonthlySales, DailySales
from app.services.catalog_service import get_product
from app.services.chart_service import format_chart_data

logger = logging.getLogger(__name__)


async def record_sale(session: AsyncSession, data: SaleCreate) -> Sale:
    await get_product(session, data.product_id)

    sale = Sale(**data.model_dump())
    session.add(sale)
    await session.commit()
    await session.refresh(sale)

    logger.info(f"Recorded sale {sale.id} for product {sale.product_id}")
    return sale


async def monthly_sales(session: AsyncSession, year: int) -> list[MonthlySales]:
    """Total sales per month of `year`, only months that had sales."""
    month = extract("month", Sale.sale_date)
    stmt = (
        select(month.label("month"), func.sum(Sale.total_amount).label("total"))
        .where(Sale.sale_date >= date(year, 1, 1), Sale.sale_date <= date(year, 12, 31))
        .group_by(month)
        .order_by(month)
    )
    rows = (await session.execute(stmt)).all()
    return [
        MonthlySales(month=f"{year}-{int(row.month):02d}", total=round(float(row.total), 2))
        for row in rows
    ]


async def range_sales(session: AsyncSession, start: date, end: date) -> list[DailySales]:
    """Total sales per day between start and end, inclusive."""
    if start > end:
        raise AppException(ErrorType.VALIDATION, "Start date must not be after end date")

    stmt = (
        select(Sale.sale_date, func.sum(Sale.total_amount).label("total"))
        .where(Sale.sale_date >= start, Sale.sale_date <= end)
        .group_by(Sale.sale_date)
        .order_by(Sale.sale_date)
    )
    rows = (await session.execute(stmt)).all()
    return [
        DailySales(date=row.sale_date, total=round(float(row.total), 2))
        for row in rows
    ]


async def monthly_chart(session: AsyncSession, year: int) -> ChartData:
    """Chart.js series for a year with every month present (missing months are 0)."""
    totals = {m.month: m.total for m in await monthly_sales(session, year)}
    rows = [
        {"month": calendar.month_name[i], "sales": totals.get(f"{year}-{i:02d}", 0)}
        for i in range(1, 13)
    ]
    return format_chart_data(rows, label_key="month", series={"sales": "Sales"})
