from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_session
from app.dependencies import require_admin
from app.schemas.chart import ChartData
from app.schemas.sales import SaleCreate, SaleRead, MonthlySales, DailySales
from app.services import sales_service

router = APIRouter(prefix="/api/sales", tags=["sales"], dependencies=[Depends(require_admin)])


def _current_year() -> int:
    return date.today().year


@router.get("/monthly", response_model=list[MonthlySales])
async def monthly(
    year: int | None = Query(None, ge=1970, le=9999),
    session: AsyncSession = Depends(get_session)
):
    return await sales_service.monthly_sales(session, year or _current_year())


@router.get("/range", response_model=list[DailySales])
async def date_range(
    start: date,
    end: date,
    session: AsyncSession = Depends(get_session)
):
    return await sales_service.range_sales(session, start, end)


@router.get("/chart", response_model=ChartData)
async def chart(
    year: int | None = Query(None, ge=1970, le=9999),
    session: AsyncSession = Depends(get_session)
):
    return await sales_service.monthly_chart(session, year or _current_year())


@router.post("", response_model=SaleRead, status_code=201)
async def record(payload: SaleCreate, session: AsyncSession = Depends(get_session)):
    sale = await sales_service.record_sale(session, payload)
    return SaleRead(
        id=sale.id,
        product_id=sale.product_id,
        quantity=sale.quantity,
        total_amount=sale.total_amount,
        sale_date=sale.sale_date
    )
