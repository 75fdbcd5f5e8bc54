import datetime

from pydantic import BaseModel, Field


class SaleCreate(BaseModel):
    product_id: int
    quantity: int = Field(..., ge=1)
    total_amount: float = Field(..., ge=0)
    sale_date: datetime.date


class SaleRead(BaseModel):
    id: int
    product_id: int | None
    quantity: int
    total_amount: float
    sale_date: datetime.date


class MonthlySales(BaseModel):
    month: str
    total: float


class DailySales(BaseModel):
    date: datetime.date
    total: float
