"""Read side of the catalog: filtered listing and single-product lookups."""
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Config
from app.errors import ErrorType
from app.exceptions import AppException
from app.models import Product
from app.schemas.product import ProductFilters


def build_conditions(filters: ProductFilters) -> list:
    """Translate listing filters into SQL conditions; unset filters are skipped."""
    conditions = []

    if filters.name:
        conditions.append(Product.name.icontains(filters.name, autoescape=True))
    if filters.category:
        conditions.append(Product.category == filters.category)
    if filters.review is not None:
        conditions.append(Product.review == filters.review)
    if filters.min_price is not None:
        conditions.append(Product.price >= filters.min_price)
    if filters.max_price is not None:
        conditions.append(Product.price <= filters.max_price)

    return conditions


async def list_products(
    session: AsyncSession,
    filters: ProductFilters,
    page: int = 1,
    limit: int = Config.DEFAULT_PAGE_SIZE
) -> tuple[list[Product], bool]:
    """Newest-first page of products matching every supplied filter.

    Returns:
        (products, has_more) where has_more is True iff the page is full
    """
    stmt = (
        select(Product)
        .where(*build_conditions(filters))
        .order_by(Product.created_at.desc(), Product.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    products = list((await session.scalars(stmt)).all())
    return products, len(products) == limit


async def get_product(session: AsyncSession, product_id: int) -> Product:
    product = await session.get(Product, product_id)
    if product is None:
        raise AppException(ErrorType.NOT_FOUND, "Product not found")
    return product


async def get_by_slug(session: AsyncSession, slug: str) -> Product:
    product = await session.scalar(select(Product).where(Product.slug == slug))
    if product is None:
        raise AppException(ErrorType.NOT_FOUND, "Product not found")
    return product


async def get_featured(session: AsyncSession) -> Product:
    product = await session.scalar(
        select(Product).where(Product.is_featured.is_(True)).limit(1)
    )
    if product is None:
        raise AppException(ErrorType.NOT_FOUND, "No featured product set")
    return product


async def get_max_price(session: AsyncSession) -> float:
    max_price = await session.scalar(select(func.max(Product.price)))
    return float(max_price) if max_price is not None else Config.DEFAULT_MAX_PRICE
