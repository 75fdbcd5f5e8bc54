"""Admin mutations on the catalog."""
import logging
import re
import unicodedata

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Config
from app.errors import ErrorType
from app.exceptions import AppException
from app.models import Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.services import image_service
from app.services.catalog_service import get_product

logger = logging.getLogger(__name__)

SLUG_CONFLICT = "Product with similar name already exists"


def slugify(name: str) -> str:
    """Derive a URL-safe slug, e.g. "Black Oud (50ml)" becomes "black-oud-50ml"."""
    ascii_name = (
        unicodedata.normalize("NFKD", name.lower())
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    return re.sub(r"[^a-z0-9]+", "-", ascii_name).strip("-")


def _slug_for(name: str) -> str:
    slug = slugify(name)
    if not slug:
        raise AppException(ErrorType.VALIDATION, "Name must contain letters or digits")
    return slug


async def _ensure_slug_available(session: AsyncSession, slug: str, exclude_id: int | None = None):
    stmt = select(Product.id).where(Product.slug == slug)
    if exclude_id is not None:
        stmt = stmt.where(Product.id != exclude_id)
    if await session.scalar(stmt.limit(1)) is not None:
        raise AppException(ErrorType.CONFLICT, SLUG_CONFLICT)


async def _commit(session: AsyncSession):
    try:
        await session.commit()
    except IntegrityError:
        # Unique slug index caught a concurrent insert
        await session.rollback()
        raise AppException(ErrorType.CONFLICT, SLUG_CONFLICT)


async def create_product(session: AsyncSession, data: ProductCreate) -> Product:
    slug = _slug_for(data.name)
    await _ensure_slug_available(session, slug)

    product = Product(
        name=data.name,
        slug=slug,
        category=data.category,
        price=data.price,
        review=data.review,
        description=data.description,
        image_path=data.image_path or Config.DEFAULT_PRODUCT_IMAGE,
        is_featured=False,
    )
    session.add(product)
    await _commit(session)
    await session.refresh(product)

    logger.info(f"Created product {product.id} ({product.slug})")
    return product


async def update_product(session: AsyncSession, product_id: int, data: ProductUpdate) -> Product:
    product = await get_product(session, product_id)
    changes = data.model_dump(exclude_none=True)

    if "name" in changes and changes["name"] != product.name:
        slug = _slug_for(changes["name"])
        await _ensure_slug_available(session, slug, exclude_id=product.id)
        changes["slug"] = slug

    replaced_image = None
    if "image_path" in changes and changes["image_path"] != product.image_path:
        replaced_image = product.image_path

    for field, value in changes.items():
        setattr(product, field, value)

    await _commit(session)
    await session.refresh(product)

    if replaced_image:
        image_service.remove_image(replaced_image)

    logger.info(f"Updated product {product.id}: {sorted(changes)}")
    return product


async def delete_product(session: AsyncSession, product_id: int):
    product = await get_product(session, product_id)
    image_path = product.image_path

    await session.delete(product)
    await session.commit()

    image_service.remove_image(image_path)
    logger.info(f"Deleted product {product_id}")


async def set_featured(session: AsyncSession, product_id: int, is_featured: bool) -> Product:
    """Feature or unfeature a product.

    Featuring is a single UPDATE that sets is_featured = (id == target) on every
    row. Because every row is written, a concurrent toggle waits on the row
    locks and re-evaluates each row after the other commits, leaving exactly
    one featured product (the last writer wins).
    """
    product = await get_product(session, product_id)

    if is_featured:
        stmt = update(Product).values(is_featured=(Product.id == product_id))
    else:
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(is_featured=False)
        )

    await session.execute(stmt.execution_options(synchronize_session=False))
    await session.commit()
    await session.refresh(product)

    logger.info(f"Product {product_id} featured={is_featured}")
    return product
