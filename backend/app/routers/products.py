from fastapi import APIRouter, Depends, File, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Config
from app.db.database import get_session
from app.dependencies import require_admin
from app.schemas.product import (
    ProductCreate, ProductUpdate, ProductRead, ProductFilters, ProductPage,
    FeaturedRequest, FeaturedResponse, MaxPriceResponse, ImageUploadResponse,
)
from app.schemas.user import MessageResponse
from app.services import catalog_service, product_service, image_service

router = APIRouter(prefix="/api/products", tags=["products"])


# Fixed paths are registered before the /{product_id} routes

@router.get("", response_model=ProductPage)
async def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(Config.DEFAULT_PAGE_SIZE, ge=1, le=Config.MAX_PAGE_SIZE),
    name: str | None = None,
    category: str | None = None,
    review: int | None = Query(None, ge=0, le=10),
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    session: AsyncSession = Depends(get_session)
):
    filters = ProductFilters(
        name=name, category=category, review=review,
        min_price=min_price, max_price=max_price
    )
    products, has_more = await catalog_service.list_products(session, filters, page, limit)
    return ProductPage(
        products=[ProductRead.model_validate(p) for p in products],
        page=page,
        has_more=has_more
    )


@router.get("/featured", response_model=ProductRead)
async def featured_product(session: AsyncSession = Depends(get_session)):
    return await catalog_service.get_featured(session)


@router.get("/max-price", response_model=MaxPriceResponse)
async def max_price(session: AsyncSession = Depends(get_session)):
    return MaxPriceResponse(max_price=await catalog_service.get_max_price(session))


@router.get("/slug/{slug}", response_model=ProductRead)
async def product_by_slug(slug: str, session: AsyncSession = Depends(get_session)):
    return await catalog_service.get_by_slug(session, slug)


@router.post("/upload-image", response_model=ImageUploadResponse, dependencies=[Depends(require_admin)])
async def upload_image(image: UploadFile = File(...)):
    return ImageUploadResponse(image_path=await image_service.save_image(image))


@router.post("", response_model=ProductRead, status_code=201, dependencies=[Depends(require_admin)])
async def create_product(payload: ProductCreate, session: AsyncSession = Depends(get_session)):
    return await product_service.create_product(session, payload)


@router.put("/{product_id}", response_model=ProductRead, dependencies=[Depends(require_admin)])
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    session: AsyncSession = Depends(get_session)
):
    return await product_service.update_product(session, product_id, payload)


@router.delete("/{product_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_product(product_id: int, session: AsyncSession = Depends(get_session)):
    await product_service.delete_product(session, product_id)
    return MessageResponse(message="Product deleted successfully")


@router.patch("/{product_id}/featured", response_model=FeaturedResponse, dependencies=[Depends(require_admin)])
async def toggle_featured(
    product_id: int,
    payload: FeaturedRequest,
    session: AsyncSession = Depends(get_session)
):
    product = await product_service.set_featured(session, product_id, payload.is_featured)
    return FeaturedResponse(
        message="Product set as featured" if payload.is_featured else "Product unfeatured",
        product=ProductRead.model_validate(product)
    )
