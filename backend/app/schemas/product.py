from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0)
    category: str = Field("", max_length=100)
    description: str = ""
    review: int = Field(0, ge=0, le=10)
    image_path: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name must not be blank")
        return value


class ProductUpdate(BaseModel):
    """Partial update; fields left out (or null) keep their stored value."""

    name: str | None = Field(None, min_length=1, max_length=255)
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, max_length=100)
    description: str | None = None
    review: int | None = Field(None, ge=0, le=10)
    image_path: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("Name must not be blank")
        return value


class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    category: str
    image_path: str
    price: float
    review: int
    description: str
    is_featured: bool
    created_at: datetime | None = None


class ProductFilters(BaseModel):
    name: str | None = None
    category: str | None = None
    review: int | None = None
    min_price: float | None = None
    max_price: float | None = None


class ProductPage(BaseModel):
    products: list[ProductRead]
    page: int
    has_more: bool = Field(serialization_alias="hasMore")


class FeaturedRequest(BaseModel):
    is_featured: bool


class FeaturedResponse(BaseModel):
    message: str
    product: ProductRead


class MaxPriceResponse(BaseModel):
    max_price: float = Field(serialization_alias="maxPrice")


class ImageUploadResponse(BaseModel):
    image_path: str
