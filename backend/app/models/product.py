from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, DateTime, func, false

from app.config import Config
from app.db.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    category = Column(String(100), nullable=False, default="")
    image_path = Column(String(500), nullable=False, default=Config.DEFAULT_PRODUCT_IMAGE)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    review = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=False, default="")
    is_featured = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
