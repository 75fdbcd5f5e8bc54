from sqlalchemy import Column, Integer, Numeric, Date, ForeignKey, DateTime, func

from app.db.database import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    # Sales history outlives the product it was recorded against
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    quantity = Column(Integer, nullable=False)
    total_amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    sale_date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
