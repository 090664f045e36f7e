# meromart/models/products.py

from sqlalchemy import CheckConstraint, Column, Integer, String, Numeric, DateTime, Text
from sqlalchemy.sql import func

from meromart.database import Base


class Product(Base):
    __tablename__ = "products"

    # 32 char hex, generated by the API
    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    unit = Column(String(50), nullable=False)

    selling_price = Column(Numeric(10, 2), nullable=False)
    cost_price = Column(Numeric(10, 2), nullable=False)

    stock = Column(Integer, nullable=False, default=0)
    min_stock = Column(Integer, nullable=False, default=0)

    barcode = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    created_by = Column(String(255), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)
    updated_by = Column(String(255), nullable=True)

    __table_args__ = (
        CheckConstraint("cost_price >= 0", name="ck_cost_price_non_negative"),
        CheckConstraint("selling_price >= 0", name="ck_selling_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_stock_non_negative"),
        CheckConstraint("min_stock >= 0", name="ck_min_stock_non_negative"),
    )
