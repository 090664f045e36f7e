# meromart/models/sales.py

from sqlalchemy import Column, Date, Index, Integer, Numeric, String

from meromart.database import Base


class Sale(Base):
    """Per-item sale record written alongside bill items, used for reporting."""

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)

    product_name = Column(String(255), nullable=False)
    invoice_number = Column(String(50), nullable=False, index=True)
    date_sold = Column(Date, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    category = Column(String(100), nullable=True)
    user = Column(String(255), nullable=True)

    __table_args__ = (
        Index("ix_sales_date_sold", "date_sold"),
    )
