# meromart/models/bills.py

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from meromart.database import Base


class Bill(Base):
    __tablename__ = "bills"

    bill_id = Column(Integer, primary_key=True, index=True)
    bill_number = Column(String(50), unique=True, nullable=False, index=True)

    customer_name = Column(String(255), nullable=False)
    customer_phone = Column(String(50), nullable=True)
    customer_address = Column(Text, nullable=True)

    subtotal = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(10, 2), nullable=False, default=0)
    discount_type = Column(String(20), nullable=False, default="amount")
    vat_rate = Column(Numeric(5, 2), nullable=False, default=0)
    vat_amount = Column(Numeric(10, 2), nullable=False, default=0)
    net_amount = Column(Numeric(10, 2), nullable=False)

    date_time = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False)
    payment_method = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)
    cashier_id = Column(String(255), nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    items = relationship(
        "BillItem",
        back_populates="bill",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BillItem.id",
    )

    __table_args__ = (
        Index("ix_bills_date_time", "date_time"),
        CheckConstraint(
            "status IN ('paid', 'pending', 'cancelled')",
            name="ck_bill_status_valid",
        ),
        CheckConstraint(
            "discount_type IN ('amount', 'percentage')",
            name="ck_bill_discount_type_valid",
        ),
    )
