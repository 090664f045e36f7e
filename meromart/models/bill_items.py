# meromart/models/bill_items.py

from sqlalchemy import CheckConstraint, Column, Integer, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from meromart.database import Base


class BillItem(Base):
    __tablename__ = "bill_items"

    id = Column(Integer, primary_key=True, index=True)

    bill_id = Column(
        Integer,
        ForeignKey("bills.bill_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Loose reference, the item keeps its snapshot if the product goes away
    product_id = Column(String(32), nullable=True, index=True)

    product_name = Column(String(255), nullable=False)

    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)

    bill = relationship("Bill", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_bill_item_quantity_positive"),
    )
