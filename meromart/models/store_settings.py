# meromart/models/store_settings.py

from sqlalchemy import Boolean, Column, Integer, Numeric, String, Text

from meromart.database import Base


class StoreSettings(Base):
    __tablename__ = "store_settings"

    id = Column(Integer, primary_key=True, index=True)

    store_name = Column(String(255), nullable=False, default="MeroMart")
    store_address = Column(Text, nullable=True)
    store_phone = Column(String(50), nullable=True)
    store_email = Column(String(255), nullable=True)
    store_logo = Column(Text, nullable=True)
    pan_vat_number = Column(String(50), nullable=True)

    tax_rate = Column(Numeric(5, 2), nullable=False, default=13)
    enable_vat = Column(Boolean, nullable=False, default=True)
    currency = Column(String(10), nullable=False, default="NPR")
    currency_symbol = Column(String(10), nullable=False, default="Rs.")

    bill_prefix = Column(String(10), nullable=False, default="B-")
    bill_start_number = Column(Integer, nullable=False, default=1000)
    bill_footer_message = Column(Text, nullable=True)

    bank_name = Column(String(255), nullable=True)
    account_number = Column(String(100), nullable=True)
    account_name = Column(String(255), nullable=True)

    low_stock_threshold = Column(Integer, nullable=False, default=5)
    allow_negative_stock = Column(Boolean, nullable=False, default=False)
    default_user_role = Column(String(20), nullable=False, default="cashier")
    date_format = Column(String(20), nullable=False, default="YYYY-MM-DD")
    timezone = Column(String(50), nullable=False, default="Asia/Kathmandu")
