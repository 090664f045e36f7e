# meromart/models/users.py

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from meromart.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column("password", String(255), nullable=False)

    role = Column(String(20), nullable=False, default="cashier")

    # Zero padded, e.g. "000042"
    employee_id = Column(String(6), unique=True, nullable=True)
    store_id = Column(String(50), nullable=True)

    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    last_active = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    @property
    def is_admin(self):
        return self.role == "admin"
