# schemas/sale.py

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from meromart.schemas.common import LooseId, Money, RequiredText


class SaleCreate(BaseModel):
    """Manually recorded sale, outside of the billing flow."""

    model_config = ConfigDict(populate_by_name=True)

    product_name: RequiredText = Field(alias="productName")
    invoice_number: RequiredText = Field(alias="invoiceNumber")
    date_sold: str = Field(alias="dateSold", pattern=r"^\d{4}-\d{2}-\d{2}$")
    amount: Decimal
    category: RequiredText
    user: LooseId = Field(min_length=1)


class SaleResponse(BaseModel):
    id: int
    product_name: str
    invoice_number: str
    date_sold: date
    amount: Money
    category: str | None
    user: str | None

    model_config = ConfigDict(from_attributes=True)
