from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from meromart.schemas.common import LooseId, Money, RequiredText


class ProductSave(BaseModel):
    # Present when editing an existing product
    id: LooseId | None = None

    name: RequiredText
    category: RequiredText
    unit: RequiredText

    selling_price: Decimal = Field(
        ...,
        ge=0,
        lt=100_000_000,
        description="selling_price must be a non-negative number"
    )

    cost_price: Decimal = Field(
        ...,
        ge=0,
        lt=100_000_000,
        description="cost_price must be a non-negative number"
    )

    stock: int = Field(..., ge=0)
    min_stock: int = Field(..., ge=0)

    barcode: LooseId | None = None
    description: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    category: str
    unit: str
    selling_price: Money
    cost_price: Money
    stock: int
    min_stock: int
    barcode: str | None
    description: str | None
    created_at: datetime | None
    created_by: str | None
    updated_at: datetime | None
    updated_by: str | None

    model_config = ConfigDict(from_attributes=True)
