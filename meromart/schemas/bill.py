# schemas/bill.py

from datetime import datetime
from decimal import Decimal
from typing import List, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from meromart.schemas.common import LooseId, Money, RequiredText


BillStatus = Literal["paid", "pending", "cancelled"]
DiscountType = Literal["amount", "percentage"]


class BillItemCreate(BaseModel):
    product_id: LooseId | None = None
    product_name: RequiredText
    quantity: int = Field(..., gt=0)
    price: Decimal = Field(..., ge=0)
    # Falls back to quantity * price when omitted
    total_price: Decimal | None = Field(default=None, ge=0)

    @property
    def line_total(self) -> Decimal:
        if self.total_price is not None:
            return self.total_price
        return self.price * self.quantity


class BillCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bill_number: LooseId | None = None

    customer_name: RequiredText
    customer_phone: LooseId | None = None
    customer_address: str | None = None

    subtotal: Decimal = Field(..., ge=0)
    discount: Decimal = Field(default=Decimal("0"), ge=0)
    discount_type: DiscountType = "amount"
    vat_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        validation_alias=AliasChoices("vat_rate", "tax_rate"),
    )
    vat_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        validation_alias=AliasChoices("vat_amount", "tax_amount"),
    )
    net_amount: Decimal = Field(..., ge=0)

    date_time: datetime
    status: BillStatus
    payment_method: str | None = None
    notes: str | None = None
    cashier_id: LooseId | None = Field(
        default=None,
        validation_alias=AliasChoices("cashier_id", "created_by"),
    )

    items: List[BillItemCreate] = []


class BillUpdate(BillCreate):
    bill_id: int


class InvoiceUpdate(BillCreate):
    id: int


class BillCreatedResponse(BaseModel):
    message: str
    bill_id: int
    bill_number: str


class BillItemResponse(BaseModel):
    id: int
    bill_id: int
    product_id: str | None
    product_name: str
    quantity: int
    price: Money
    total_price: Money

    model_config = ConfigDict(from_attributes=True)


class _BillFields(BaseModel):
    bill_number: str
    customer_name: str
    customer_phone: str | None
    customer_address: str | None
    subtotal: Money
    discount: Money
    discount_type: str
    vat_rate: Money
    vat_amount: Money
    net_amount: Money
    date_time: datetime
    status: str
    payment_method: str | None
    notes: str | None
    cashier_id: str | None
    created_at: datetime | None
    items: List[BillItemResponse]

    model_config = ConfigDict(from_attributes=True)


class BillResponse(_BillFields):
    bill_id: int


class InvoiceResponse(_BillFields):
    id: int = Field(validation_alias=AliasChoices("id", "bill_id"))
