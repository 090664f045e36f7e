# schemas/store_settings.py

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from meromart.schemas.common import LooseId, Money


class StoreSettingsUpdate(BaseModel):
    """Partial update, only the keys sent are written."""

    store_name: str | None = None
    store_address: str | None = None
    store_phone: LooseId | None = None
    store_email: str | None = None
    store_logo: str | None = None
    pan_vat_number: LooseId | None = None

    tax_rate: Decimal | None = Field(default=None, ge=0, le=100)
    enable_vat: bool | None = None
    currency: str | None = None
    currency_symbol: str | None = None

    bill_prefix: str | None = Field(default=None, min_length=1, max_length=10)
    bill_start_number: int | None = Field(default=None, ge=0)
    bill_footer_message: str | None = None

    bank_name: str | None = None
    account_number: LooseId | None = None
    account_name: str | None = None

    low_stock_threshold: int | None = Field(default=None, ge=0)
    allow_negative_stock: bool | None = None
    default_user_role: str | None = None
    date_format: str | None = None
    timezone: str | None = None


class StoreSettingsResponse(BaseModel):
    id: int
    store_name: str
    store_address: str | None
    store_phone: str | None
    store_email: str | None
    store_logo: str | None
    pan_vat_number: str | None
    tax_rate: Money
    enable_vat: bool
    currency: str
    currency_symbol: str
    bill_prefix: str
    bill_start_number: int
    bill_footer_message: str | None
    bank_name: str | None
    account_number: str | None
    account_name: str | None
    low_stock_threshold: int
    allow_negative_stock: bool
    default_user_role: str
    date_format: str
    timezone: str

    model_config = ConfigDict(from_attributes=True)


class CategorySave(BaseModel):
    id: int | None = None
    name: str = Field(..., min_length=1)
    description: str = ""
    color: str = "#3B82F6"
    is_active: bool = True
