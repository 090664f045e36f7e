# schemas/expense.py

import datetime as dt
from decimal import Decimal
from typing import Literal

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from meromart.schemas.common import Money, RequiredText


# Responses use the camelCase keys the dashboard reads
_camel_output = ConfigDict(
    from_attributes=True,
    alias_generator=AliasGenerator(serialization_alias=to_camel),
)


class ExpenseSave(BaseModel):
    # Present when editing an existing expense
    id: int | None = None

    description: RequiredText
    category: RequiredText
    amount: Decimal = Field(..., ge=0)
    date: dt.date
    payment_method: RequiredText
    vendor: str | None = None
    notes: str | None = None
    is_recurring: bool = False
    recurring_frequency: Literal["monthly", "quarterly", "yearly"] | None = None


class ExpenseResponse(BaseModel):
    model_config = _camel_output

    id: int
    description: str
    category: str
    amount: Money
    date: dt.date
    payment_method: str
    vendor: str | None
    notes: str | None
    is_recurring: bool
    recurring_frequency: str | None
    created_by: str | None
    created_at: dt.datetime | None
    updated_by: str | None
    updated_at: dt.datetime | None


class ExpenseCategoryCreate(BaseModel):
    name: RequiredText
    description: str = ""
    color: str = "#6B7280"


class ExpenseCategoryResponse(BaseModel):
    model_config = _camel_output

    id: int | str
    name: str
    description: str | None
    color: str
    is_active: bool
