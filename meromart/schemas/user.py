from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from meromart.schemas.common import LooseId, RequiredText

UserRole = Literal["admin", "cashier"]


class _AccountFields(BaseModel):
    # Emails are stored lowercased, login looks them up the same way
    name: RequiredText
    email: EmailStr = Field(..., description="User's email address")
    role: UserRole

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class UserRegister(_AccountFields):
    password: str = Field(..., min_length=1, max_length=72, description="Plain password (will be hashed)")


class UserLogin(BaseModel):
    email: RequiredText
    password: RequiredText


class UserCreate(UserRegister):
    phone: LooseId | None = None
    address: str | None = None


class UserEdit(_AccountFields):
    id: int
    phone: LooseId | None = None
    address: str | None = None
    is_active: bool = True


class PasswordChange(BaseModel):
    old_password: RequiredText
    new_password: str = Field(..., min_length=1, max_length=72)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str
    employee_id: str | None
    store_id: str | None
    phone: str | None
    address: str | None
    created_at: datetime | None
    last_active: datetime | None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)
