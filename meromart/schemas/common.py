# schemas/common.py

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, PlainSerializer
from pydantic_core import PydanticCustomError


def _as_text(value: Any):
    # Frontends send numeric ids as numbers or strings, store them as text
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _required_text(value: Any):
    if value is None or (isinstance(value, str) and value.strip() == ""):
        raise PydanticCustomError("missing", "Field required")
    return value


# Stored as Decimal, rendered as a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

LooseId = Annotated[str, BeforeValidator(_as_text)]

RequiredText = Annotated[str, BeforeValidator(_required_text)]


class MessageResponse(BaseModel):
    message: str
