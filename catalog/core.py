# catalog/core.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

# ---------------------------
# Pydantic schemas
# ---------------------------
class ProductFilters(BaseModel):
    """Recognised filters for the product listing. Anything else is dropped."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    category: Optional[str] = None
    search: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("category", "search", "is_active", mode="before")
    @classmethod
    def _empty_as_missing(cls, value):
        if value == "":
            return None
        return value


class ProductOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    stock: int
    category: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes even for timezone-aware columns
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_serializer("price")
    def _price_as_number(self, price: Decimal) -> float:
        # Numeric(10, 2) values convert to the float whose repr is the same decimal
        return float(price)

