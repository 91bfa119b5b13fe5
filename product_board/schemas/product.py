"""Pydantic models describing Product payloads."""

from datetime import datetime, timezone

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    field_serializer,
    field_validator,
)


class ProductPayload(BaseModel):
    """Body sent on POST/PUT once a Draft has passed validation."""

    name: str = Field(..., min_length=1)
    weight: PositiveFloat
    price: PositiveFloat

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class Product(BaseModel):
    """Server-owned product record as parsed from API responses."""

    id: str = Field(..., validation_alias=AliasChoices("_id", "id"))
    name: str
    weight: PositiveFloat
    price: PositiveFloat
    created_at: datetime = Field(
        ..., validation_alias=AliasChoices("createdAt", "created_at")
    )

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Accept numeric ids from SQL-backed servers as opaque strings."""
        if isinstance(v, bool):
            raise ValueError("id must be a string or integer")
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("created_at", mode="after")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """Convert datetime to ISO format string."""
        return value.isoformat()


class Draft(BaseModel):
    """Form fields as typed by the user, before validation."""

    name: str = ""
    weight: str = ""
    price: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_product(cls, product: Product) -> "Draft":
        return cls(
            name=product.name,
            weight=format_number(product.weight),
            price=format_number(product.price),
        )

    def is_empty(self) -> bool:
        return not (self.name or self.weight or self.price)


def format_number(value: float) -> str:
    """Render 2.0 as "2" and 9.99 as "9.99" so edits round-trip cleanly."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
