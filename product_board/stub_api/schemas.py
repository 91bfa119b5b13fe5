"""Pydantic models for the stub products API wire format."""

from datetime import datetime

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    field_serializer,
    field_validator,
)

from product_board.utils.draft_validator import NAME_PATTERN


class ProductCreate(BaseModel):
    """Body of POST and PUT requests."""

    name: str = Field(..., description="Letters and spaces only")
    weight: PositiveFloat
    price: PositiveFloat

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Name is required.")
        v = v.strip()
        if not NAME_PATTERN.match(v):
            raise ValueError("Name must contain only letters.")
        return v


class ProductRead(BaseModel):
    """Serialized with Mongo-style keys (_id, createdAt)."""

    id: str = Field(..., alias="_id")
    name: str
    weight: float
    price: float
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """Convert datetime to ISO format string."""
        return value.isoformat()
