"""
Pydantic schemas for request/response validation in the Inventory service.

These schemas define the structure of data for API requests and responses.
"""
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, PlainSerializer, StrictInt


def _reject_non_numbers(value: Any) -> Any:
    # JSON strings and booleans are not prices
    if isinstance(value, (str, bool)):
        raise ValueError("price must be a number")
    return value


# Decimal inside the service, plain JSON number on the wire
Price = Annotated[
    Decimal,
    BeforeValidator(_reject_non_numbers),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ItemBase(BaseModel):
    """Base schema with common item attributes."""
    name: str
    quantity: StrictInt
    price: Price


class ItemCreate(ItemBase):
    """Schema for creating a new item. Any ``id`` in the body is ignored."""
    pass


class ItemUpdate(ItemBase):
    """Schema for replacing an existing item. Every field is required."""
    pass


class Item(BaseModel):
    """
    Schema for item responses, includes the database identifier.

    Fields are declared here rather than inherited so ``id`` serializes first.

    Attributes:
        id (int): Item's unique identifier
        name (str): Item name
        quantity (int): Units on hand
        price (Decimal): Unit price
    """
    id: int
    name: str
    quantity: int
    price: Price

    class Config:
        from_attributes = True


class HealthStatus(BaseModel):
    status: str


class DeleteResult(BaseModel):
    result: str


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str
