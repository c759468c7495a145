"""Request and response bodies for the HTTP API.

Responses are built from application DTOs via ``from_attributes``; money
is rendered as a decimal string with two places.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class _FromDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# --- Requests -----------------------------------------------------------------


class AddCartItemRequest(BaseModel):
    product_id: str = Field(min_length=1)
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    quantity: int


class ShippingRequest(BaseModel):
    # blanks are reported together by the domain, not field by field here
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


class ProductCreateRequest(BaseModel):
    title: str
    price: Decimal
    category: str
    description: str = ""
    image_url: str | None = None
    stock: int = Field(default=0, ge=0)


class ProductUpdateRequest(BaseModel):
    title: str | None = None
    price: Decimal | None = None
    category: str | None = None
    description: str | None = None
    image_url: str | None = None


class StockRequest(BaseModel):
    quantity: int = Field(ge=0)


# --- Responses ----------------------------------------------------------------


class ProductResponse(_FromDTO):
    id: str
    title: str
    description: str
    price: Decimal
    category: str
    image_url: str | None
    stock: int
    created_at: datetime


class StockLevelResponse(_FromDTO):
    product_id: str
    title: str
    available: int


class CartLineResponse(_FromDTO):
    product_id: str
    quantity: int


class CartEntryResponse(_FromDTO):
    product_id: str
    title: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    image_url: str | None
    stock: int


class CartResponse(_FromDTO):
    customer_id: str
    items: list[CartEntryResponse]
    subtotal: Decimal


class RemovedResponse(BaseModel):
    removed: bool


class ClearedResponse(BaseModel):
    removed: int


class OrderLineResponse(_FromDTO):
    product_id: str
    product_title: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class ShippingResponse(_FromDTO):
    first_name: str
    last_name: str
    email: str
    address: str
    city: str
    state: str
    zip_code: str


class OrderResponse(_FromDTO):
    id: int
    customer_id: str
    shipping: ShippingResponse
    lines: list[OrderLineResponse]
    total: Decimal
    created_at: datetime
