"""Pydantic models for shop-server.

Two groups of models live here:

- The order contract sent to the backend (`OrderPayload`, `OrderRequest`).
  This must match the schema expected by the backend order endpoint.
- Request/response bodies of the checkout HTTP API.

We validate input at the HTTP boundary so that bad requests fail fast with a
clear error before they touch checkout state.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .state import Address, Contact


class OrderItem(BaseModel):
    """One order line, referencing the backend SKU."""

    model_config = ConfigDict(frozen=True)

    type: Literal["sku"] = "sku"
    parent: int
    quantity: int = Field(ge=1)


class Shipping(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: Address


class OrderPayload(BaseModel):
    """The order the backend creates and charges.

    Notes:
        - `currency` is always "usd"; there is no multi-currency support.
        - `coupon` is omitted from the JSON body entirely when there is none.
    """

    model_config = ConfigDict(frozen=True)

    currency: Literal["usd"] = "usd"
    items: tuple[OrderItem, ...]
    email: str
    shipping: Shipping
    coupon: Optional[str] = None


class OrderRequest(BaseModel):
    """Request body for `POST /api/shop/order`."""

    order: OrderPayload
    source: str

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# --- Checkout API ------------------------------------------------------------


class AdjustRequest(BaseModel):
    """Request body for `POST /cart/{product_id}/adjust`."""

    delta: int


class FieldUpdate(BaseModel):
    """Request body for `PUT /contact` and `PUT /contact/address`."""

    field: str
    value: str


class PurchaseRequest(BaseModel):
    """Request body for `POST /purchase`.

    `card` is the state captured by the card-input widget. It is passed to the
    tokenizer as-is and never inspected or logged by this service.
    """

    card: dict[str, Any] = Field(default_factory=dict)


class ProductLine(BaseModel):
    id: str
    name: str
    unit_price: int
    unit_price_display: str
    quantity: int
    can_decrement: bool


class CheckoutView(BaseModel):
    """Everything the checkout form needs to render."""

    products: list[ProductLine]
    contact: Contact
    total: int
    total_display: str
    submittable: bool
    purchasing: bool
    status: str
    message: Optional[str] = None
