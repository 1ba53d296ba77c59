"""Checkout session state: the cart and the contact/address form.

Both models are frozen. Every mutator returns a NEW value instead of changing
the existing one, so a value that was handed to the order builder (or is
still referenced by an in-flight purchase) can never change underneath it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, NonNegativeInt, field_serializer

from .catalog import Catalog
from .errors import UnknownFieldError, UnknownProductError


def _read_only(quantities: dict[str, int]) -> Mapping[str, int]:
    return MappingProxyType(dict(quantities))


class Cart(BaseModel):
    """Quantities per product id. Quantities are never negative."""

    model_config = ConfigDict(frozen=True)

    # Read-only view: the frozen config alone would still allow item assignment.
    quantities: Annotated[dict[str, NonNegativeInt], AfterValidator(_read_only)] = Field(
        default_factory=dict, validate_default=True
    )

    @field_serializer("quantities")
    def _dump_quantities(self, quantities: Mapping[str, int]) -> dict[str, int]:
        return dict(quantities)

    @classmethod
    def empty(cls, catalog: Catalog) -> "Cart":
        """A cart with every catalog product at quantity 0."""
        return cls(quantities={product_id: 0 for product_id in catalog.ids()})

    def quantity(self, product_id: str) -> int:
        if product_id not in self.quantities:
            raise UnknownProductError(product_id)
        return self.quantities[product_id]

    def adjust(self, product_id: str, delta: int) -> "Cart":
        """Return a cart with `delta` added to the product's quantity.

        The result is clamped at 0: decrementing an empty line leaves it at 0.
        """
        current = self.quantity(product_id)
        quantities = dict(self.quantities)
        quantities[product_id] = max(0, current + delta)
        return Cart(quantities=quantities)

    def reset(self) -> "Cart":
        return Cart(quantities={product_id: 0 for product_id in self.quantities})

    @property
    def total_quantity(self) -> int:
        return sum(self.quantities.values())

    def total(self, catalog: Catalog) -> int:
        """Total price in minor units."""
        return sum(
            quantity * catalog[product_id].unit_price
            for product_id, quantity in self.quantities.items()
        )


class Address(BaseModel):
    """Shipping address. Field names match the backend order contract."""

    model_config = ConfigDict(frozen=True)

    line1: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""


ADDRESS_FIELDS = tuple(Address.model_fields)
CONTACT_FIELDS = ("name", "email", "coupon")


class Contact(BaseModel):
    """Buyer name, email, shipping address and an optional coupon code."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    address: Address = Field(default_factory=Address)
    coupon: str = ""

    def set_field(self, field: str, value: str) -> "Contact":
        if field not in CONTACT_FIELDS:
            raise UnknownFieldError(field)
        return self.model_copy(update={field: value})

    def set_address_field(self, field: str, value: str) -> "Contact":
        if field not in ADDRESS_FIELDS:
            raise UnknownFieldError(field)
        address = self.address.model_copy(update={field: value})
        return self.model_copy(update={"address": address})

    def is_complete(self, cart: Cart) -> bool:
        """True when the form can be submitted.

        Requires name, email and every address field to be non-empty, and at
        least one item in the cart. The coupon is optional.
        """
        if not (self.name and self.email):
            return False
        if not all(getattr(self.address, field) for field in ADDRESS_FIELDS):
            return False
        return cart.total_quantity > 0
