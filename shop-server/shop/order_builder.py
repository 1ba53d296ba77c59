"""Build the backend order payload from checkout state."""

from __future__ import annotations

from .catalog import Catalog
from .models import OrderItem, OrderPayload, Shipping
from .state import Cart, Contact

CURRENCY = "usd"


def build_order(cart: Cart, contact: Contact, catalog: Catalog) -> OrderPayload:
    """Derive the order payload for one submission attempt.

    Pure: the same cart, contact and catalog always produce the same payload.
    Lines with quantity 0 are left out. The coupon is attached only when the
    buyer entered one.

    Raises:
        UnknownProductError: the cart references a product the catalog lacks.
    """
    items = tuple(
        OrderItem(parent=catalog[product_id].external_sku, quantity=quantity)
        for product_id, quantity in cart.quantities.items()
        if quantity > 0
    )

    return OrderPayload(
        currency=CURRENCY,
        items=items,
        email=contact.email,
        shipping=Shipping(name=contact.name, address=contact.address),
        coupon=contact.coupon or None,
    )
