"""Checkout view model: what the form renders for the current state."""

from __future__ import annotations

from .catalog import Catalog, format_usd
from .models import CheckoutView, ProductLine
from .orchestrator import CheckoutOrchestrator
from .state import Cart, Contact


def render_checkout(
    cart: Cart,
    contact: Contact,
    catalog: Catalog,
    orchestrator: CheckoutOrchestrator,
) -> CheckoutView:
    """Recompute the derived total and submittability from scratch."""
    products = [
        ProductLine(
            id=entry.id,
            name=entry.name,
            unit_price=entry.unit_price,
            unit_price_display=format_usd(entry.unit_price),
            quantity=cart.quantity(entry.id),
            # Decrement is disabled at 0.
            can_decrement=cart.quantity(entry.id) > 0,
        )
        for entry in catalog.entries
    ]
    total = cart.total(catalog)

    return CheckoutView(
        products=products,
        contact=contact,
        total=total,
        total_display=format_usd(total),
        submittable=orchestrator.can_submit(cart, contact),
        purchasing=orchestrator.in_flight,
        status=orchestrator.status.value,
        message=orchestrator.message,
    )
