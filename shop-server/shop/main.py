"""shop-server FastAPI application.

Responsibilities:
- Hold the checkout session: cart, contact/address form, submission state.
- Expose the form controls (cart +/-, reset, contact fields, purchase).
- Run the purchase: tokenize the card, then post the order to the backend.

Important notes:
- This service does NOT create or charge orders itself.
  The backend order endpoint owns charging; we only hand it a token.
- The tokenizer comes from `get_tokenizer()`, which defaults to FakeTokenizer.
  The fake issues a token for any card state, even an empty one. No real
  provider adapter ships here; a deployment must call `set_tokenizer()` with
  one before startup.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from .api_client import OrderApiClient
from .catalog import DEFAULT_CATALOG, Catalog
from .errors import UnknownFieldError, UnknownProductError, ValidationGuardSkipped
from .models import AdjustRequest, CheckoutView, FieldUpdate, PurchaseRequest
from .orchestrator import CheckoutOrchestrator
from .state import Cart, Contact
from .tokenizer import get_tokenizer
from .view import render_checkout

# Session state, set on startup.
# Cart and contact values are immutable; handlers replace them, never mutate them.
catalog: Catalog = DEFAULT_CATALOG
cart: Cart = Cart.empty(DEFAULT_CATALOG)
contact: Contact = Contact()
orchestrator: CheckoutOrchestrator | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: start a fresh checkout session and wire its collaborators."""
    global cart, contact, orchestrator
    cart = Cart.empty(catalog)
    contact = Contact()
    orchestrator = CheckoutOrchestrator(get_tokenizer(), OrderApiClient(), catalog)
    yield


app = FastAPI(title="Shop Checkout Server", lifespan=lifespan)


def _view() -> CheckoutView:
    return render_checkout(cart, contact, catalog, orchestrator)


@app.get("/health")
async def health() -> dict[str, str]:
    """Basic liveness endpoint."""
    return {"status": "ok"}


@app.get("/checkout", response_model=CheckoutView)
async def get_checkout() -> CheckoutView:
    """Return everything the checkout form renders: lines, total, submittability."""
    return _view()


@app.post("/cart/{product_id}/adjust", response_model=CheckoutView)
async def adjust_cart(product_id: str, req: AdjustRequest) -> CheckoutView:
    """Add `delta` units of a product (negative to remove). Never goes below 0."""
    global cart
    try:
        cart = cart.adjust(product_id, req.delta)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _view()


@app.post("/cart/reset", response_model=CheckoutView)
async def reset_cart() -> CheckoutView:
    global cart
    cart = cart.reset()
    return _view()


@app.put("/contact", response_model=CheckoutView)
async def update_contact(req: FieldUpdate) -> CheckoutView:
    """Set name, email or coupon."""
    global contact
    try:
        contact = contact.set_field(req.field, req.value)
    except UnknownFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _view()


@app.put("/contact/address", response_model=CheckoutView)
async def update_address(req: FieldUpdate) -> CheckoutView:
    """Set one of line1, city, state, country, postal_code."""
    global contact
    try:
        contact = contact.set_address_field(req.field, req.value)
    except UnknownFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _view()


@app.post("/purchase", response_model=CheckoutView)
async def purchase(req: PurchaseRequest) -> CheckoutView:
    """Run one purchase attempt and return the form state afterwards.

    The cart and contact are captured when the request arrives; edits made
    while the purchase is in flight do not change this attempt's order.

    A failed purchase is still a 200: the outcome is in `status`/`message`.
    409 means the attempt was refused (form incomplete, or already purchasing).
    """
    try:
        await orchestrator.submit(cart, contact, req.card)
    except ValidationGuardSkipped as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _view()
