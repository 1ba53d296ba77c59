"""Checkout error taxonomy.

Two kinds of errors live here:

1) Purchase failures (TokenizationError, SubmissionError)
   Expected at runtime. The orchestrator catches them, logs them and moves the
   submission into the FAILED state. The user can edit and resubmit.

2) Programming errors (ValidationGuardSkipped, UnknownProductError,
   UnknownFieldError)
   The caller asked for something the checkout does not allow. These are
   raised to the caller and mapped to 4xx responses at the HTTP boundary.
"""

from __future__ import annotations


class CheckoutError(Exception):
    """Base class for every checkout error."""


class TokenizationError(CheckoutError):
    """The tokenization collaborator rejected the card or returned no token."""


class SubmissionError(CheckoutError):
    """The backend order endpoint failed (network error or non-2xx status)."""


class ValidationGuardSkipped(CheckoutError):
    """submit() was called while the form is incomplete or a purchase is in flight."""


class UnknownProductError(CheckoutError, KeyError):
    """A product id that is not in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(product_id)
        self.product_id = product_id

    def __str__(self) -> str:
        return f"Unknown product: {self.product_id!r}"


class UnknownFieldError(CheckoutError, KeyError):
    """A contact or address field name that the form does not have."""

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Unknown field: {self.field!r}"
