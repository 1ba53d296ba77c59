"""Purchase submission orchestrator.

High-level flow of one submit:
    guard -> IN_FLIGHT -> tokenize card -> build order -> POST order
          -> SUCCEEDED | FAILED

Important properties:

1) Ordering
   The order is never posted before a successful token. A rejected card ends
   the attempt without any network call to the backend.

2) One attempt per submit
   No retries, no idempotency key, no cancellation. A failed attempt leaves
   the form as it was so the user can fix it and submit again.

3) No duplicate submissions
   The status is set to IN_FLIGHT before the first `await`. A second submit()
   that arrives while the first is suspended sees IN_FLIGHT and is rejected.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .api_client import OrderApiClient
from .catalog import Catalog
from .errors import SubmissionError, TokenizationError, ValidationGuardSkipped
from .order_builder import build_order
from .state import Cart, Contact
from .tokenizer import CardTokenizer

SUCCESS_MESSAGE = "Thank you for your purchase!"
FAILURE_MESSAGE = "Your purchase could not be completed."


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class CheckoutOrchestrator:
    """Owns the submission state of a checkout session.

    Cart and contact are not held here: every submit() receives the current
    values, so the payload is always built from what the user sees.
    """

    def __init__(
        self,
        tokenizer: CardTokenizer,
        order_client: OrderApiClient,
        catalog: Catalog,
    ) -> None:
        self.tokenizer = tokenizer
        self.order_client = order_client
        self.catalog = catalog
        self.status = SubmissionStatus.IDLE
        self.last_error: str | None = None

    @property
    def in_flight(self) -> bool:
        return self.status is SubmissionStatus.IN_FLIGHT

    @property
    def message(self) -> str | None:
        """User-facing text for the current status."""
        if self.status is SubmissionStatus.SUCCEEDED:
            return SUCCESS_MESSAGE
        if self.status is SubmissionStatus.FAILED:
            return FAILURE_MESSAGE
        return None

    def can_submit(self, cart: Cart, contact: Contact) -> bool:
        return not self.in_flight and contact.is_complete(cart)

    async def submit(self, cart: Cart, contact: Contact, card: dict[str, Any]) -> SubmissionStatus:
        """Run one purchase attempt and return the resulting status.

        Raises:
            ValidationGuardSkipped: a purchase is already in flight, or the
                form is incomplete. Nothing is sent in either case.
        """
        if self.in_flight:
            raise ValidationGuardSkipped("A purchase is already in progress")
        if not contact.is_complete(cart):
            raise ValidationGuardSkipped("Checkout form is incomplete")

        self.status = SubmissionStatus.IN_FLIGHT
        self.last_error = None

        try:
            token_id = await self._request_token(contact.name, card)
            order = build_order(cart, contact, self.catalog)
            await self.order_client.submit_order(order, token_id)
        except (TokenizationError, SubmissionError) as e:
            print(f"[Checkout] Purchase failed: {e}")
            self.status = SubmissionStatus.FAILED
            self.last_error = str(e)
            return self.status
        except Exception as e:
            # Never leave the session stuck in IN_FLIGHT.
            print(f"[Checkout] Unexpected purchase error: {e!r}")
            self.status = SubmissionStatus.FAILED
            self.last_error = str(e)
            raise

        print(f"[Checkout] Purchase completed: items={cart.total_quantity}")
        self.status = SubmissionStatus.SUCCEEDED
        return self.status

    async def _request_token(self, cardholder_name: str, card: dict[str, Any]) -> str:
        print("[Checkout] Requesting payment token")
        result = await self.tokenizer.create_token(cardholder_name, card)

        if not result.success:
            raise TokenizationError(result.failure_reason or "Card was rejected")
        if not result.token_id:
            raise TokenizationError("Tokenizer returned no token")
        return result.token_id
