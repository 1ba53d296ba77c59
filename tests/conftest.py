import json

import httpx
import pytest
from shop.api_client import OrderApiClient
from shop.catalog import DEFAULT_CATALOG
from shop.state import Cart, Contact
from shop.tokenizer import CardTokenizer, TokenResult

BACKEND_URL = "http://orders.test"


class StubTokenizer(CardTokenizer):
    """Tokenizer that always answers with the same result."""

    def __init__(self, result: TokenResult) -> None:
        self.result = result
        self.calls: list[tuple[str, dict]] = []

    async def create_token(self, cardholder_name, card):
        self.calls.append((cardholder_name, card))
        return self.result


class RecordingBackend:
    """Fake order endpoint behind an httpx.MockTransport."""

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={"id": "or_123"})

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    def client(self) -> OrderApiClient:
        return OrderApiClient(base_url=BACKEND_URL, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def catalog():
    return DEFAULT_CATALOG


@pytest.fixture
def empty_cart(catalog):
    return Cart.empty(catalog)


@pytest.fixture
def banana_cart(empty_cart):
    return empty_cart.adjust("banana", 1)


@pytest.fixture
def complete_contact():
    return (
        Contact()
        .set_field("name", "Ada Lovelace")
        .set_field("email", "ada@example.com")
        .set_address_field("line1", "12 St James's Square")
        .set_address_field("city", "London")
        .set_address_field("state", "Greater London")
        .set_address_field("country", "GB")
        .set_address_field("postal_code", "SW1Y 4JH")
    )


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def token_ok():
    return StubTokenizer(TokenResult(success=True, token_id="tok_1"))


@pytest.fixture
def token_rejected():
    return StubTokenizer(TokenResult(success=False, failure_reason="Your card was declined."))
