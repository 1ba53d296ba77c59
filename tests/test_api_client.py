"""Tests for the backend order client."""

import asyncio

import httpx
import pytest
from shop.api_client import OrderApiClient
from shop.errors import SubmissionError
from shop.order_builder import build_order

from conftest import BACKEND_URL, RecordingBackend


@pytest.fixture
def order(banana_cart, complete_contact, catalog):
    return build_order(banana_cart, complete_contact, catalog)


class TestSubmitOrder:
    def test_posts_order_and_source(self, backend, order):
        asyncio.run(backend.client().submit_order(order, "tok_1"))

        assert len(backend.requests) == 1
        request = backend.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BACKEND_URL}/api/shop/order"
        assert backend.bodies[0]["source"] == "tok_1"
        assert backend.bodies[0]["order"]["items"] == [{"type": "sku", "parent": 1, "quantity": 1}]

    def test_no_authorization_header(self, backend, order):
        asyncio.run(backend.client().submit_order(order, "tok_1"))
        assert "authorization" not in backend.requests[0].headers

    @pytest.mark.parametrize("status_code", [200, 201, 204])
    def test_any_2xx_is_success(self, order, status_code):
        backend = RecordingBackend(status_code=status_code)
        asyncio.run(backend.client().submit_order(order, "tok_1"))
        assert len(backend.requests) == 1

    @pytest.mark.parametrize("status_code", [400, 402, 500, 503])
    def test_non_2xx_raises_submission_error(self, order, status_code):
        backend = RecordingBackend(status_code=status_code)
        with pytest.raises(SubmissionError) as exc_info:
            asyncio.run(backend.client().submit_order(order, "tok_1"))
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
        assert len(backend.requests) == 1

    def test_network_error_raises_submission_error(self, backend, order):
        backend.error = httpx.ConnectError("connection refused")
        with pytest.raises(SubmissionError):
            asyncio.run(backend.client().submit_order(order, "tok_1"))

    def test_logs_outcome(self, backend, order, capsys):
        asyncio.run(backend.client().submit_order(order, "tok_1"))
        assert "[OrderAPI] Order accepted" in capsys.readouterr().out


class TestClientConfig:
    def test_defaults_from_config(self):
        client = OrderApiClient()
        assert client.url == "http://localhost:3001/api/shop/order"
        assert client.timeout == 10.0

    def test_trailing_slash_on_base_url(self):
        client = OrderApiClient(base_url="http://orders.test/")
        assert client.url == "http://orders.test/api/shop/order"
