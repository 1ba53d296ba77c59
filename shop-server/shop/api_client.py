"""HTTP client for calling the backend order endpoint.

Why is this its own module?
- Keeps the orchestrator free of HTTP details.
- Makes the backend contract (`POST /api/shop/order` with `{order, source}`)
  visible in one place.
"""

from __future__ import annotations

import httpx

from .config import ORDER_API_PATH, ORDER_API_TIMEOUT, ORDER_API_URL
from .errors import SubmissionError
from .models import OrderPayload, OrderRequest


class OrderApiClient:
    """Posts orders to the backend.

    Args:
        base_url: Backend base URL (defaults to ORDER_API_URL).
        path: Order endpoint path (defaults to ORDER_API_PATH).
        timeout: Seconds before the request is abandoned.
        transport: Optional httpx transport. Tests pass an httpx.MockTransport.
    """

    def __init__(
        self,
        base_url: str = ORDER_API_URL,
        path: str = ORDER_API_PATH,
        timeout: float = ORDER_API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.path = path
        self.timeout = timeout
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    async def submit_order(self, order: OrderPayload, source: str) -> None:
        """Send one order to the backend.

        No authentication header is sent and the request is never retried.

        Raises:
            SubmissionError on connection failures, timeouts, or non-2xx status.
        """
        body = OrderRequest(order=order, source=source).to_json()

        # A client per call keeps things simple; one purchase is one request.
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                resp = await client.post(self.url, json=body)
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                print(f"[OrderAPI] Order rejected: status={e.response.status_code}")
                raise SubmissionError(f"Order endpoint returned {e.response.status_code}") from e
            except httpx.HTTPError as e:
                print(f"[OrderAPI] Order request failed: {e!r}")
                raise SubmissionError(f"Order endpoint unreachable: {e}") from e

        print(f"[OrderAPI] Order accepted: status={resp.status_code} items={len(order.items)}")
