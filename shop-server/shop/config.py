"""shop-server configuration.

The shop-server is the "client-facing" checkout service:
- It holds the cart and the shipping/contact form for a checkout session.
- It exchanges the card input for a payment token.
- It posts the resulting order to the backend order endpoint.

Everything is controlled by environment variables so this service can run
anywhere (local, EC2, Docker) without code changes.
"""

from __future__ import annotations

import os

# Backend order endpoint base URL. Example: "http://orders.internal:3001"
ORDER_API_URL: str = os.getenv("ORDER_API_URL", "http://localhost:3001")

# Path of the order endpoint on that host
ORDER_API_PATH: str = os.getenv("ORDER_API_PATH", "/api/shop/order")

# Seconds to wait for the backend before the HTTP client gives up.
# The purchase is not retried after a timeout.
ORDER_API_TIMEOUT: float = float(os.getenv("ORDER_API_TIMEOUT", "10.0"))
