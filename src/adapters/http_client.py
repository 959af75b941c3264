"""httpx client builder.

- Standardizes timeouts and headers for every outbound call.
- Accepts an optional transport so tests can plug in `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import LookupConfig


def build_async_client(
    config: LookupConfig,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured timeout and User-Agent."""

    headers: dict[str, str] = {
        "User-Agent": config.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
