"""Client for a running `/api/check` proxy (used by the terminal form)."""

from __future__ import annotations

from typing import Any

import httpx

CHECK_PATH = "/api/check"


class CheckApiClient:
    """POST `{"q": ...}` to the proxy and return its status and JSON body.

    Transport failures come back as a 500 `internal_error` payload, the same
    shape the proxy itself answers with.
    """

    def __init__(
        self,
        api_url: str,
        *,
        timeout_seconds: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = api_url.rstrip("/") + CHECK_PATH
        self._timeout = timeout_seconds
        self._transport = transport

    async def check(self, text: str) -> tuple[int, Any]:
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            ) as client:
                resp = await client.post(self._url, json={"q": text})
        except httpx.HTTPError as exc:
            return 500, {"error": "internal_error", "message": str(exc) or type(exc).__name__}

        try:
            payload = resp.json()
        except ValueError:
            payload = {"error": "invalid_response", "message": resp.text}
        return resp.status_code, payload
