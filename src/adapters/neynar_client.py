"""Neynar user lookup (v2 API).

Routes:
- Numeric FID -> `GET /farcaster/user/bulk?fids=<fid>` -> `{"users": [...]}`
- Handle      -> `GET /farcaster/user/by_username?username=<handle>` -> `{"user": {...}}`

The body is always read in full so that error answers can be reported with
their body unchanged.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import LookupConfig
from core.domain.models import Query
from core.errors import RemoteError
from core.interfaces.lookup import UserLookup

logger = logging.getLogger(__name__)

BULK_PATH = "/farcaster/user/bulk"
BY_USERNAME_PATH = "/farcaster/user/by_username"


def _decode_body(text: str) -> Any:
    """JSON-decode an error body, keeping the raw text when it is not JSON."""

    try:
        return json.loads(text)
    except ValueError:
        return text


def locate_user_record(payload: Any, query: Query) -> dict[str, Any] | None:
    """Pick the user record out of the response shape of the route that was called."""

    if not isinstance(payload, dict):
        return None

    if query.is_numeric:
        users = payload.get("users")
        if isinstance(users, list) and users and isinstance(users[0], dict):
            return users[0]
        return None

    user = payload.get("user")
    return user if isinstance(user, dict) else None


class NeynarClient(UserLookup):
    """Resolve a handle or FID to a Neynar user record."""

    def __init__(
        self,
        config: LookupConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def build_request(self, query: Query) -> tuple[str, dict[str, str]]:
        """Return the URL and query params for `query`."""

        if query.is_numeric:
            return f"{self._config.base_url}{BULK_PATH}", {"fids": query.value}
        return f"{self._config.base_url}{BY_USERNAME_PATH}", {"username": query.value}

    async def fetch_user(self, query: Query) -> dict[str, Any] | None:
        url, params = self.build_request(query)
        headers = {"x-api-key": self._config.api_key}

        async with build_async_client(
            self._config,
            extra_headers=headers,
            transport=self._transport,
        ) as client:
            resp = await client.get(url, params=params)

        text = resp.text
        if not resp.is_success:
            logger.error(
                "Neynar error: %s %s",
                resp.status_code,
                text,
                extra={"http_status": resp.status_code, "endpoint": url},
            )
            raise RemoteError(resp.status_code, _decode_body(text))

        payload = json.loads(text) if text else {}
        return locate_user_record(payload, query)
