"""User lookup contract.

A structural Protocol so the Neynar adapter can be swapped for a stub in
tests without coupling the checker to httpx.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.models import Query


@runtime_checkable
class UserLookup(Protocol):
    """Minimal contract for a user-lookup source.

    Rules:
    - `fetch_user` is async because it performs HTTP I/O.
    - Exactly one outbound call per invocation.
    - Returns the located user record, or None when the response has none.
    - Non-2xx answers raise `core.errors.RemoteError`.
    """

    async def fetch_user(self, query: Query) -> dict[str, Any] | None:
        """Resolve `query` to the raw user record."""

        ...
