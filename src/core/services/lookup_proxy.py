"""Request boundary for the eligibility check.

`LookupProxy.handle` never raises: every outcome becomes a `(status, payload)`
pair that the web route, the web form and the terminal form all share.
Configuration is validated once, when the proxy is built.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.neynar_client import NeynarClient
from core.config import AppSettings
from core.domain.query import normalize_query
from core.errors import EligibilityError, InternalError, ServerConfiguration
from core.services.eligibility_checker import EligibilityChecker

logger = logging.getLogger(__name__)


class LookupProxy:
    """Normalize input, run the checker and convert failures to payloads."""

    def __init__(
        self,
        checker: EligibilityChecker | None,
        config_error: ServerConfiguration | None = None,
    ) -> None:
        if checker is None and config_error is None:
            raise ValueError("either a checker or a configuration error is required")
        self._checker = checker
        self._config_error = config_error

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "LookupProxy":
        settings = settings or AppSettings()
        try:
            config = settings.lookup_config()
        except ServerConfiguration as exc:
            logger.error("Lookup disabled: %s", exc.message, extra={"error_kind": exc.kind})
            return cls(None, exc)
        return cls(EligibilityChecker(NeynarClient(config, transport=transport)))

    @property
    def configured(self) -> bool:
        return self._checker is not None

    async def handle(self, raw: str | None) -> tuple[int, dict[str, Any]]:
        try:
            query = normalize_query(raw)
            if self._checker is None:
                error = self._config_error
                return error.http_status, error.to_payload()  # type: ignore[union-attr]
            result = await self._checker.check(query)
        except EligibilityError as exc:
            return exc.http_status, exc.to_payload()
        except Exception as exc:
            logger.exception("/api/check error", extra={"error_kind": InternalError.kind})
            error = InternalError(str(exc) or type(exc).__name__)
            return error.http_status, error.to_payload()

        return 200, result.model_dump(mode="json")
