"""Error taxonomy for the eligibility check.

Every failure a request can end in is one of these kinds. They are raised
where the problem is detected and turned into a JSON payload only at the
request boundary (`core.services.lookup_proxy.LookupProxy`).
"""

from __future__ import annotations

from typing import Any


class EligibilityError(Exception):
    """Base error carrying a wire kind and the HTTP status to answer with.

    Attributes:
        kind: Short machine-readable error name (`error` field of the payload).
        http_status: Status code returned to the caller.
        message: Human-readable message, or the decoded remote error body.
    """

    kind = "internal_error"
    http_status = 500

    def __init__(self, message: Any) -> None:
        super().__init__(message if isinstance(message, str) else str(message))
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.kind, "message": self.message}


class MissingParameter(EligibilityError):
    """The query is absent or blank after normalization (400)."""

    kind = "missing_parameter"
    http_status = 400


class ServerConfiguration(EligibilityError):
    """Base URL or API key is not configured (500)."""

    kind = "server_configuration"
    http_status = 500


class RemoteError(EligibilityError):
    """The lookup API answered outside the 2xx range.

    The remote status is passed through unchanged and the body is kept as
    decoded JSON when possible, raw text otherwise.
    """

    kind = "remote_error"

    def __init__(self, status: int, body: Any) -> None:
        super().__init__(body)
        self.http_status = status

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.kind, "status": self.http_status, "message": self.message}


class UserNotFound(EligibilityError):
    """The lookup succeeded but no user record was located (404)."""

    kind = "user_not_found"
    http_status = 404


class InternalError(EligibilityError):
    """Catch-all for network errors, parse errors and defects (500)."""

    kind = "internal_error"
    http_status = 500
