"""Presentation rules shared by the web page and the terminal form."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

EMPTY_INPUT_MESSAGE = "Enter a Farcaster handle (e.g. @alice) or a numeric FID."
UPGRADE_MESSAGE = (
    "This service requires a paid Neynar account. The free tier doesn't include access to "
    "user lookup endpoints. Please upgrade your Neynar plan at https://neynar.com to continue "
    "using this service."
)
GENERIC_ERROR_MESSAGE = "Unknown error"
PAYMENT_REQUIRED = 402


@dataclass(frozen=True)
class FormOutcome:
    """Settled state of the form: exactly one of `result` or `error` is set."""

    result: dict[str, Any] | None = None
    error: str | None = None
    upgrade_required: bool = False

    @property
    def ok(self) -> bool:
        return self.result is not None


def validate_form_input(text: str | None) -> str | None:
    """Return the trimmed input, or None when it must be rejected locally."""

    trimmed = (text or "").strip()
    return trimmed or None


def error_message(payload: Any) -> str:
    """Readable message from an error payload, falling back to a generic one."""

    if not isinstance(payload, dict):
        return GENERIC_ERROR_MESSAGE

    message = payload.get("message")
    if isinstance(message, dict):
        nested = message.get("message")
        if isinstance(nested, str) and nested:
            return nested
        return json.dumps(message, ensure_ascii=False)
    if isinstance(message, (list, int, float)) and not isinstance(message, bool):
        return json.dumps(message, ensure_ascii=False)
    if isinstance(message, str) and message:
        return message

    error = payload.get("error")
    if isinstance(error, str) and error:
        return error
    return GENERIC_ERROR_MESSAGE


def present_response(status: int, payload: Any) -> FormOutcome:
    """Map a proxy answer to what the form renders."""

    if status == PAYMENT_REQUIRED:
        return FormOutcome(error=UPGRADE_MESSAGE, upgrade_required=True)
    if not 200 <= status < 300 or not isinstance(payload, dict):
        return FormOutcome(error=error_message(payload))
    return FormOutcome(result=payload)
