"""Eligibility check for a single normalized query.

Lookup, field extraction and the threshold rule. Errors are raised as
`core.errors` types; turning them into responses is the proxy's job.
"""

from __future__ import annotations

import logging
from typing import Any

from core.domain.eligibility import evaluate_eligibility
from core.domain.models import CheckResult, Query, UserSummary
from core.errors import UserNotFound
from core.interfaces.lookup import UserLookup

logger = logging.getLogger(__name__)


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def _as_fid(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


def extract_score(record: dict[str, Any]) -> float | None:
    """`experimental.neynar_user_score`, then top-level `score`, else None."""

    experimental = record.get("experimental")
    if isinstance(experimental, dict):
        score = _as_number(experimental.get("neynar_user_score"))
        if score is not None:
            return score
    return _as_number(record.get("score"))


def extract_fid(record: dict[str, Any], query: Query) -> int | None:
    """The record's own `fid`, then the numeric query itself, else None."""

    fid = _as_fid(record.get("fid"))
    if fid is None and query.is_numeric:
        fid = int(query.value)
    return fid


def summarize_user(record: dict[str, Any], fid: int | None) -> UserSummary:
    def _str(key: str) -> str | None:
        value = record.get(key)
        return value if isinstance(value, str) else None

    return UserSummary(
        fid=fid,
        username=_str("username"),
        display_name=_str("display_name"),
        pfp_url=_str("pfp_url"),
    )


class EligibilityChecker:
    """Resolve a query through a `UserLookup` and apply the eligibility rule."""

    def __init__(self, lookup: UserLookup) -> None:
        self._lookup = lookup

    async def check(self, query: Query) -> CheckResult:
        record = await self._lookup.fetch_user(query)
        if record is None:
            raise UserNotFound(f"no user found for '{query.value}'")

        score = extract_score(record)
        fid = extract_fid(record, query)
        verdict = evaluate_eligibility(score, fid)

        logger.info(
            "Checked %s: eligible=%s",
            query.value,
            verdict.eligible,
            extra={"query_kind": query.kind.value},
        )

        return CheckResult(
            input=query.value,
            user=summarize_user(record, fid),
            neynar_score=verdict.score,
            fid=verdict.fid,
            eligible=verdict.eligible,
            reasons=verdict.reasons,
        )
