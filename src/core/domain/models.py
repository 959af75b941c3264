"""Domain models (Pydantic v2).

- Describe *what* a check consumes and produces, not how the data is fetched.
- Every model lives for a single request; nothing here is persisted.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class QueryKind(str, Enum):
    """How a normalized query is resolved against the lookup API."""

    NUMERIC = "numeric"
    HANDLE = "handle"


class Query(BaseModel):
    """A normalized, classified user query."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(
        ...,
        description="Input exactly as received.",
    )
    value: str = Field(
        ...,
        min_length=1,
        description="Trimmed input with leading '@' characters removed.",
    )
    kind: QueryKind = Field(
        ...,
        description="NUMERIC when `value` is all digits, HANDLE otherwise.",
    )

    @property
    def is_numeric(self) -> bool:
        return self.kind is QueryKind.NUMERIC


class UserSummary(BaseModel):
    """Subset of the Neynar user record surfaced to callers."""

    model_config = ConfigDict(extra="ignore")

    fid: int | None = Field(
        default=None,
        description="Farcaster identifier.",
    )
    username: str | None = Field(
        default=None,
        description="Handle without the leading '@'.",
    )
    display_name: str | None = Field(
        default=None,
        description="Display name chosen by the user.",
    )
    pfp_url: str | None = Field(
        default=None,
        description="Profile picture URL.",
    )


class EligibilityVerdict(BaseModel):
    """Outcome of the threshold rule for one account."""

    fid: int | None = None
    score: float | None = None
    eligible: bool = False
    reasons: list[str] = Field(
        default_factory=list,
        description="Failed clauses in rule order; empty when eligible.",
    )


class CheckResult(BaseModel):
    """Success payload returned by the lookup proxy."""

    ok: bool = True
    input: str = Field(
        ...,
        description="Normalized query value.",
    )
    user: UserSummary = Field(default_factory=UserSummary)
    neynar_score: float | None = None
    fid: int | None = None
    eligible: bool = False
    reasons: list[str] = Field(default_factory=list)
