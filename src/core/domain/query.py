"""Normalization and classification of user input."""

from __future__ import annotations

import re

from core.domain.models import Query, QueryKind
from core.errors import MissingParameter

_NUMERIC_RE = re.compile(r"\d+", re.ASCII)


def normalize_query(raw: str | None) -> Query:
    """Trim, strip every leading '@' and classify the input.

    Raises:
        MissingParameter: when nothing is left after normalization.
    """

    if raw is None:
        raise MissingParameter("missing query parameter q")

    value = raw.strip().lstrip("@")
    if not value:
        raise MissingParameter("missing query parameter q")

    kind = QueryKind.NUMERIC if _NUMERIC_RE.fullmatch(value) else QueryKind.HANDLE
    return Query(raw=raw, value=value, kind=kind)
