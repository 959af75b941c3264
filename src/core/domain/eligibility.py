"""Creator Marketplace eligibility rule.

eligible = score > 0.7 AND fid < 500000, where a missing value fails its clause.
"""

from __future__ import annotations

from core.domain.models import EligibilityVerdict

SCORE_THRESHOLD = 0.7
FID_LIMIT = 500_000


def evaluate_eligibility(score: float | None, fid: int | None) -> EligibilityVerdict:
    """Apply the fixed two-clause rule and collect a reason per failed clause."""

    reasons: list[str] = []

    score_ok = score is not None and score > SCORE_THRESHOLD
    if not score_ok:
        if score is None:
            reasons.append("score is unavailable")
        else:
            reasons.append(f"score is <= {SCORE_THRESHOLD:.2f}")

    fid_ok = fid is not None and fid < FID_LIMIT
    if not fid_ok:
        if fid is None:
            reasons.append("identifier is unavailable")
        else:
            reasons.append(f"identifier is >= {FID_LIMIT}")

    return EligibilityVerdict(
        fid=fid,
        score=score,
        eligible=score_ok and fid_ok,
        reasons=reasons,
    )
