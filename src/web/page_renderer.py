"""HTML rendering of the eligibility form (Jinja2)."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.eligibility import FID_LIMIT, SCORE_THRESHOLD
from core.services.form_presenter import EMPTY_INPUT_MESSAGE, FormOutcome

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_form_page(*, value: str = "", outcome: FormOutcome | None = None) -> str:
    """Render the page in its idle state (no outcome) or settled state."""

    template = _get_env().get_template("index.html")
    return template.render(
        value=value,
        outcome=outcome,
        score_threshold=f"{SCORE_THRESHOLD:.1f}",
        fid_limit=FID_LIMIT,
        empty_input_message=EMPTY_INPUT_MESSAGE,
    )
