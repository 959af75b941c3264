"""FastAPI application: the `/api/check` proxy and the eligibility form page."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import AppSettings
from core.services.form_presenter import EMPTY_INPUT_MESSAGE, FormOutcome, present_response, validate_form_input
from core.services.lookup_proxy import LookupProxy
from web.page_renderer import render_form_page

logger = logging.getLogger(__name__)


async def _read_body_query(request: Request) -> str | None:
    """`q` (or `query`) from a JSON body; anything unreadable counts as missing."""

    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None

    value = body.get("q")
    if value is None:
        value = body.get("query")
    if value is None or isinstance(value, (dict, list)):
        return None
    return value if isinstance(value, str) else str(value)


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: AppSettings | None = None,
    *,
    proxy: LookupProxy | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the application; the lookup configuration is validated here, once."""

    settings = settings or AppSettings()
    proxy = proxy or LookupProxy.from_settings(settings, transport=transport)

    app = FastAPI(
        title="Creator Eligibility Checker",
        version="0.1.0",
        description="Checks Farcaster accounts against the Creator Marketplace rule.",
    )
    app.state.proxy = proxy
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)

    @app.get("/api/check")
    async def check_get(q: str | None = None) -> JSONResponse:
        status, payload = await proxy.handle(q)
        return JSONResponse(status_code=status, content=payload)

    @app.post("/api/check")
    async def check_post(request: Request) -> JSONResponse:
        status, payload = await proxy.handle(await _read_body_query(request))
        return JSONResponse(status_code=status, content=payload)

    @app.get("/healthz")
    async def healthz() -> dict[str, Any]:
        return {"status": "ok", "configured": proxy.configured}

    @app.get("/", response_class=HTMLResponse)
    async def form_page(q: str | None = None) -> HTMLResponse:
        if q is None:
            return HTMLResponse(render_form_page())

        trimmed = validate_form_input(q)
        if trimmed is None:
            outcome = FormOutcome(error=EMPTY_INPUT_MESSAGE)
            return HTMLResponse(render_form_page(value=q, outcome=outcome))

        status, payload = await proxy.handle(trimmed)
        outcome = present_response(status, payload)
        return HTMLResponse(render_form_page(value=trimmed, outcome=outcome))

    return app
