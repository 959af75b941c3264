from __future__ import annotations

import httpx
import pytest

from adapters.neynar_client import NeynarClient, locate_user_record
from core.domain.query import normalize_query
from core.errors import RemoteError


@pytest.mark.asyncio
async def test_numeric_query_uses_bulk_route(lookup_config, recorder, make_user) -> None:
    calls, transport = recorder(httpx.Response(200, json={"users": [make_user(fid=194)]}))
    client = NeynarClient(lookup_config, transport=transport)

    record = await client.fetch_user(normalize_query("194"))

    assert record is not None and record["fid"] == 194
    assert len(calls) == 1
    request = calls[0]
    assert request.method == "GET"
    assert request.url.path == "/v2/farcaster/user/bulk"
    assert request.url.params["fids"] == "194"
    assert request.headers["x-api-key"] == "test-key"


@pytest.mark.asyncio
async def test_handle_query_uses_username_route_without_at(lookup_config, recorder, make_user) -> None:
    calls, transport = recorder(httpx.Response(200, json={"user": make_user()}))
    client = NeynarClient(lookup_config, transport=transport)

    record = await client.fetch_user(normalize_query("@alice"))

    assert record is not None and record["username"] == "alice"
    assert len(calls) == 1
    assert calls[0].url.path == "/v2/farcaster/user/by_username"
    assert calls[0].url.params["username"] == "alice"
    assert "@" not in str(calls[0].url)


@pytest.mark.asyncio
async def test_error_status_is_passed_through_with_json_body(lookup_config, recorder) -> None:
    body = {"code": "PaymentRequired", "message": "Upgrade your plan"}
    _, transport = recorder(httpx.Response(402, json=body))
    client = NeynarClient(lookup_config, transport=transport)

    with pytest.raises(RemoteError) as excinfo:
        await client.fetch_user(normalize_query("alice"))

    assert excinfo.value.http_status == 402
    assert excinfo.value.to_payload() == {"error": "remote_error", "status": 402, "message": body}


@pytest.mark.asyncio
async def test_error_body_falls_back_to_raw_text(lookup_config, recorder) -> None:
    _, transport = recorder(httpx.Response(503, text="upstream unavailable"))
    client = NeynarClient(lookup_config, transport=transport)

    with pytest.raises(RemoteError) as excinfo:
        await client.fetch_user(normalize_query("alice"))

    assert excinfo.value.http_status == 503
    assert excinfo.value.message == "upstream unavailable"


@pytest.mark.asyncio
async def test_empty_success_body_has_no_record(lookup_config, recorder) -> None:
    _, transport = recorder(httpx.Response(200, text=""))
    client = NeynarClient(lookup_config, transport=transport)

    assert await client.fetch_user(normalize_query("alice")) is None


def test_locate_user_record_follows_the_route_shape() -> None:
    numeric = normalize_query("3")
    handle = normalize_query("alice")

    assert locate_user_record({"users": [{"fid": 3}]}, numeric) == {"fid": 3}
    assert locate_user_record({"users": []}, numeric) is None
    assert locate_user_record({"user": {"fid": 3}}, numeric) is None
    assert locate_user_record({"user": {"fid": 3}}, handle) == {"fid": 3}
    assert locate_user_record({"users": [{"fid": 3}]}, handle) is None
    assert locate_user_record(["not", "a", "dict"], handle) is None

