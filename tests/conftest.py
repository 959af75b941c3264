"""Shared fixtures for the eligibility checker tests."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings, LookupConfig

BASE_URL = "https://api.neynar.test/v2"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep real NEYNAR_* variables and .env files out of the tests."""
    for name in ("NEYNAR_BASE_URL", "NEYNAR_API_KEY", "CHECK_API_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(neynar_base_url=BASE_URL, neynar_api_key="test-key", _env_file=None)


@pytest.fixture
def lookup_config(settings: AppSettings) -> LookupConfig:
    return settings.lookup_config()


def _make_user(**overrides: Any) -> dict[str, Any]:
    user: dict[str, Any] = {
        "object": "user",
        "fid": 1000,
        "username": "alice",
        "display_name": "Alice",
        "pfp_url": "https://img.test/alice.png",
        "experimental": {"neynar_user_score": 0.75},
    }
    user.update(overrides)
    return user


@pytest.fixture
def make_user() -> Callable[..., dict[str, Any]]:
    return _make_user


@pytest.fixture
def recorder() -> Callable[..., tuple[list[httpx.Request], httpx.MockTransport]]:
    """Build a MockTransport that records every outbound request."""

    def _make(response: httpx.Response | Callable[[httpx.Request], httpx.Response]):
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if callable(response):
                return response(request)
            return httpx.Response(response.status_code, headers=response.headers, content=response.content)

        return calls, httpx.MockTransport(handler)

    return _make
