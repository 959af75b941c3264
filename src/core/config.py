"""Application configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI and web layers.
- `LookupConfig` is the validated, immutable view the Neynar adapter receives.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ServerConfiguration


_APP_DIR_NAME = "creator-eligibility"


def get_user_config_dir() -> Path:
    """Directory holding the Neynar credentials written by `doctor setup`.

    Lets `creator-eligibility check --direct` and `serve` find the API key from
    any working directory, not only from a project checkout with its own `.env`.
    """

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / _APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / _APP_DIR_NAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return (Path(xdg) if xdg else Path.home() / ".config") / _APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_env_file(env_path: Path) -> dict[str, str]:
    """KEY=VALUE pairs of a .env file; comments, blank and malformed lines are skipped."""

    if not env_path.exists():
        return {}

    values: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        values[key] = value.strip().strip("\"'")
    return values


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` (typically the NEYNAR_* settings) into the user .env.

    Keys already present and not given in `values` are kept, so a later
    `doctor setup` only replaces the Neynar credentials.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = read_env_file(env_path)
    merged.update({key: value for key, value in values.items() if value is not None})

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text("# creator-eligibility user config (.env)\n" + body, encoding="utf-8")
    return env_path


@dataclass(frozen=True)
class LookupConfig:
    """Validated settings for the outbound Neynar call."""

    base_url: str
    api_key: str
    timeout_seconds: float = 10.0
    user_agent: str = "creator-eligibility/0.1"


class AppSettings(BaseSettings):
    """Central application settings.

    Variables are read without a prefix so the conventional `NEYNAR_BASE_URL`
    and `NEYNAR_API_KEY` names work as-is.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user config .env.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    neynar_base_url: str | None = Field(
        default=None,
        description="Neynar API base URL, e.g. https://api.neynar.com/v2.",
    )
    neynar_api_key: str | None = Field(
        default=None,
        description="Neynar API key, sent as the x-api-key header.",
    )
    neynar_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the outbound lookup (seconds).",
    )
    user_agent: str = Field(
        default="creator-eligibility/0.1",
        min_length=1,
        description="User-Agent for outbound requests.",
    )

    check_api_url: str = Field(
        default="http://127.0.0.1:8000",
        min_length=8,
        description="Base URL of the running proxy, used by the terminal form.",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logging level.",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines instead of plain text.",
    )

    def lookup_config(self) -> LookupConfig:
        """Return the outbound lookup config or raise `ServerConfiguration`."""

        base_url = (self.neynar_base_url or "").strip()
        api_key = (self.neynar_api_key or "").strip()
        if not base_url:
            raise ServerConfiguration("NEYNAR_BASE_URL not configured on server")
        if not api_key:
            raise ServerConfiguration("NEYNAR_API_KEY not configured on server")
        return LookupConfig(
            base_url=base_url.rstrip("/"),
            api_key=api_key,
            timeout_seconds=self.neynar_timeout_seconds,
            user_agent=self.user_agent,
        )
