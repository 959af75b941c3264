from __future__ import annotations

import pytest

from core.config import AppSettings, get_user_config_dir, read_env_file, write_user_env_vars
from core.errors import ServerConfiguration


def test_lookup_config_strips_trailing_slash() -> None:
    settings = AppSettings(neynar_base_url="https://api.neynar.test/v2/", neynar_api_key="k", _env_file=None)

    config = settings.lookup_config()

    assert config.base_url == "https://api.neynar.test/v2"
    assert config.api_key == "k"
    assert config.timeout_seconds == 10.0


@pytest.mark.parametrize(
    ("base_url", "api_key", "missing"),
    [
        (None, "k", "NEYNAR_BASE_URL"),
        ("https://api.neynar.test", None, "NEYNAR_API_KEY"),
        ("https://api.neynar.test", "   ", "NEYNAR_API_KEY"),
    ],
)
def test_lookup_config_requires_base_url_and_key(base_url, api_key, missing) -> None:
    settings = AppSettings(neynar_base_url=base_url, neynar_api_key=api_key, _env_file=None)

    with pytest.raises(ServerConfiguration) as excinfo:
        settings.lookup_config()

    assert missing in excinfo.value.message
    assert excinfo.value.http_status == 500


def test_settings_read_conventional_env_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEYNAR_BASE_URL", "https://env.test")
    monkeypatch.setenv("NEYNAR_API_KEY", "env-key")

    settings = AppSettings(_env_file=None)

    assert settings.neynar_base_url == "https://env.test"
    assert settings.neynar_api_key == "env-key"


def test_write_user_env_vars_merges_existing(tmp_path) -> None:
    env_path = tmp_path / "user" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# comment\nNEYNAR_BASE_URL='https://old.test'\nLOG_LEVEL=DEBUG\n", encoding="utf-8")

    write_user_env_vars({"NEYNAR_BASE_URL": "https://new.test", "NEYNAR_API_KEY": "k"}, env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert "NEYNAR_BASE_URL=https://new.test" in lines
    assert "NEYNAR_API_KEY=k" in lines
    assert "LOG_LEVEL=DEBUG" in lines


def test_read_env_file_skips_comments_and_malformed_lines(tmp_path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("# NEYNAR_API_KEY=commented\nnot a pair\nNEYNAR_API_KEY=\"quoted\"\n\n", encoding="utf-8")

    assert read_env_file(env_path) == {"NEYNAR_API_KEY": "quoted"}
    assert read_env_file(tmp_path / "missing.env") == {}


def test_user_config_dir_follows_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "creator-eligibility"
