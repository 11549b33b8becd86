"""
Tests for environment-driven configuration accessors.
"""

from __future__ import annotations

import pytest

from users_app.utils import config


def test_base_url_required(monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing USERS_API_BASE_URL is a configuration error."""
    monkeypatch.setattr(config, "load_config", lambda: None)
    monkeypatch.delenv("USERS_API_BASE_URL", raising=False)
    with pytest.raises(ValueError, match="USERS_API_BASE_URL"):
        config.users_api_base_url()


def test_base_url_trailing_slash_stripped(monkeypatch: pytest.MonkeyPatch) -> None:
    """Whitespace and a trailing slash are removed from the base URL."""
    monkeypatch.setenv("USERS_API_BASE_URL", "  https://x.example/api/  ")
    assert config.users_api_base_url() == "https://x.example/api"


def test_timeout_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset timeouts fall back to 10s / 30s / 30s."""
    monkeypatch.setattr(config, "load_config", lambda: None)
    for key in ("HTTP_CONNECT_TIMEOUT", "HTTP_REQUEST_TIMEOUT", "HTTP_SOCKET_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    assert config.http_connect_timeout() == 10.0
    assert config.http_request_timeout() == 30.0
    assert config.http_socket_timeout() == 30.0


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_invalid_timeout_falls_back_to_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    """Non-numeric or non-positive values use the default."""
    monkeypatch.setenv("HTTP_CONNECT_TIMEOUT", raw)
    assert config.http_connect_timeout() == 10.0


def test_log_level_upper(monkeypatch: pytest.MonkeyPatch) -> None:
    """Log level names are normalized to upper case."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert config.log_level() == "DEBUG"
