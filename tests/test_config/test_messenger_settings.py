"""Testes para config.settings.messenger."""

from __future__ import annotations

import pytest

from config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    DebugType,
    MessengerSettings,
    get_messenger_settings,
)
from config.settings.messenger import _load_from_env


class TestMessengerSettings:
    """Testes do objeto de settings."""

    def test_defaults(self) -> None:
        settings = MessengerSettings()
        assert settings.api_endpoint == "https://graph.facebook.com/v3.1"
        assert settings.debug is None
        assert settings.validate() == []

    def test_api_endpoint_strips_trailing_slash(self) -> None:
        settings = MessengerSettings(api_base_url="http://localhost:9000/")
        assert settings.api_endpoint == "http://localhost:9000/v3.1"

    def test_with_api_version_returns_copy(self) -> None:
        settings = MessengerSettings()
        upgraded = settings.with_api_version("v19.0")
        assert upgraded.api_version == "v19.0"
        assert settings.api_version == GRAPH_API_VERSION

    def test_settings_are_immutable(self) -> None:
        settings = MessengerSettings()
        with pytest.raises(AttributeError):
            settings.api_version = "v2.0"  # type: ignore[misc]

    def test_validate_reports_problems(self) -> None:
        settings = MessengerSettings(
            api_base_url="graph.facebook.com",
            api_version="",
            request_timeout_seconds=0,
        )
        errors = settings.validate()
        assert len(errors) == 3
        assert any("MESSENGER_API_BASE_URL" in e for e in errors)
        assert any("MESSENGER_API_VERSION" in e for e in errors)
        assert any("MESSENGER_REQUEST_TIMEOUT_SECONDS" in e for e in errors)


class TestLoadFromEnv:
    """Testes de carregamento por variáveis de ambiente."""

    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "MESSENGER_API_VERSION",
            "MESSENGER_API_BASE_URL",
            "MESSENGER_REQUEST_TIMEOUT_SECONDS",
            "MESSENGER_DEBUG",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = _load_from_env()

        assert settings.api_base_url == GRAPH_API_BASE_URL
        assert settings.api_version == GRAPH_API_VERSION
        assert settings.request_timeout_seconds == 30.0

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MESSENGER_API_VERSION", "v18.0")
        monkeypatch.setenv("MESSENGER_API_BASE_URL", "http://mock-graph")
        monkeypatch.setenv("MESSENGER_REQUEST_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("MESSENGER_DEBUG", "WARNING")

        settings = _load_from_env()

        assert settings.api_endpoint == "http://mock-graph/v18.0"
        assert settings.request_timeout_seconds == 5.0
        assert settings.debug is DebugType.WARNING

    def test_get_messenger_settings_is_cached(self) -> None:
        get_messenger_settings.cache_clear()
        assert get_messenger_settings() is get_messenger_settings()
