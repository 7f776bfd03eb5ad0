"""Tests for the dependency injection container."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from firebase_cli.api import ApiClient
from firebase_cli.config import Settings
from firebase_cli.container import (
    clear_overrides,
    get_api_client,
    get_origins,
    get_settings,
    get_transport,
    set_override,
)
from firebase_cli.origins import Origins
from firebase_cli.session import ClientSession
from firebase_cli.transport.auth import RefreshTokenService
from firebase_cli.transport.http import HttpTransport


class TestSettings:
    """Tests for settings loading."""

    def test_defaults(self) -> None:
        settings = get_settings()

        assert settings.token is None
        assert settings.debug is False
        assert settings.http_timeout is None

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIREBASE_TOKEN", "1//env-token")
        monkeypatch.setenv("FIREBASE_DEBUG", "true")
        monkeypatch.setenv("FIREBASE_HTTP_TIMEOUT", "12.5")

        settings = Settings()

        assert settings.token == "1//env-token"
        assert settings.debug is True
        assert settings.http_timeout == 12.5

    def test_settings_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_settings_override(self) -> None:
        settings = Settings(token="1//override")
        set_override("settings", settings)

        assert get_settings() is settings

    def test_invalid_override_type(self) -> None:
        set_override("settings", object())

        with pytest.raises(TypeError):
            get_settings()


class TestFactories:
    """Tests for transport and client factories."""

    def test_origins_override(self) -> None:
        origins = Origins(FIREBASE_ADMIN_URL="http://localhost:9000")
        set_override("origins", origins)

        assert get_origins() is origins
        assert get_origins().admin == "http://localhost:9000"

    def test_transport_override(self) -> None:
        transport = HttpTransport()
        set_override("transport", transport)

        assert get_transport() is transport

    def test_api_client_wiring(self) -> None:
        transport = HttpTransport()
        set_override("transport", transport)
        session = ClientSession("1//refresh")

        client = get_api_client(session)

        assert isinstance(client, ApiClient)
        assert client.transport is transport
        assert client.session is session
        assert client.origins is get_origins()
        token_service = client.attacher.token_service
        assert isinstance(token_service, RefreshTokenService)
        assert token_service.transport is transport

    def test_api_client_override(self) -> None:
        mock_client = Mock()
        set_override("api_client", mock_client)

        assert get_api_client(ClientSession()) is mock_client

        clear_overrides()
        assert get_api_client(ClientSession()) is not mock_client
