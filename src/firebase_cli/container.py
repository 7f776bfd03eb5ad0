"""Dependency injection container for the Firebase CLI.

This module wires settings, origins, transport, token service and API
client together for the commands.

Design principles:
- Settings and origins are loaded once per process
- Transports and clients are created per command (an httpx client is bound
  to the event loop of the command that uses it)
- Any dependency can be overridden for testing

Factory functions:
- get_settings(): Load and cache settings
- get_origins(): Load and cache the origin table
- get_transport(): Create an HTTP transport
- get_api_client(session): Create an API client for one command
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from firebase_cli import origins as origins_module
from firebase_cli.api import ApiClient
from firebase_cli.config import Settings
from firebase_cli.origins import Origins
from firebase_cli.session import ClientSession
from firebase_cli.transport.auth import AuthAttacher, RefreshTokenService
from firebase_cli.transport.http import HttpTransport

# Global container state for testing/mocking
_overrides: dict[str, Any] = {}


def set_override(key: str, value: Any) -> None:
    """Override a container dependency for testing.

    Args:
        key: Dependency key ("settings", "origins", "transport", "api_client")
        value: Mock or test implementation

    Example:
        >>> set_override("api_client", mock_client)
        >>> client = get_api_client(session)  # Returns mock
        >>> clear_overrides()
    """
    _overrides[key] = value


def clear_overrides() -> None:
    """Clear all dependency overrides."""
    _overrides.clear()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings from the environment."""
    if "settings" in _overrides:
        override = _overrides["settings"]
        if not isinstance(override, Settings):
            raise TypeError("Override for 'settings' must be a Settings instance")
        return override

    return Settings()


def get_origins() -> Origins:
    """Return the process-wide origin table."""
    if "origins" in _overrides:
        override = _overrides["origins"]
        if not isinstance(override, Origins):
            raise TypeError("Override for 'origins' must be an Origins instance")
        return override

    return origins_module.get_origins()


def get_transport() -> HttpTransport:
    """Create an HTTP transport configured from settings.

    Note:
        For testing, use set_override("transport", transport) to inject a
        transport backed by a mocked httpx client.
    """
    if "transport" in _overrides:
        override = _overrides["transport"]
        if not isinstance(override, HttpTransport):
            raise TypeError("Override for 'transport' must be an HttpTransport instance")
        return override

    return HttpTransport(timeout=get_settings().http_timeout)


def get_api_client(session: ClientSession) -> ApiClient:
    """Create the API client for one command invocation.

    Args:
        session: Credential and scopes of the running command

    Returns:
        API client sharing one transport with its token service
    """
    if "api_client" in _overrides:
        return _overrides["api_client"]

    transport = get_transport()
    origins = get_origins()
    attacher = AuthAttacher(RefreshTokenService(transport, origins))
    return ApiClient(transport, attacher, origins, session)


def reset_container() -> None:
    """Reset container state for testing."""
    clear_overrides()
    get_settings.cache_clear()
    origins_module.get_origins.cache_clear()
