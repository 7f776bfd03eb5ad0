"""Bearer-token authentication for API requests.

The token service is injected into ``AuthAttacher`` rather than looked up
globally, so the transport and the token service can depend on each other's
modules without an import cycle.
"""

from __future__ import annotations

import time
from typing import Protocol

import structlog

from firebase_cli.exceptions import FirebaseError
from firebase_cli.origins import Origins
from firebase_cli.session import ClientSession
from firebase_cli.transport.errors import response_to_error
from firebase_cli.transport.http import HttpTransport
from firebase_cli.transport.request import RequestDescriptor, RequestOptions, build_request

logger = structlog.get_logger(__name__)

# Refresh this many seconds before the reported expiry.
EXPIRY_BUFFER_SECONDS = 60


class TokenService(Protocol):
    """Mints access tokens from a refresh credential."""

    async def get_access_token(
        self, refresh_token: str | None, scopes: frozenset[str]
    ) -> str: ...


class AuthAttacher:
    """Adds an ``Authorization: Bearer`` header to request descriptors.

    Errors raised by the token service propagate unchanged.

    Args:
        token_service: Service used to obtain access tokens
    """

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    async def attach(
        self, descriptor: RequestDescriptor, session: ClientSession
    ) -> RequestDescriptor:
        """Return a copy of ``descriptor`` carrying a bearer token.

        Args:
            descriptor: Request to authenticate
            session: Credential and scopes of the running command

        Returns:
            New descriptor with the Authorization header set
        """
        token = await self.token_service.get_access_token(
            session.refresh_token, session.scopes
        )
        return descriptor.with_header("Authorization", f"Bearer {token}")


class RefreshTokenService:
    """OAuth2 refresh-token grant against the Google token endpoint.

    Access tokens are cached per (refresh token, scope set) until shortly
    before they expire.

    Args:
        transport: Transport used for the token request
        origins: Origin table (token origin and OAuth client credentials)
    """

    def __init__(self, transport: HttpTransport, origins: Origins) -> None:
        self.transport = transport
        self.origins = origins
        self._cache: dict[tuple[str, frozenset[str]], tuple[str, float]] = {}

    async def get_access_token(
        self, refresh_token: str | None, scopes: frozenset[str]
    ) -> str:
        """Exchange the refresh token for an access token.

        Raises:
            FirebaseError: If no refresh token is set, if the credential was
                rejected, or if the token endpoint fails
        """
        if not refresh_token:
            raise FirebaseError(
                "Command requires authentication, please run firebase login",
                exit_code=1,
            )

        key = (refresh_token, scopes)
        cached = self._cache.get(key)
        if cached and time.time() < cached[1] - EXPIRY_BUFFER_SECONDS:
            return cached[0]

        descriptor = build_request(
            "POST",
            "/oauth2/v3/token",
            RequestOptions(
                form={
                    "refresh_token": refresh_token,
                    "client_id": self.origins.client_id,
                    "client_secret": self.origins.client_secret,
                    "grant_type": "refresh_token",
                    "scope": " ".join(sorted(scopes)),
                },
                resolve_on_http_error=True,
            ),
            origin=self.origins.google,
        )
        result = await self.transport.execute(descriptor)

        if result.status in (400, 401):
            raise FirebaseError(
                "Authentication Error: Your credentials are no longer valid. "
                "Please run firebase login --reauth",
                context=result,
                exit_code=1,
                status=result.status,
            )
        if result.status >= 400:
            raise response_to_error(result.response, result.body, descriptor)

        body = result.body if isinstance(result.body, dict) else {}
        access_token = body.get("access_token")
        if not access_token:
            raise FirebaseError(
                "Authentication Error: Token endpoint returned no access token",
                context=result,
                exit_code=1,
            )

        expires_in = int(body.get("expires_in", 3600))
        self._cache[key] = (access_token, time.time() + expires_in)
        logger.debug("access_token_refreshed", expires_in=expires_in)
        return str(access_token)
