"""HTTP transport layer implementation.

This module performs the actual network call for a ``RequestDescriptor``
and classifies the outcome. It has NO knowledge of authentication or of
the API resources being called.

Each call is a single attempt: there is no retry, and no deadline unless a
timeout is configured.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from firebase_cli.exceptions import FirebaseError
from firebase_cli.transport.errors import response_to_error
from firebase_cli.transport.multipart import build_multipart
from firebase_cli.transport.request import RequestDescriptor

logger = structlog.get_logger(__name__)

# Form and body fields never written to the trace log.
REDACTED_FIELDS = frozenset({"refresh_token", "client_secret", "access_token"})


@dataclass(frozen=True)
class ApiResult:
    """Outcome of a request that was not turned into an error.

    Attributes:
        status: HTTP status code
        response: Raw httpx response (status line and headers)
        body: Response body, parsed as JSON in JSON mode
    """

    status: int
    response: httpx.Response
    body: Any


class HttpTransport:
    """Async HTTP transport for the Firebase backends.

    Args:
        client: Optional preconfigured httpx client (the transport then
            does not close it)
        timeout: Request deadline in seconds; None waits indefinitely

    Example:
        >>> async with HttpTransport() as transport:
        ...     result = await transport.execute(descriptor)
        >>> result.status
        200
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def execute(self, descriptor: RequestDescriptor) -> ApiResult:
        """Send one request and classify the outcome.

        Args:
            descriptor: Fully shaped request

        Returns:
            Result for status < 400, or for any status when the descriptor
            asks to resolve on HTTP errors

        Raises:
            FirebaseError: On transport failure (exit code 2) or on an HTTP
                error response
        """
        logger.debug(
            "http_request",
            method=descriptor.method.value,
            url=descriptor.url,
            payload=_redact(descriptor.body or descriptor.form or ""),
        )

        try:
            response = await self._client.request(
                descriptor.method.value,
                descriptor.url,
                headers=descriptor.headers,
                json=descriptor.body,
                data=descriptor.form,
                files=build_multipart(descriptor.files),
            )
        except httpx.HTTPError as e:
            raise FirebaseError(
                f"Server Error. {e}",
                context=e,
                exit_code=2,
                original=e,
            ) from e

        logger.debug(
            "http_response",
            status=response.status_code,
            headers=dict(response.headers),
        )

        body = _parse_body(response, descriptor.json_mode)

        if response.status_code >= 400:
            logger.debug("http_response_body", body=response.text)
            if not descriptor.resolve_on_http_error:
                raise response_to_error(response, body, descriptor)

        return ApiResult(status=response.status_code, response=response, body=body)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()


def _redact(payload: Any) -> Any:
    if not isinstance(payload, dict):
        return payload
    return {
        key: "<redacted>" if key in REDACTED_FIELDS else value
        for key, value in payload.items()
    }


def _parse_body(response: httpx.Response, json_mode: bool) -> Any:
    if not response.content:
        return None
    if not json_mode:
        return response.text
    try:
        return response.json()
    except ValueError:
        return response.text
