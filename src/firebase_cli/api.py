"""API client shared by every CLI command.

``ApiClient.request`` is the single entry point for talking to the Firebase
backends: it validates the options, shapes the request, authenticates it
when asked to and hands it to the transport.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from firebase_cli.exceptions import FirebaseError
from firebase_cli.origins import Origins
from firebase_cli.session import ClientSession
from firebase_cli.transport.auth import AuthAttacher
from firebase_cli.transport.http import ApiResult, HttpTransport
from firebase_cli.transport.request import (
    HTTPMethod,
    RequestDescriptor,
    RequestOptions,
    build_request,
)

UNEXPECTED_RESPONSE = "Server Error: Unexpected Response. Please try again"


class ApiClient:
    """High-level client for the Firebase management API.

    Args:
        transport: HTTP transport used to send requests
        attacher: Adds bearer tokens to authenticated requests
        origins: Origin table used for defaults
        session: Credential and scopes of the running command

    Example:
        >>> client = ApiClient(transport, attacher, get_origins(), session)
        >>> projects = await client.get_projects()
    """

    def __init__(
        self,
        transport: HttpTransport,
        attacher: AuthAttacher,
        origins: Origins,
        session: ClientSession,
    ) -> None:
        self.transport = transport
        self.attacher = attacher
        self.origins = origins
        self.session = session

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.transport.aclose()

    def prepare(
        self, method: str | HTTPMethod, resource: str, **options: Any
    ) -> tuple[RequestDescriptor, RequestOptions]:
        """Validate options and build the unauthenticated descriptor.

        Raises:
            pydantic.ValidationError: If an option is unknown or mistyped
        """
        request_options = RequestOptions.model_validate(options)
        origin = request_options.origin or self.origins.admin
        return build_request(method, resource, request_options, origin), request_options

    async def request(
        self, method: str | HTTPMethod, resource: str, **options: Any
    ) -> ApiResult:
        """Send a request to a Firebase backend.

        Args:
            method: GET, PUT, POST, DELETE or PATCH (anything else means GET)
            resource: Resource path relative to the origin
            **options: data, origin, resolve_on_http_error, json, query,
                form, files, auth

        Returns:
            Request result

        Raises:
            FirebaseError: On transport failure or HTTP error response
            pydantic.ValidationError: If an option is unknown or mistyped
        """
        descriptor, request_options = self.prepare(method, resource, **options)

        if request_options.auth:
            descriptor = await self.attacher.attach(descriptor, self.session)

        return await self.transport.execute(descriptor)

    async def get_project(self, project_id: str) -> dict[str, Any]:
        """Fetch one project.

        Raises:
            FirebaseError: If the request fails or the body is not a project
        """
        result = await self.request(
            "GET", f"/v1/projects/{quote(project_id, safe='')}", auth=True
        )
        if isinstance(result.body, dict) and not result.body.get("error"):
            return result.body

        raise FirebaseError(UNEXPECTED_RESPONSE, context=result, exit_code=2)

    async def get_projects(self) -> list[dict[str, Any]]:
        """List the projects the logged-in account can access.

        Raises:
            FirebaseError: If the request fails or the body has no project list
        """
        result = await self.request("GET", "/v1/projects", auth=True)
        if isinstance(result.body, dict) and isinstance(result.body.get("projects"), list):
            return result.body["projects"]

        raise FirebaseError(UNEXPECTED_RESPONSE, context=result, exit_code=2)
