"""Request models and query/body encoding.

Turns a logical ``(method, resource, options)`` triple into an immutable
``RequestDescriptor``: the query string is built here and the payload is
routed to either the JSON body or the form body depending on the verb.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field


class HTTPMethod(str, Enum):
    """HTTP methods accepted by the API layer."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True)
class FilePart:
    """One file to upload as a multipart form field.

    The field name is the key under which the part is passed in
    ``RequestOptions.files``. The stream is owned by the caller and is only
    read while the request is in flight.
    """

    stream: Any
    known_length: int
    filename: str
    content_type: str


class RequestOptions(BaseModel):
    """Options recognized by ``ApiClient.request``.

    Unknown option names are rejected. ``origin`` left as None means the
    admin origin.
    """

    data: dict[str, Any] = Field(default_factory=dict)
    origin: str | None = None
    resolve_on_http_error: bool = False
    json_mode: bool = Field(default=True, alias="json")
    query: dict[str, Any] | None = None
    form: dict[str, Any] | None = None
    files: dict[str, FilePart] | None = None
    auth: bool = False

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


class RequestDescriptor(BaseModel):
    """Fully shaped HTTP call, ready for the transport.

    At most one of ``body`` and ``form`` is set, and neither is set for GET.
    """

    method: HTTPMethod = HTTPMethod.GET
    url: str
    body: dict[str, Any] | None = None
    form: dict[str, Any] | None = None
    files: dict[str, FilePart] | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    resolve_on_http_error: bool = False
    json_mode: bool = True

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def with_header(self, name: str, value: str) -> RequestDescriptor:
        """Return a copy of this descriptor with one header set."""
        return self.model_copy(update={"headers": {**self.headers, name: value}})


def normalize_method(method: str | HTTPMethod | None) -> HTTPMethod:
    """Map a method name to ``HTTPMethod``, falling back to GET."""
    if isinstance(method, HTTPMethod):
        return method
    try:
        return HTTPMethod(method)
    except ValueError:
        return HTTPMethod.GET


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_query_value(v) for v in value]
    return value


def append_query_data(path: str, data: Mapping[str, Any] | None) -> str:
    """Append URL-encoded ``data`` to ``path``.

    Uses ``&`` when ``path`` already has a query string and ``?`` otherwise.
    Empty or missing data leaves the path unchanged.

    Args:
        path: Resource path, possibly with a query string
        data: Query parameters to append

    Returns:
        Path with the encoded parameters appended

    Example:
        >>> append_query_data("/v1/projects?a=1", {"b": 2})
        '/v1/projects?a=1&b=2'
    """
    if not data:
        return path
    separator = "&" if "?" in path else "?"
    encoded = urlencode(
        {key: _query_value(value) for key, value in data.items()},
        doseq=True,
        quote_via=quote,
    )
    return f"{path}{separator}{encoded}"


def select_body_encoding(
    method: HTTPMethod,
    data: Mapping[str, Any] | None,
    form: Mapping[str, Any] | None,
) -> tuple[dict[str, Any] | None, dict[str, Any] | None]:
    """Pick the payload channel for a request.

    GET sends neither (its data belongs in the query string). Other verbs
    send ``data`` as the body when non-empty, else ``form`` when non-empty,
    else nothing.

    Returns:
        ``(body, form)`` with at most one element set
    """
    if method == HTTPMethod.GET:
        return None, None
    if data:
        return dict(data), None
    if form:
        return None, dict(form)
    return None, None


def build_request(
    method: str | HTTPMethod | None,
    resource: str,
    options: RequestOptions,
    origin: str,
) -> RequestDescriptor:
    """Build the descriptor for one logical request.

    Args:
        method: HTTP method name; unrecognized names mean GET
        resource: Resource path relative to the origin
        options: Validated request options
        origin: Base URL to prefix the resource with

    Returns:
        Immutable request descriptor
    """
    http_method = normalize_method(method)

    if options.query:
        resource = append_query_data(resource, options.query)

    if http_method == HTTPMethod.GET:
        resource = append_query_data(resource, options.data)

    body, form = select_body_encoding(http_method, options.data, options.form)

    return RequestDescriptor(
        method=http_method,
        url=origin + resource,
        body=body,
        form=form,
        files=options.files,
        resolve_on_http_error=options.resolve_on_http_error,
        json_mode=options.json_mode,
    )
