"""Transport layer for the Firebase CLI.

This package turns logical requests into HTTP calls. It is responsible for:
- Query string and body encoding
- Multipart file uploads
- Bearer-token authentication
- Sending the request and translating failures into FirebaseError
"""

from firebase_cli.transport.auth import AuthAttacher, RefreshTokenService, TokenService
from firebase_cli.transport.errors import response_to_error
from firebase_cli.transport.http import ApiResult, HttpTransport
from firebase_cli.transport.request import (
    FilePart,
    HTTPMethod,
    RequestDescriptor,
    RequestOptions,
    build_request,
)

__all__ = [
    "ApiResult",
    "AuthAttacher",
    "FilePart",
    "HTTPMethod",
    "HttpTransport",
    "RefreshTokenService",
    "RequestDescriptor",
    "RequestOptions",
    "TokenService",
    "build_request",
    "response_to_error",
]
