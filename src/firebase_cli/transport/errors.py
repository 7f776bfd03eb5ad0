"""Translate HTTP error responses into ``FirebaseError``."""

from __future__ import annotations

import json
from typing import Any

import httpx

from firebase_cli.exceptions import FirebaseError
from firebase_cli.transport.request import RequestDescriptor


def response_to_error(
    response: httpx.Response,
    body: Any,
    descriptor: RequestDescriptor | None = None,
) -> FirebaseError:
    """Build the error for a response with status >= 400.

    The message comes from the body's ``error`` field when there is one and
    falls back to "Not Found" or "Unknown Error". Every translated error
    carries exit code 2.

    Args:
        response: HTTP response
        body: Response body as parsed by the transport
        descriptor: Request that produced the response

    Returns:
        Structured error keeping the body and response as context
    """
    status = response.status_code

    if isinstance(body, str) and status == 404:
        body = {"error": {"message": "Not Found"}}

    if not isinstance(body, dict):
        try:
            body = json.loads(body) if body else {}
        except (TypeError, ValueError):
            body = {}
        if not isinstance(body, dict):
            body = {}

    if not body.get("error"):
        body = {**body, "error": {"message": "Not Found" if status == 404 else "Unknown Error"}}

    error = body["error"]
    detail = error
    if isinstance(error, dict):
        detail = error.get("message") or error

    return FirebaseError(
        f"HTTP Error: {status}, {detail}",
        context={"body": body, "response": response, "request": descriptor},
        exit_code=2,
        status=status,
    )
