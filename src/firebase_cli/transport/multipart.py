"""Multipart form construction for file uploads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from firebase_cli.transport.request import FilePart


def build_multipart(
    files: Mapping[str, FilePart] | None,
) -> list[tuple[str, tuple[str, Any, str, dict[str, str]]]] | None:
    """Convert file parts to the ``files`` argument of an httpx request.

    Each part is passed through as supplied: the stream is not read or
    re-encoded here, and the declared length travels as the part's
    ``Content-Length`` header.

    Args:
        files: Mapping of form field name to file part

    Returns:
        httpx multipart file list, or None when there are no parts

    Example:
        >>> part = FilePart(io.BytesIO(b"{}"), 2, "site.json", "application/json")
        >>> build_multipart({"config": part})[0][1][3]
        {'Content-Length': '2'}
    """
    if not files:
        return None

    return [
        (
            field_name,
            (
                part.filename,
                part.stream,
                part.content_type,
                {"Content-Length": str(part.known_length)},
            ),
        )
        for field_name, part in files.items()
    ]
