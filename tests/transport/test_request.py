"""Unit tests for request building and query/body encoding."""

from __future__ import annotations

import io

import pytest
from pydantic import ValidationError

from firebase_cli.transport.request import (
    FilePart,
    HTTPMethod,
    RequestDescriptor,
    RequestOptions,
    append_query_data,
    build_request,
    normalize_method,
    select_body_encoding,
)

ORIGIN = "https://admin.firebase.com"


class TestAppendQueryData:
    """Tests for append_query_data()."""

    def test_empty_data_leaves_path_unchanged(self) -> None:
        assert append_query_data("/v1/projects", {}) == "/v1/projects"
        assert append_query_data("/v1/projects", None) == "/v1/projects"

    def test_uses_question_mark_without_query_string(self) -> None:
        assert append_query_data("/v1/projects", {"a": 1}) == "/v1/projects?a=1"

    def test_uses_ampersand_with_existing_query_string(self) -> None:
        assert append_query_data("/v1/projects?a=1", {"b": 2}) == "/v1/projects?a=1&b=2"

    def test_values_are_url_encoded(self) -> None:
        path = append_query_data("/sites", {"name": "my site", "q": "a&b"})

        assert path == "/sites?name=my%20site&q=a%26b"

    def test_booleans_and_lists(self) -> None:
        path = append_query_data("/x", {"force": True, "id": ["a", "b"]})

        assert path == "/x?force=true&id=a&id=b"


class TestSelectBodyEncoding:
    """Tests for select_body_encoding()."""

    def test_get_never_carries_body(self) -> None:
        assert select_body_encoding(HTTPMethod.GET, {"a": 1}, {"b": 2}) == (None, None)

    @pytest.mark.parametrize(
        "method", [HTTPMethod.PUT, HTTPMethod.POST, HTTPMethod.DELETE, HTTPMethod.PATCH]
    )
    def test_data_takes_precedence_over_form(self, method: HTTPMethod) -> None:
        body, form = select_body_encoding(method, {"a": 1}, {"b": 2})

        assert body == {"a": 1}
        assert form is None

    def test_form_used_when_data_empty(self) -> None:
        assert select_body_encoding(HTTPMethod.POST, {}, {"b": 2}) == (None, {"b": 2})

    def test_neither_when_both_empty(self) -> None:
        assert select_body_encoding(HTTPMethod.DELETE, {}, None) == (None, None)


class TestNormalizeMethod:
    """Tests for normalize_method()."""

    @pytest.mark.parametrize("name", ["GET", "PUT", "POST", "DELETE", "PATCH"])
    def test_known_methods(self, name: str) -> None:
        assert normalize_method(name).value == name

    @pytest.mark.parametrize("name", ["HEAD", "OPTIONS", "get", "", None])
    def test_unknown_methods_fall_back_to_get(self, name: str | None) -> None:
        assert normalize_method(name) == HTTPMethod.GET


class TestBuildRequest:
    """Tests for build_request()."""

    def test_get_folds_data_into_query_after_query_option(self) -> None:
        options = RequestOptions(query={"q": 1}, data={"d": 2})

        descriptor = build_request("GET", "/v1/things", options, ORIGIN)

        assert descriptor.url == f"{ORIGIN}/v1/things?q=1&d=2"
        assert descriptor.body is None
        assert descriptor.form is None

    def test_post_sends_data_as_body(self) -> None:
        options = RequestOptions(data={"name": "site"}, form={"ignored": "yes"})

        descriptor = build_request("POST", "/v1/sites", options, ORIGIN)

        assert descriptor.method == HTTPMethod.POST
        assert descriptor.url == f"{ORIGIN}/v1/sites"
        assert descriptor.body == {"name": "site"}
        assert descriptor.form is None

    def test_post_query_still_applied(self) -> None:
        options = RequestOptions(query={"token": "abc"}, form={"a": "1"})

        descriptor = build_request("POST", "/upload", options, ORIGIN)

        assert descriptor.url == f"{ORIGIN}/upload?token=abc"
        assert descriptor.form == {"a": "1"}

    def test_unrecognized_method_uses_get_semantics(self) -> None:
        options = RequestOptions(data={"a": "1"})

        descriptor = build_request("TRACE", "/v1/x", options, ORIGIN)

        assert descriptor.method == HTTPMethod.GET
        assert descriptor.url == f"{ORIGIN}/v1/x?a=1"
        assert descriptor.body is None

    def test_flags_and_files_carried_over(self) -> None:
        part = FilePart(io.BytesIO(b"x"), 1, "x.txt", "text/plain")
        options = RequestOptions(
            files={"file": part}, resolve_on_http_error=True, json=False
        )

        descriptor = build_request("PUT", "/upload", options, ORIGIN)

        assert descriptor.files == {"file": part}
        assert descriptor.resolve_on_http_error is True
        assert descriptor.json_mode is False
        assert descriptor.headers == {}


class TestRequestOptions:
    """Tests for RequestOptions validation."""

    def test_defaults(self) -> None:
        options = RequestOptions()

        assert options.data == {}
        assert options.origin is None
        assert options.resolve_on_http_error is False
        assert options.json_mode is True
        assert options.query is None
        assert options.form is None
        assert options.files is None
        assert options.auth is False

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RequestOptions.model_validate({"dat": {"a": 1}})

    def test_json_alias(self) -> None:
        assert RequestOptions.model_validate({"json": False}).json_mode is False


class TestRequestDescriptor:
    """Tests for RequestDescriptor immutability."""

    def test_descriptor_is_frozen(self) -> None:
        descriptor = RequestDescriptor(url=f"{ORIGIN}/x")

        with pytest.raises(ValidationError):
            descriptor.url = "https://elsewhere.example.com"  # type: ignore[misc]

    def test_with_header_returns_copy(self) -> None:
        descriptor = RequestDescriptor(url=f"{ORIGIN}/x", headers={"X-Client": "cli"})

        updated = descriptor.with_header("Authorization", "Bearer t")

        assert updated.headers == {"X-Client": "cli", "Authorization": "Bearer t"}
        assert descriptor.headers == {"X-Client": "cli"}
