"""Unit tests for the authenticated API client."""

from __future__ import annotations

import ssl
import typing as typ

import httpx
import msgspec
import pytest

from sparkevents.api.client import (
    ApiClient,
    assert_json,
    build_ssl_context,
    pretty_error,
    raise_for_api_error,
)
from sparkevents.api.errors import (
    ApiPayloadError,
    ApiResponseError,
    ContentTypeError,
    ResponseShapeError,
)
from sparkevents.api.models import ApiErrorDetail, ApiResponse

if typ.TYPE_CHECKING:
    from sparkevents.api.config import ApiConfig

_PATH = "/api/v1/widgets"


def _make_client(
    config: ApiConfig,
    response: httpx.Response | None = None,
) -> tuple[ApiClient, httpx.Client, list[httpx.Request]]:
    calls: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if response is not None:
            return response
        return httpx.Response(200, json={"results": {}})

    http_client = httpx.Client(transport=httpx.MockTransport(_handler))
    return ApiClient(config, _PATH, http_client=http_client), http_client, calls


def _response(
    status_code: int,
    body: bytes = b"{}",
    content_type: str = "application/json",
) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=body,
        headers={"Content-Type": content_type},
    )


class TestRequests:
    """Requests carry credentials and encoded payloads."""

    def test_url_for(self, api_config: ApiConfig) -> None:
        """URLs join the base URL, resource path and suffix."""
        client, _, _ = _make_client(api_config)

        assert client.url_for() == f"https://api.example.test{_PATH}"
        assert client.url_for("/7") == f"https://api.example.test{_PATH}/7"

    def test_get_sends_raw_api_key(self, api_config: ApiConfig) -> None:
        """The API key is sent verbatim as the Authorization header."""
        client, _, calls = _make_client(api_config)

        client.get(client.url_for())

        (request,) = calls
        assert request.method == "GET"
        assert request.headers["Authorization"] == api_config.api_key
        assert request.headers["User-Agent"] == api_config.user_agent

    def test_post_encodes_payload(self, api_config: ApiConfig) -> None:
        """Payloads are JSON encoded with a JSON content type."""
        client, _, calls = _make_client(api_config)

        client.post(client.url_for(), {"name": "widget", "size": 3})

        (request,) = calls
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert msgspec.json.decode(request.content) == {"name": "widget", "size": 3}

    def test_post_rejects_non_object_payload(self, api_config: ApiConfig) -> None:
        """Payloads that are not key/value pairs are refused before sending."""
        client, _, calls = _make_client(api_config)

        with pytest.raises(ApiPayloadError, match=r"got \[list\]"):
            client.post(client.url_for(), ["widget"])

        assert calls == []

    def test_delete(self, api_config: ApiConfig) -> None:
        """DELETE requests are authenticated."""
        client, _, calls = _make_client(api_config)

        client.delete(client.url_for("/7"))

        (request,) = calls
        assert request.method == "DELETE"
        assert request.url.path == f"{_PATH}/7"
        assert request.headers["Authorization"] == api_config.api_key


class TestLifecycle:
    """Ownership of the underlying HTTP client."""

    def test_injected_client_is_left_open(self, api_config: ApiConfig) -> None:
        """Closing the API client does not close an injected HTTP client."""
        client, http_client, _ = _make_client(api_config)

        with client:
            pass

        assert not http_client.is_closed

    def test_owned_client_is_closed(self, api_config: ApiConfig) -> None:
        """A client created by the API client is closed with it."""
        client = ApiClient(api_config, _PATH)
        owned = client._client  # noqa: SLF001

        client.close()

        assert owned.is_closed

    def test_ssl_context_uses_certificate_bundle(self) -> None:
        """The TLS context verifies peers and hostnames."""
        context = build_ssl_context()

        assert context.verify_mode == ssl.CERT_REQUIRED
        assert context.check_hostname


class TestResponseChecks:
    """Validation of responses before decoding."""

    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "application/json; charset=utf-8", "Application/JSON"],
    )
    def test_assert_json_accepts_json(self, content_type: str) -> None:
        """JSON content types, with or without parameters, are accepted."""
        assert_json(_response(200, content_type=content_type))

    @pytest.mark.parametrize("content_type", ["text/html", "", "text/plain"])
    def test_assert_json_rejects_other_types(self, content_type: str) -> None:
        """Other content types raise with the status code."""
        with pytest.raises(ContentTypeError) as excinfo:
            assert_json(_response(503, content_type=content_type))

        assert excinfo.value.status_code == 503
        assert excinfo.value.content_type == content_type

    def test_parse_response(self, api_config: ApiConfig) -> None:
        """Bodies are decoded into a fresh response record."""
        client, _, _ = _make_client(api_config)
        body = b'{"results": {"id": "w-1"}}'

        parsed = client.parse_response(_response(200, body))

        assert parsed.ok
        assert parsed.results == {"id": "w-1"}
        assert parsed.body == body
        assert parsed.errors == ()

    def test_parse_response_with_errors(self, api_config: ApiConfig) -> None:
        """Error arrays are decoded even on success status codes."""
        client, _, _ = _make_client(api_config)
        body = b'{"errors": [{"message": "Nope", "code": "1900"}]}'

        parsed = client.parse_response(_response(200, body))

        assert not parsed.ok
        assert parsed.errors == (ApiErrorDetail(message="Nope", code="1900"),)

    def test_parse_response_invalid_json(self, api_config: ApiConfig) -> None:
        """Malformed bodies raise ResponseShapeError."""
        client, _, _ = _make_client(api_config)

        with pytest.raises(ResponseShapeError, match="Failed to parse"):
            client.parse_response(_response(200, b"{not json"))


class TestErrorMapping:
    """Translation of failed responses into exceptions."""

    @pytest.mark.parametrize(
        ("status_code", "expected"),
        [
            (404, "Widget does not exist, update failed."),
            (401, "Widget update failed, permission denied. Check your API key."),
            (403, "Widget update failed. Are you using the right API path?"),
        ],
    )
    def test_pretty_error(self, status_code: int, expected: str) -> None:
        """Common statuses have readable messages."""
        error = pretty_error("Widget", "update", status_code)

        assert error is not None
        assert str(error) == expected
        assert error.status_code == status_code

    @pytest.mark.parametrize("status_code", [200, 400, 500])
    def test_pretty_error_other_statuses(self, status_code: int) -> None:
        """Other statuses have no readable message."""
        assert pretty_error("Widget", "update", status_code) is None

    def test_raise_for_api_error_ok(self) -> None:
        """Successful responses pass through."""
        response = ApiResponse(status_code=200, headers=httpx.Headers(), body=b"{}")

        raise_for_api_error(response, noun="Widget", verb="update")

    def test_raise_for_api_error_prefers_pretty_message(self) -> None:
        """Readable messages win over reported error details."""
        response = ApiResponse(
            status_code=401,
            headers=httpx.Headers(),
            body=b"{}",
            errors=(ApiErrorDetail(message="Unauthorized."),),
        )

        with pytest.raises(ApiResponseError, match="Check your API key"):
            raise_for_api_error(response, noun="Widget", verb="update")

    def test_raise_for_api_error_details(self) -> None:
        """Other failures carry the reported error details."""
        detail = ApiErrorDetail(message="Invalid data", code="1300")
        response = ApiResponse(
            status_code=422,
            headers=httpx.Headers(),
            body=b"{}",
            errors=(detail,),
        )

        with pytest.raises(ApiResponseError) as excinfo:
            raise_for_api_error(response, noun="Widget", verb="update")

        assert excinfo.value.status_code == 422
        assert excinfo.value.errors == (detail,)
