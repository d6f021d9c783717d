"""Authenticated HTTP transport for the messaging API."""

from __future__ import annotations

import ssl
import typing as typ

import certifi
import httpx
import msgspec

from .errors import (
    ApiPayloadError,
    ApiResponseError,
    ContentTypeError,
    ResponseShapeError,
)
from .models import ApiResponse, ResponseBody

if typ.TYPE_CHECKING:
    import types

    from .config import ApiConfig

_JSON_CONTENT_TYPE = "application/json"
_HTTP_UNAUTHORIZED = 401
_HTTP_FORBIDDEN = 403
_HTTP_NOT_FOUND = 404

_T = typ.TypeVar("_T")


def build_ssl_context() -> ssl.SSLContext:
    """Return a TLS context trusting the Mozilla CA bundle from certifi.

    The operating system trust store is not consulted.
    """
    return ssl.create_default_context(cafile=certifi.where())


def assert_json(response: httpx.Response) -> None:
    """Raise :class:`ContentTypeError` unless ``response`` is JSON.

    Parameters such as ``application/json; charset=utf-8`` are accepted.
    """
    content_type = response.headers.get("Content-Type", "")
    if not content_type.lower().startswith(_JSON_CONTENT_TYPE):
        raise ContentTypeError(content_type, response.status_code)


def assert_object(value: object, label: str) -> None:
    """Raise :class:`ApiPayloadError` unless ``value`` encodes as a JSON object."""
    if isinstance(value, (dict, msgspec.Struct)):
        return
    raise ApiPayloadError.not_an_object(label, value)


def pretty_error(noun: str, verb: str, status_code: int) -> ApiResponseError | None:
    """Return a readable error for common HTTP failures, else ``None``.

    ``noun`` and ``verb`` customise the message, e.g. ``noun="Template"``
    and ``verb="create"``.
    """
    if status_code == _HTTP_NOT_FOUND:
        return ApiResponseError.not_found(noun, verb)
    if status_code == _HTTP_UNAUTHORIZED:
        return ApiResponseError.unauthorized(noun, verb)
    if status_code == _HTTP_FORBIDDEN:
        # Usually a mistyped endpoint URL rather than a permissions problem.
        return ApiResponseError.forbidden(noun, verb)
    return None


def decode_body(body: bytes, body_type: type[_T]) -> _T:
    """Decode a JSON response body, mapping failures to ResponseShapeError."""
    try:
        return msgspec.json.decode(body, type=body_type)
    except msgspec.DecodeError as exc:
        raise ResponseShapeError.invalid_json(body, str(exc)) from exc


def raise_for_api_error(response: ApiResponse, *, noun: str, verb: str) -> None:
    """Raise :class:`ApiResponseError` when ``response`` reports a failure."""
    if response.ok:
        return
    friendly = pretty_error(noun, verb, response.status_code)
    if friendly is not None:
        raise friendly
    raise ApiResponseError.from_details(response.status_code, response.errors)


class ApiClient:
    """Synchronous client for one API resource path.

    Parameters
    ----------
    config
        API configuration holding the base URL and credentials.
    path
        Resource path appended to ``config.base_url``, e.g.
        ``/api/v1/message-events``.
    http_client
        Optional ``httpx.Client``. When omitted, the instance creates and
        owns a client using :func:`build_ssl_context`.

    """

    def __init__(
        self,
        config: ApiConfig,
        path: str,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client for ``path`` with the provided configuration."""
        self._config = config
        self._path = path
        self._headers = {
            "Authorization": config.api_key,
            "User-Agent": config.user_agent,
        }
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=config.timeout_s,
            verify=build_ssl_context(),
        )

    @property
    def config(self) -> ApiConfig:
        """Read-only access to the client configuration."""
        return self._config

    @property
    def path(self) -> str:
        """Resource path this client is bound to."""
        return self._path

    def url_for(self, suffix: str = "") -> str:
        """Return the absolute URL for ``suffix`` below the resource path."""
        return f"{self._config.base_url}{self._path}{suffix}"

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> typ.Self:
        """Return the client for use as a context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: types.TracebackType | None,
    ) -> None:
        """Close owned HTTP resources on exit."""
        self.close()

    def get(self, url: str) -> httpx.Response:
        """Send an authenticated GET request to ``url``.

        Query parameters must already be encoded into ``url``. Network and
        TLS failures propagate as ``httpx`` exceptions.
        """
        return self._client.get(url, headers=self._headers)

    def post(self, url: str, payload: object) -> httpx.Response:
        """Send an authenticated POST with ``payload`` encoded as JSON."""
        assert_object(payload, "request payload")
        return self._client.post(
            url,
            content=msgspec.json.encode(payload),
            headers={**self._headers, "Content-Type": _JSON_CONTENT_TYPE},
        )

    def delete(self, url: str) -> httpx.Response:
        """Send an authenticated DELETE request to ``url``."""
        return self._client.delete(url, headers=self._headers)

    def parse_response(self, response: httpx.Response) -> ApiResponse:
        """Validate and decode ``response`` into a fresh :class:`ApiResponse`.

        Raises
        ------
        ContentTypeError
            If the response is not JSON.
        ResponseShapeError
            If the body is not a JSON object.

        """
        assert_json(response)
        body = response.content
        parsed = decode_body(body, ResponseBody)
        return ApiResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=body,
            results=parsed.results,
            errors=tuple(parsed.errors),
        )
