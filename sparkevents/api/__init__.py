"""Authenticated HTTP access to the messaging API."""

from __future__ import annotations

from .client import (
    ApiClient,
    assert_json,
    assert_object,
    build_ssl_context,
    pretty_error,
    raise_for_api_error,
)
from .config import ApiConfig
from .errors import (
    ApiConfigError,
    ApiPayloadError,
    ApiResponseError,
    ContentTypeError,
    ResponseShapeError,
)
from .models import ApiErrorDetail, ApiResponse

__all__ = [
    "ApiClient",
    "ApiConfig",
    "ApiConfigError",
    "ApiErrorDetail",
    "ApiPayloadError",
    "ApiResponse",
    "ApiResponseError",
    "ContentTypeError",
    "ResponseShapeError",
    "assert_json",
    "assert_object",
    "build_ssl_context",
    "pretty_error",
    "raise_for_api_error",
]
