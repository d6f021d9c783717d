"""Client library for the SparkPost Message Events API."""

from __future__ import annotations

from .api import (
    ApiClient,
    ApiConfig,
    ApiConfigError,
    ApiErrorDetail,
    ApiResponse,
    ApiResponseError,
    ContentTypeError,
    ResponseShapeError,
)
from .errors import SparkEventsError
from .events import (
    Event,
    EventBatch,
    EventDecodeError,
    EventKindError,
    InvalidEventKindError,
    decode_events,
    event_kinds,
)
from .message_events import MessageEventsClient, build_samples_url

__all__ = [
    "ApiClient",
    "ApiConfig",
    "ApiConfigError",
    "ApiErrorDetail",
    "ApiResponse",
    "ApiResponseError",
    "ContentTypeError",
    "Event",
    "EventBatch",
    "EventDecodeError",
    "EventKindError",
    "InvalidEventKindError",
    "MessageEventsClient",
    "ResponseShapeError",
    "SparkEventsError",
    "build_samples_url",
    "decode_events",
    "event_kinds",
]
