"""Client for the Message Events API."""

from __future__ import annotations

import logging
import typing as typ

import httpx
import msgspec

from sparkevents.api.client import (
    ApiClient,
    assert_json,
    decode_body,
    pretty_error,
    raise_for_api_error,
)
from sparkevents.api.errors import ResponseShapeError
from sparkevents.api.models import ApiErrorDetail, ApiResponse
from sparkevents.events.decoding import EventBatch, decode_events
from sparkevents.events.errors import InvalidEventKindError
from sparkevents.events.registry import is_valid_kind
from sparkevents.observability import LogEventType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from sparkevents.api.config import ApiConfig

logger = logging.getLogger(__name__)

_SAMPLES_PATH = "/events/samples"
_SAMPLES_NOUN = "Message events samples"
_SAMPLES_VERB = "fetch"


class _SamplesEnvelope(msgspec.Struct, kw_only=True):
    """Samples response body; records stay raw until classified."""

    results: list[msgspec.Raw] | None = None
    errors: list[ApiErrorDetail] = msgspec.field(default_factory=list)


def message_events_path(api_version: int) -> str:
    """Return the Message Events resource path for ``api_version``."""
    return f"/api/v{api_version}/message-events"


def build_samples_url(base: str, kinds: cabc.Iterable[str] | None = None) -> str:
    """Build the samples URL below the Message Events resource ``base``.

    Parameters
    ----------
    base
        Absolute Message Events URL, e.g.
        ``https://api.sparkpost.com/api/v1/message-events``.
    kinds
        Optional kind-tags restricting the samples returned. ``None`` or an
        empty iterable means no restriction. Duplicates are dropped, keeping
        the first occurrence. A single ``str`` is treated as one kind.

    Raises
    ------
    InvalidEventKindError
        For the first kind that is not a supported event type.

    """
    url = f"{base}{_SAMPLES_PATH}"
    if kinds is None:
        return url
    if isinstance(kinds, str):
        kinds = (kinds,)

    requested: list[str] = []
    for kind in kinds:
        if not is_valid_kind(kind):
            raise InvalidEventKindError(kind)
        if kind not in requested:
            requested.append(kind)
    if not requested:
        return url
    return str(httpx.URL(url, params={"events": ",".join(requested)}))


def _log_failure(status_code: int, details: str) -> None:
    logger.error(
        "[%s] status_code=%d errors=%s",
        LogEventType.SAMPLES_FAILED,
        status_code,
        details,
    )


def parse_samples_response(response: httpx.Response) -> EventBatch:
    """Validate a samples response and decode its records.

    Raises
    ------
    ContentTypeError
        If the response is not JSON; the body is left unparsed.
    ApiResponseError
        If the response status is not 2xx or the body reports errors.
    ResponseShapeError
        If the body is not valid JSON or has no ``results`` field.
    EventKindError
        If any record has no usable kind-tag.
    EventDecodeError
        If a record of a supported kind fails to decode.

    """
    assert_json(response)
    # 401/403/404 bodies are not decoded; their message comes from the status
    friendly = pretty_error(_SAMPLES_NOUN, _SAMPLES_VERB, response.status_code)
    if friendly is not None:
        _log_failure(response.status_code, "no details")
        raise friendly

    envelope = decode_body(response.content, _SamplesEnvelope)
    api_response = ApiResponse(
        status_code=response.status_code,
        headers=response.headers,
        body=response.content,
        errors=tuple(envelope.errors),
    )
    if not api_response.ok:
        _log_failure(
            response.status_code,
            "; ".join(str(detail) for detail in envelope.errors) or "no details",
        )
        raise_for_api_error(api_response, noun=_SAMPLES_NOUN, verb=_SAMPLES_VERB)

    if envelope.results is None:
        raise ResponseShapeError.missing("results")
    return decode_events(envelope.results)


class MessageEventsClient(ApiClient):
    """Handle for the Message Events API.

    Parameters
    ----------
    config
        API configuration; ``config.api_version`` selects the resource path.
    http_client
        Optional ``httpx.Client``. When omitted, the instance creates and
        owns its own client.

    Examples
    --------
    >>> from sparkevents import ApiConfig, MessageEventsClient
    >>> config = ApiConfig(base_url="https://api.sparkpost.com", api_key="...")
    >>> with MessageEventsClient(config) as client:
    ...     batch = client.samples(["delivery", "bounce"])  # doctest: +SKIP

    """

    def __init__(
        self,
        config: ApiConfig,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Bind the client to the Message Events resource path."""
        super().__init__(
            config,
            message_events_path(config.api_version),
            http_client=http_client,
        )

    def samples_url(self, kinds: cabc.Iterable[str] | None = None) -> str:
        """Return the samples URL, validating ``kinds`` against the registry."""
        return build_samples_url(self.url_for(), kinds)

    def samples(self, kinds: cabc.Iterable[str] | None = None) -> EventBatch:
        """Request example event data, optionally limited to ``kinds``.

        Every requested kind is validated before the request is sent. The
        returned batch keeps the response order and counts records of kinds
        this client does not support instead of failing on them.

        Raises
        ------
        InvalidEventKindError
            If a requested kind is unsupported; no request is sent.
        httpx.HTTPError
            If the request fails at the transport level.

        """
        url = self.samples_url(kinds)
        batch = parse_samples_response(self.get(url))
        logger.info(
            "[%s] events_decoded=%d events_skipped=%d",
            LogEventType.SAMPLES_FETCHED,
            len(batch),
            batch.skipped_count,
        )
        return batch


__all__ = [
    "MessageEventsClient",
    "build_samples_url",
    "message_events_path",
    "parse_samples_response",
]
