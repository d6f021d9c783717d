"""Typed message events and the batch decoder that produces them."""

from __future__ import annotations

from .decoding import EventBatch, decode_event, decode_events, extract_kind
from .errors import EventDecodeError, EventKindError, InvalidEventKindError
from .models import (
    EVENT_TYPES,
    AmpClick,
    AmpInitialOpen,
    AmpOpen,
    Bounce,
    Click,
    Delay,
    Delivery,
    EngagementEvent,
    Event,
    FailureEvent,
    GenerationFailure,
    GenerationRejection,
    GeoIP,
    InitialOpen,
    Injection,
    LinkUnsubscribe,
    ListUnsubscribe,
    MessageEvent,
    Open,
    OutOfBand,
    PolicyRejection,
    RelayDelivery,
    RelayEvent,
    RelayInjection,
    RelayPermfail,
    RelayRejection,
    RelayTempfail,
    SpamComplaint,
)
from .registry import event_kinds, is_valid_kind, lookup

__all__ = [
    "EVENT_TYPES",
    "AmpClick",
    "AmpInitialOpen",
    "AmpOpen",
    "Bounce",
    "Click",
    "Delay",
    "Delivery",
    "EngagementEvent",
    "Event",
    "EventBatch",
    "EventDecodeError",
    "EventKindError",
    "FailureEvent",
    "GenerationFailure",
    "GenerationRejection",
    "GeoIP",
    "InitialOpen",
    "Injection",
    "InvalidEventKindError",
    "LinkUnsubscribe",
    "ListUnsubscribe",
    "MessageEvent",
    "Open",
    "OutOfBand",
    "PolicyRejection",
    "RelayDelivery",
    "RelayEvent",
    "RelayInjection",
    "RelayPermfail",
    "RelayRejection",
    "RelayTempfail",
    "SpamComplaint",
    "decode_event",
    "decode_events",
    "event_kinds",
    "extract_kind",
    "is_valid_kind",
    "lookup",
]
