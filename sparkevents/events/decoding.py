"""Classification and decoding of heterogeneous event batches.

Records arrive as raw JSON objects whose shape depends on their ``type``
field. Each record is classified with a cheap pattern scan, matched against
the registry, then strictly decoded into its event class.

The scan can hit a ``"type"`` value nested inside the record, so every hit is
confirmed against the record's own top-level ``type`` before the registry is
consulted. The strict decode then checks the same value through the struct
tag.
"""

from __future__ import annotations

import dataclasses
import logging
import re
import typing as typ

import msgspec

from sparkevents.observability import LogEventType

from .errors import EventDecodeError, EventKindError
from .registry import lookup

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Event

logger = logging.getLogger(__name__)

# \w on a bytes pattern is ASCII-only: [A-Za-z0-9_]
_KIND_PATTERN = re.compile(rb'"type":\s*"(\w+)"')
_KIND_WORD = re.compile(r"\w+", re.ASCII)

RawRecord = bytes | str | msgspec.Raw


class _KindField(msgspec.Struct):
    """Top-level ``type`` field of a record; all other fields are ignored."""

    type: str | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class EventBatch:
    """Decoded events plus a tally of records skipped for unknown kinds.

    Attributes
    ----------
    events
        Decoded events in the order their records appeared.
    skipped
        Number of dropped records per unrecognised kind-tag.

    """

    events: tuple[Event, ...] = ()
    skipped: cabc.Mapping[str, int] = dataclasses.field(default_factory=dict)

    @property
    def skipped_count(self) -> int:
        """Return the total number of records dropped for unknown kinds."""
        return sum(self.skipped.values())

    def __len__(self) -> int:
        """Return the number of decoded events."""
        return len(self.events)

    def __iter__(self) -> cabc.Iterator[Event]:
        """Iterate over decoded events in order."""
        return iter(self.events)

    def __getitem__(self, index: int) -> Event:
        """Return the decoded event at ``index``."""
        return self.events[index]


def _as_bytes(record: RawRecord) -> bytes:
    if isinstance(record, msgspec.Raw):
        return bytes(record)
    if isinstance(record, str):
        return record.encode("utf-8")
    return record


def _top_level_kind(raw: bytes) -> str:
    try:
        head = msgspec.json.decode(raw, type=_KindField)
    except msgspec.DecodeError as exc:
        raise EventKindError.not_found(raw) from exc
    if head.type is None or _KIND_WORD.fullmatch(head.type) is None:
        raise EventKindError.not_found(raw)
    return head.type


def extract_kind(record: RawRecord) -> str:
    """Return the kind-tag of a raw record without fully decoding it.

    Only the record's own top-level ``type`` counts; ``"type"`` keys inside
    nested objects such as ``rcpt_meta`` are ignored.

    Raises
    ------
    EventKindError
        If the record has no top-level ``"type": "<word>"`` pair, including
        when the value holds characters outside ``[A-Za-z0-9_]``.

    """
    raw = _as_bytes(record)
    if _KIND_PATTERN.search(raw) is None:
        raise EventKindError.not_found(raw)
    return _top_level_kind(raw)


def decode_event(record: RawRecord, event_type: type[Event]) -> Event:
    """Decode one raw record into ``event_type``.

    Raises
    ------
    EventDecodeError
        If the record does not match the shape of ``event_type``.

    """
    kind = typ.cast("str", event_type.__struct_config__.tag)
    try:
        return msgspec.json.decode(_as_bytes(record), type=event_type)
    except msgspec.DecodeError as exc:
        raise EventDecodeError(kind, str(exc)) from exc


def decode_events(records: cabc.Iterable[RawRecord]) -> EventBatch:
    """Decode an ordered batch of raw records into typed events.

    Records of unregistered kinds are dropped and counted; every other
    failure aborts the batch so no partially decoded result escapes.

    Raises
    ------
    EventKindError
        If any record carries no usable kind-tag.
    EventDecodeError
        If a record of a registered kind fails to decode.

    """
    events: list[Event] = []
    skipped: dict[str, int] = {}
    for record in records:
        kind = extract_kind(record)
        event_type = lookup(kind)
        if event_type is None:
            logger.warning(
                "[%s] kind=%s reason=unregistered",
                LogEventType.EVENT_SKIPPED,
                kind,
            )
            skipped[kind] = skipped.get(kind, 0) + 1
            continue
        events.append(decode_event(record, event_type))
    return EventBatch(events=tuple(events), skipped=skipped)


__all__ = ["EventBatch", "RawRecord", "decode_event", "decode_events", "extract_kind"]
