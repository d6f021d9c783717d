"""Errors raised while classifying and decoding event records."""

from __future__ import annotations

from sparkevents.errors import SparkEventsError

# Record preview length for error messages
_RECORD_PREVIEW_LIMIT = 120


def _preview(record: bytes) -> str:
    text = record.decode("utf-8", "replace")
    if len(text) > _RECORD_PREVIEW_LIMIT:
        return text[:_RECORD_PREVIEW_LIMIT] + "..."
    return text


class EventKindError(SparkEventsError):
    """Raised when a raw record carries no usable ``type`` discriminator.

    A single unclassifiable record invalidates the whole batch.
    """

    @classmethod
    def not_found(cls, record: bytes) -> EventKindError:
        """Return an error for a record without a ``"type": "<word>"`` field."""
        return cls(f"No event type found in record: {_preview(record)}")


class EventDecodeError(SparkEventsError):
    """Raised when a record of a known kind does not match its event type.

    Attributes
    ----------
    kind
        Kind-tag of the record that failed to decode.

    """

    def __init__(self, kind: str, detail: str) -> None:
        """Capture the failing kind and the underlying decoder message."""
        self.kind = kind
        self.detail = detail
        super().__init__(f"error parsing [{kind}]: {detail}")


class InvalidEventKindError(SparkEventsError, ValueError):
    """Raised when a requested event kind is not supported.

    Attributes
    ----------
    kind
        The rejected kind-tag.

    """

    def __init__(self, kind: str) -> None:
        """Record the rejected kind-tag."""
        self.kind = kind
        super().__init__(f"Invalid event type [{kind}]")
