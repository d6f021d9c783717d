"""Structured log event types for the client.

Log records use lazy interpolation and a ``[event.type] key=value`` layout so
they stay parseable by log aggregators. Records of unknown kinds are logged
at WARNING, completed sample fetches at INFO and API failures at ERROR.
Handlers are left to the application.
"""

from __future__ import annotations

import enum


class LogEventType(enum.StrEnum):
    """Structured log event types emitted by the client."""

    EVENT_SKIPPED = "events.skipped"
    SAMPLES_FETCHED = "samples.fetched"
    SAMPLES_FAILED = "samples.failed"


__all__ = ["LogEventType"]
