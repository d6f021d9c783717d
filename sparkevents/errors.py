"""Root exception for the sparkevents client."""

from __future__ import annotations


class SparkEventsError(Exception):
    """Base exception for all sparkevents errors.

    This provides a single catch point for every failure raised by the
    client itself. Transport failures from httpx are not wrapped.
    """
