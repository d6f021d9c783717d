"""Typed message event records.

Every concrete event is a frozen ``msgspec.Struct`` tagged on the ``type``
field, so the kind-tag travels with the record when encoded and is checked
again when a raw record is decoded into a concrete class. Calling an event
class without arguments produces its zero value.
"""

from __future__ import annotations

import typing as typ

import msgspec


class GeoIP(msgspec.Struct, kw_only=True, frozen=True, omit_defaults=True):
    """Approximate location of the recipient for engagement events."""

    country: str | None = None
    region: str | None = None
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class Event(
    msgspec.Struct,
    kw_only=True,
    frozen=True,
    omit_defaults=True,
    tag_field="type",
):
    """Fields shared by every message event.

    Attributes
    ----------
    event_id : str, optional
        Unique identifier of the event.
    timestamp : str, optional
        Time the event occurred, as reported by the API.
    customer_id : str, optional
        Account that owns the event.
    subaccount_id : int, optional
        Subaccount that owns the event, when applicable.

    """

    event_id: str | None = None
    timestamp: str | None = None
    customer_id: str | None = None
    subaccount_id: int | None = None

    @property
    def kind(self) -> str:
        """Return the kind-tag identifying this event's concrete type."""
        return typ.cast("str", self.__struct_config__.tag)


class MessageEvent(Event):
    """Fields shared by events tied to a single message and recipient."""

    message_id: str | None = None
    transmission_id: str | None = None
    campaign_id: str | None = None
    template_id: str | None = None
    template_version: str | None = None
    friendly_from: str | None = None
    msg_from: str | None = None
    rcpt_to: str | None = None
    raw_rcpt_to: str | None = None
    rcpt_type: str | None = None
    rcpt_meta: dict[str, typ.Any] = msgspec.field(default_factory=dict)
    rcpt_tags: list[str] = msgspec.field(default_factory=list)
    ip_pool: str | None = None
    sending_ip: str | None = None
    routing_domain: str | None = None
    subject: str | None = None
    msg_size: str | None = None
    num_retries: str | None = None
    queue_time: str | None = None
    click_tracking: bool | None = None
    open_tracking: bool | None = None
    transactional: str | None = None


class EngagementEvent(MessageEvent):
    """Fields shared by recipient engagement events (opens and clicks)."""

    ip_address: str | None = None
    user_agent: str | None = None
    geo_ip: GeoIP | None = None


class RelayEvent(Event):
    """Fields shared by inbound relay events."""

    relay_id: str | None = None
    origination: str | None = None
    msg_from: str | None = None
    rcpt_to: str | None = None
    remote_addr: str | None = None
    webhook_id: str | None = None


class FailureEvent(MessageEvent):
    """Fields shared by events reporting a failed or deferred message."""

    bounce_class: str | None = None
    error_code: str | None = None
    reason: str | None = None
    raw_reason: str | None = None


# Message events


class Delivery(MessageEvent, tag="delivery"):
    """Remote MTA acknowledged receipt of a message."""

    ip_address: str | None = None
    delv_method: str | None = None
    outbound_tls: str | None = None
    mailbox_provider: str | None = None
    mailbox_provider_region: str | None = None


class Bounce(FailureEvent, tag="bounce"):
    """Remote MTA permanently rejected a message."""

    delv_method: str | None = None
    device_token: str | None = None


class Delay(FailureEvent, tag="delay"):
    """Remote MTA temporarily rejected a message."""

    delv_method: str | None = None
    device_token: str | None = None


class Injection(MessageEvent, tag="injection"):
    """Message was received by or injected into the service."""

    recv_method: str | None = None


class OutOfBand(FailureEvent, tag="out_of_band"):
    """Remote MTA initially accepted a message but bounced it later."""


class PolicyRejection(FailureEvent, tag="policy_rejection"):
    """Message was rejected by the service because of a policy rule."""

    remote_addr: str | None = None


class SpamComplaint(MessageEvent, tag="spam_complaint"):
    """Recipient's mailbox provider reported the message as spam."""

    fbtype: str | None = None
    report_by: str | None = None
    report_to: str | None = None
    user_str: str | None = None


# Engagement events


class Click(EngagementEvent, tag="click"):
    """Recipient clicked a tracked link."""

    target_link_name: str | None = None
    target_link_url: str | None = None


class Open(EngagementEvent, tag="open"):
    """Recipient opened a message in a mail client."""


class InitialOpen(EngagementEvent, tag="initial_open"):
    """Top-of-message tracking pixel was rendered."""


class AmpClick(EngagementEvent, tag="amp_click"):
    """Recipient clicked a tracked link in an AMP message."""

    target_link_name: str | None = None
    target_link_url: str | None = None


class AmpOpen(EngagementEvent, tag="amp_open"):
    """Recipient opened an AMP message."""


class AmpInitialOpen(EngagementEvent, tag="amp_initial_open"):
    """Top-of-message tracking pixel of an AMP message was rendered."""


# Generation events


class GenerationFailure(FailureEvent, tag="generation_failure"):
    """Message generation failed for an intended recipient."""


class GenerationRejection(FailureEvent, tag="generation_rejection"):
    """Message generation was rejected by policy."""


# Unsubscribe events


class ListUnsubscribe(MessageEvent, tag="list_unsubscribe"):
    """Recipient unsubscribed using the List-Unsubscribe header."""

    mailfrom: str | None = None


class LinkUnsubscribe(MessageEvent, tag="link_unsubscribe"):
    """Recipient unsubscribed by clicking a tracked unsubscribe link."""

    mailfrom: str | None = None
    target_link_url: str | None = None
    user_agent: str | None = None


# Relay events


class RelayInjection(RelayEvent, tag="relay_injection"):
    """Inbound relay message was received."""


class RelayRejection(RelayEvent, tag="relay_rejection"):
    """Inbound relay message was rejected."""

    error_code: str | None = None
    reason: str | None = None
    raw_reason: str | None = None


class RelayDelivery(RelayEvent, tag="relay_delivery"):
    """Inbound relay message was posted to its webhook."""


class RelayTempfail(RelayEvent, tag="relay_tempfail"):
    """Posting an inbound relay message to its webhook failed temporarily."""

    error_code: str | None = None
    reason: str | None = None
    raw_reason: str | None = None
    num_retries: str | None = None


class RelayPermfail(RelayEvent, tag="relay_permfail"):
    """Posting an inbound relay message to its webhook failed permanently."""

    error_code: str | None = None
    reason: str | None = None
    raw_reason: str | None = None
    num_retries: str | None = None


EVENT_TYPES: tuple[type[Event], ...] = (
    Delivery,
    Bounce,
    Delay,
    Injection,
    OutOfBand,
    PolicyRejection,
    SpamComplaint,
    Click,
    Open,
    InitialOpen,
    AmpClick,
    AmpOpen,
    AmpInitialOpen,
    GenerationFailure,
    GenerationRejection,
    ListUnsubscribe,
    LinkUnsubscribe,
    RelayInjection,
    RelayRejection,
    RelayDelivery,
    RelayTempfail,
    RelayPermfail,
)
"""Closed set of event classes the client knows how to decode."""
