"""Registry mapping kind-tags to event classes."""

from __future__ import annotations

import types
import typing as typ

from .models import EVENT_TYPES, Event

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _build_registry(
    event_types: cabc.Iterable[type[Event]],
) -> cabc.Mapping[str, type[Event]]:
    registry: dict[str, type[Event]] = {}
    for event_type in event_types:
        kind = event_type.__struct_config__.tag
        if not isinstance(kind, str):
            msg = f"{event_type.__name__} has no string kind-tag"
            raise TypeError(msg)
        if kind in registry:
            msg = f"duplicate event kind-tag: {kind}"
            raise ValueError(msg)
        registry[kind] = event_type
    return types.MappingProxyType(registry)


_REGISTRY = _build_registry(EVENT_TYPES)


def lookup(kind: str) -> type[Event] | None:
    """Return the event class registered for ``kind``, or ``None``.

    Matching is exact and case-sensitive. The returned class is also the
    factory for the kind's zero value.
    """
    return _REGISTRY.get(kind)


def is_valid_kind(kind: str) -> bool:
    """Return ``True`` when ``kind`` names a supported event type."""
    return kind in _REGISTRY


def event_kinds() -> tuple[str, ...]:
    """Return every supported kind-tag in sorted order."""
    return tuple(sorted(_REGISTRY))


__all__ = ["event_kinds", "is_valid_kind", "lookup"]
