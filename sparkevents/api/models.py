"""Typed structures for API responses."""

from __future__ import annotations

import dataclasses
import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    import httpx


class ApiErrorDetail(msgspec.Struct, kw_only=True, frozen=True):
    """Single entry of an API ``errors`` array.

    Attributes
    ----------
    message : str
        Short error message.
    code : str
        API-specific error code.
    description : str
        Longer explanation of the failure.
    part : str, optional
        Part of the request the error relates to.
    line : int, optional
        Line number within ``part``, when reported.

    """

    message: str = ""
    code: str = ""
    description: str = ""
    part: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        """Render the detail the way the API documentation prints it."""
        parts = [f"{self.code}: {self.message}"]
        if self.description:
            parts.append(f"({self.description})")
        if self.part is not None:
            location = f"part {self.part}"
            if self.line is not None:
                location = f"{location}, line {self.line}"
            parts.append(f"[{location}]")
        return " ".join(parts)


class ResponseBody(msgspec.Struct, kw_only=True):
    """Generic API response body with optional results and errors."""

    results: typ.Any = None
    errors: list[ApiErrorDetail] = msgspec.field(default_factory=list)


@dataclasses.dataclass(frozen=True, slots=True)
class ApiResponse:
    """Outcome of a single API call.

    Each call builds its own instance, so one client may be shared between
    callers without responses bleeding into each other.
    """

    status_code: int
    headers: httpx.Headers
    body: bytes
    results: typ.Any = None
    errors: tuple[ApiErrorDetail, ...] = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` for 2xx responses without reported errors."""
        return 200 <= self.status_code < 300 and not self.errors
