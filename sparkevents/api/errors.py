"""Errors raised by the HTTP API layer."""

from __future__ import annotations

import typing as typ

from sparkevents.errors import SparkEventsError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ApiErrorDetail

# Body preview length for error messages
_CONTENT_PREVIEW_LIMIT = 100


def _preview(content: bytes | str) -> str:
    if isinstance(content, bytes):
        content = content.decode("utf-8", "replace")
    text = content
    if len(text) > _CONTENT_PREVIEW_LIMIT:
        return text[:_CONTENT_PREVIEW_LIMIT] + "..."
    return text


class ApiConfigError(SparkEventsError):
    """Raised when API client configuration is invalid."""

    @classmethod
    def missing(cls, key: str) -> ApiConfigError:
        """Return an error for a required configuration key that is absent."""
        return cls(f"{key} is required for api config")

    @classmethod
    def missing_api_key(cls) -> ApiConfigError:
        """Return an error when no API key is set in the environment."""
        return cls("SPARKEVENTS_API_KEY environment variable is required")

    @classmethod
    def empty(cls, field: str) -> ApiConfigError:
        """Return an error for a configuration value that must be non-empty."""
        return cls(f"{field} must be non-empty")

    @classmethod
    def invalid_parameter(
        cls, parameter_name: str, value: object, constraint: str
    ) -> ApiConfigError:
        """Return an error for a configuration value that fails validation.

        Parameters
        ----------
        parameter_name
            The name of the parameter that failed validation.
        value
            The invalid value that was provided.
        constraint
            A description of the valid value requirements.

        Returns
        -------
        ApiConfigError
            Error with formatted message describing the invalid parameter.

        """
        return cls(f"Invalid {parameter_name} '{value}'. {constraint}")

    @classmethod
    def invalid_api_version(cls, value: object) -> ApiConfigError:
        """Return an error for an API version that is not a positive integer."""
        return cls.invalid_parameter(
            "api_version", value, "Must be a positive integer"
        )

    @classmethod
    def invalid_timeout(cls, value: object) -> ApiConfigError:
        """Return an error for a timeout that is not a positive number."""
        return cls.invalid_parameter("timeout_s", value, "Must be a positive number")


class ContentTypeError(SparkEventsError):
    """Raised when a response does not carry a JSON content type.

    Attributes
    ----------
    content_type
        The ``Content-Type`` header received, or an empty string.
    status_code
        HTTP status code of the rejected response.

    """

    def __init__(self, content_type: str, status_code: int) -> None:
        """Capture the offending content type and status code."""
        self.content_type = content_type
        self.status_code = status_code
        super().__init__(
            f"Expected json, got [{content_type}] with code {status_code}"
        )


class ApiResponseError(SparkEventsError):
    """Raised when the API reports an error or returns a non-2xx status.

    Attributes
    ----------
    status_code
        HTTP status code from the API response, if available.
    errors
        Error details decoded from the response body.

    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: cabc.Sequence[ApiErrorDetail] = (),
    ) -> None:
        """Initialise the error with message, status code and error details."""
        self.status_code = status_code
        self.errors = tuple(errors)
        super().__init__(message)

    @classmethod
    def not_found(cls, noun: str, verb: str) -> ApiResponseError:
        """Return an error for a 404 response."""
        return cls(f"{noun} does not exist, {verb} failed.", status_code=404)

    @classmethod
    def unauthorized(cls, noun: str, verb: str) -> ApiResponseError:
        """Return an error for a 401 response."""
        return cls(
            f"{noun} {verb} failed, permission denied. Check your API key.",
            status_code=401,
        )

    @classmethod
    def forbidden(cls, noun: str, verb: str) -> ApiResponseError:
        """Return an error for a 403 response, usually a mistyped API path."""
        return cls(
            f"{noun} {verb} failed. Are you using the right API path?",
            status_code=403,
        )

    @classmethod
    def from_details(
        cls, status_code: int, errors: cabc.Sequence[ApiErrorDetail]
    ) -> ApiResponseError:
        """Return an error summarising the API ``errors`` payload."""
        if not errors:
            return cls(f"API HTTP error {status_code}", status_code=status_code)
        summary = "; ".join(str(detail) for detail in errors)
        return cls(
            f"API HTTP {status_code} reported errors: {summary}",
            status_code=status_code,
            errors=errors,
        )


class ResponseShapeError(SparkEventsError):
    """Raised when a response body is not shaped as expected."""

    @classmethod
    def missing(cls, field: str) -> ResponseShapeError:
        """Return an error for a missing response field."""
        return cls(f"API response missing expected field: {field}")

    @classmethod
    def invalid_json(cls, content: bytes | str, detail: str) -> ResponseShapeError:
        """Return an error for a body that failed to parse, with a preview."""
        return cls(f"Failed to parse API response: [{detail}] {_preview(content)}")


class ApiPayloadError(SparkEventsError):
    """Raised when a request payload cannot be sent as a JSON object."""

    @classmethod
    def not_an_object(cls, label: str, value: object) -> ApiPayloadError:
        """Return an error for a payload that is not key/value pairs."""
        kind = type(value).__name__
        return cls(f"expected key/val pairs for {label}, got [{kind}]")
