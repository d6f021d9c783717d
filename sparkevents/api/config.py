"""Configuration for the messaging API client."""

from __future__ import annotations

import dataclasses
import os
import typing as typ

from sparkevents.api.errors import ApiConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

# Default configuration values - single source of truth
_DEFAULT_BASE_URL = "https://api.sparkpost.com"
_DEFAULT_API_VERSION = 1
_DEFAULT_TIMEOUT_S = 30.0
_DEFAULT_USER_AGENT = "sparkevents/0.1"


def _parse_api_version(raw: str | int) -> int:
    if isinstance(raw, bool):
        raise ApiConfigError.invalid_api_version(raw)
    try:
        version = int(raw)
    except (TypeError, ValueError) as exc:
        raise ApiConfigError.invalid_api_version(raw) from exc
    if version <= 0:
        raise ApiConfigError.invalid_api_version(raw)
    return version


@dataclasses.dataclass(frozen=True, slots=True)
class ApiConfig:
    """Everything needed to make an authenticated API request.

    Attributes
    ----------
    base_url
        Scheme and host of the API, without a trailing slash.
    api_key
        Key sent verbatim in the ``Authorization`` header.
    api_version
        Major API version used to build request paths.
    timeout_s
        Request timeout in seconds.
    user_agent
        ``User-Agent`` header value.

    """

    base_url: str
    api_key: str
    api_version: int = _DEFAULT_API_VERSION
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = _DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        """Validate values and normalise the base URL."""
        if not self.base_url.strip():
            raise ApiConfigError.empty("base_url")
        if not self.api_key.strip():
            raise ApiConfigError.empty("api_key")
        if isinstance(self.api_version, bool) or self.api_version <= 0:
            raise ApiConfigError.invalid_api_version(self.api_version)
        if self.timeout_s <= 0:
            raise ApiConfigError.invalid_timeout(self.timeout_s)
        # frozen dataclass; bypass __setattr__ for the normalised value
        object.__setattr__(self, "base_url", self.base_url.strip().rstrip("/"))

    @classmethod
    def from_mapping(cls, values: cabc.Mapping[str, str]) -> ApiConfig:
        """Build configuration from a ``baseurl``/``apikey``/``apiver`` mapping.

        All three keys are required; ``apiver`` must be a positive integer.

        Raises
        ------
        ApiConfigError
            If a key is missing or a value is invalid.

        """
        for key, label in (
            ("baseurl", "BaseUrl"),
            ("apikey", "ApiKey"),
            ("apiver", "ApiVer"),
        ):
            if key not in values:
                raise ApiConfigError.missing(label)
        return cls(
            base_url=values["baseurl"],
            api_key=values["apikey"],
            api_version=_parse_api_version(values["apiver"]),
        )

    @staticmethod
    def _parse_timeout_from_env() -> float:
        """Parse and validate the timeout from the environment."""
        raw_timeout = os.environ.get("SPARKEVENTS_TIMEOUT_S")
        if raw_timeout is None:
            return _DEFAULT_TIMEOUT_S

        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ApiConfigError.invalid_timeout(raw_timeout) from exc

        if timeout <= 0:
            raise ApiConfigError.invalid_timeout(raw_timeout)

        return timeout

    @classmethod
    def from_env(cls) -> ApiConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``SPARKEVENTS_API_KEY``: Required API key
        - ``SPARKEVENTS_BASE_URL``: Optional base URL override
        - ``SPARKEVENTS_API_VERSION``: Optional API version (positive integer)
        - ``SPARKEVENTS_TIMEOUT_S``: Optional request timeout in seconds

        Raises
        ------
        ApiConfigError
            If the API key is missing or any value is invalid.

        """
        raw_api_key = os.environ.get("SPARKEVENTS_API_KEY")
        if raw_api_key is None:
            raise ApiConfigError.missing_api_key()
        api_key = raw_api_key.strip()
        if not api_key:
            raise ApiConfigError.empty("api_key")

        base_url = os.environ.get("SPARKEVENTS_BASE_URL", _DEFAULT_BASE_URL)
        api_version = _parse_api_version(
            os.environ.get("SPARKEVENTS_API_VERSION", str(_DEFAULT_API_VERSION))
        )

        return cls(
            base_url=base_url,
            api_key=api_key,
            api_version=api_version,
            timeout_s=cls._parse_timeout_from_env(),
        )
