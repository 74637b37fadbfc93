"""
Configuration for the RelayKit SDK.
"""
import os
import urllib.parse
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

DEFAULT_RELAY_URL = "https://api.gelato.cloud"

ENV_API_KEY = "RELAYKIT_API_KEY"
ENV_RELAY_URL = "RELAYKIT_RELAY_URL"
ENV_TIMEOUT = "RELAYKIT_TIMEOUT"
ENV_RETRY_COUNT = "RELAYKIT_RETRY_COUNT"


class RelayConfig(BaseModel):
    """
    Settings for talking to the relay service.

    Attributes:
        api_key: API key sent with every relay request
        base_url: Relay service base URL (https required unless localhost)
        timeout: HTTP timeout in seconds
        retry_count: Number of HTTP-layer retries for status queries
        backoff_factor: Backoff factor between HTTP retries
    """
    api_key: str = Field(..., min_length=1)
    base_url: str = DEFAULT_RELAY_URL
    timeout: float = Field(30, gt=0)
    retry_count: int = Field(3, ge=0)
    backoff_factor: float = Field(0.5, ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, url: str) -> str:
        parsed = urllib.parse.urlparse(url)
        # Check if it's a localhost or 127.0.0.1 address (with or without port)
        host = parsed.hostname or ''
        is_local = host in ('localhost', '127.0.0.1')
        if parsed.scheme != 'https' and not is_local:
            raise ValueError(f"base_url must use https:// for security (got: {parsed.scheme}://)")
        if not parsed.netloc:
            raise ValueError(f"base_url has no host: {url}")
        return url.rstrip('/')

    def __repr__(self) -> str:
        # Keep the API key out of logs and tracebacks
        return (
            f"RelayConfig(base_url={self.base_url!r}, timeout={self.timeout}, "
            f"retry_count={self.retry_count}, backoff_factor={self.backoff_factor})"
        )

    __str__ = __repr__

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "RelayConfig":
        """
        Build a config from RELAYKIT_* environment variables

        Args:
            api_key: Overrides RELAYKIT_API_KEY when given

        Returns:
            RelayConfig instance

        Raises:
            ConfigurationError: If the API key is missing or a value is invalid
        """
        api_key = api_key or os.environ.get(ENV_API_KEY)
        if not api_key:
            raise ConfigurationError(f"Relay API key is required (set {ENV_API_KEY})")

        values = {"api_key": api_key}
        if os.environ.get(ENV_RELAY_URL):
            values["base_url"] = os.environ[ENV_RELAY_URL]
        if os.environ.get(ENV_TIMEOUT):
            values["timeout"] = os.environ[ENV_TIMEOUT]
        if os.environ.get(ENV_RETRY_COUNT):
            values["retry_count"] = os.environ[ENV_RETRY_COUNT]

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid relay configuration: {e}") from e
