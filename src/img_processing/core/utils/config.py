"""Client configuration model."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from img_processing.core.utils.constants import (
    API_KEY_PREFIXES,
    DEFAULT_BASE_URL,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
)


class ClientConfig(BaseModel):
    """Validated settings shared by every request issued by a client.

    The API key is checked locally: it must carry one of the environment
    prefixes (`live_` or `test_`). Anything else is rejected before the
    first request is attempted.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    api_key: str = Field(..., min_length=1, description="IMG Processing API key")
    base_url: str = Field(DEFAULT_BASE_URL, description="API root URL")
    timeout: float | None = Field(
        None,
        gt=0,
        description="Per-request timeout in seconds, None keeps the transport default",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, value: str) -> str:
        if not value.startswith(API_KEY_PREFIXES):
            raise ValueError(
                f"API key must start with one of: {', '.join(API_KEY_PREFIXES)}"
            )
        return value

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, value: str) -> str:
        """Always end the base URL with a slash so relative paths join cleanly."""
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return value.rstrip("/") + "/"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load settings from IMG_PROCESSING_* environment variables."""
        timeout = os.getenv(ENV_TIMEOUT)
        return cls(
            api_key=os.getenv(ENV_API_KEY, ""),
            base_url=os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL,
            timeout=float(timeout) if timeout else None,
        )
