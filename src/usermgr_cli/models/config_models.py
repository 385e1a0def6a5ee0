"""Configuration models for usermgr.

The config file is parsed into these models; unknown keys are rejected by
``ConfigService.set`` before anything is written back.
"""

from __future__ import annotations

from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator

from usermgr_cli.constants import DEFAULT_ENDPOINT

_http_url = TypeAdapter(AnyHttpUrl)


class APIConfig(BaseModel):
    """Remote collection configuration."""

    endpoint: str = Field(default=DEFAULT_ENDPOINT)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Require an http(s) URL with a valid host and port; strip trailing slashes."""
        if not v or not v.strip():
            raise ValueError("endpoint cannot be empty")
        v = v.strip()
        try:
            _http_url.validate_python(v)
        except ValidationError as exc:
            raise ValueError(f"endpoint must be an http(s) URL: {exc.errors()[0]['msg']}") from None
        return v.rstrip("/")


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml"] = Field(default="pretty")


class AppConfig(BaseModel):
    """Main usermgr configuration"""

    api: APIConfig = Field(default_factory=APIConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
