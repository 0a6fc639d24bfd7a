"""Pydantic models describing lookup configuration."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from .. import NAME, VERSION
from ..rate_limit import MAX_REQUESTS_PER_SECOND


class LookupConfig(BaseModel):
    """Settings for the catalog endpoint, transport and pacing."""

    catalog_host: str = "rubygems.org"
    scheme: Literal["https", "http"] = "https"
    timeout: float = Field(default=10.0, gt=0, description="Transport timeout in seconds.")
    max_requests_per_second: int = Field(default=MAX_REQUESTS_PER_SECOND, ge=1)
    pacing_delay: float = Field(default=1.0, ge=0, description="Pause between batches in seconds.")
    output_format: Literal["emoji", "json"] = "emoji"
    user_agent: str = f"{NAME}/{VERSION}"

    @field_validator("catalog_host", mode="before")
    @classmethod
    def _strip_host(cls, value: Any) -> str:
        text = str(value or "").strip().strip("/")
        if "://" in text:
            text = text.split("://", 1)[1]
        if not text:
            raise ValueError("catalog_host cannot be empty")
        return text

    @field_validator("max_requests_per_second")
    @classmethod
    def _cap_rate(cls, value: int) -> int:
        if value > MAX_REQUESTS_PER_SECOND:
            raise ValueError(
                f"max_requests_per_second cannot exceed the catalog limit of {MAX_REQUESTS_PER_SECOND}"
            )
        return value

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.catalog_host}"

    def api_url(self, name: str) -> str:
        return f"{self.base_url}/api/v1/gems/{name}.json"

    def gem_page_url(self, name: str) -> str:
        return f"{self.base_url}/gems/{name}"


__all__ = ["LookupConfig"]
