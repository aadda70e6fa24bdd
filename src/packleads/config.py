"""Configuration for Packleads."""

from __future__ import annotations

from datetime import timedelta

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LogLevel, Profile

__all__ = ["Config", "config"]


class Config(BaseSettings):
    """Configuration for the Packleads web service.

    All settings may be set through environment variables with the
    ``PACKLEADS_`` prefix, such as ``PACKLEADS_LOG_LEVEL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PACKLEADS_", case_sensitive=False
    )

    name: str = Field(
        "packleads",
        title="Application name",
        description="Used as the logger name and reported by the index route",
    )

    profile: Profile = Field(
        Profile.production,
        title="Logging profile",
        examples=["development"],
    )

    log_level: LogLevel = Field(
        LogLevel.INFO, title="Log level", examples=["DEBUG"]
    )

    base_url: HttpUrl = Field(
        "https://packleads.io",
        title="Public base URL",
        description=(
            "Origin of the public site, used to build absolute URLs in"
            " robots.txt and sitemap.xml"
        ),
    )

    contact_rate_limit: int = Field(
        3,
        title="Contact submissions allowed per window",
        ge=1,
    )

    contact_rate_window: timedelta = Field(
        timedelta(hours=1),
        title="Contact rate limit window",
        description="Accepts seconds or an ISO 8601 duration",
    )

    @property
    def site_url(self) -> str:
        """Base URL without a trailing slash."""
        return str(self.base_url).rstrip("/")


config = Config()
"""Configuration for Packleads."""
