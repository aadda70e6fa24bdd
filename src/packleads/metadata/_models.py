"""Page metadata models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Alternates",
    "PageMetadata",
    "RobotsDirective",
]


class RobotsDirective(BaseModel):
    """Instructions to crawlers about a page."""

    model_config = ConfigDict(frozen=True)

    index: bool = Field(
        ..., title="Index", description="Whether the page may be indexed"
    )

    follow: bool = Field(
        ...,
        title="Follow",
        description="Whether links on the page may be followed",
    )

    def __str__(self) -> str:
        index = "index" if self.index else "noindex"
        follow = "follow" if self.follow else "nofollow"
        return f"{index}, {follow}"


class Alternates(BaseModel):
    """Alternate URLs for a page."""

    model_config = ConfigDict(frozen=True)

    canonical: str | None = Field(
        None,
        title="Canonical URL",
        description="Preferred URL, used to consolidate duplicate content",
        examples=["/pricing"],
    )


class PageMetadata(BaseModel):
    """Static metadata for one routed section of the site."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., title="Title", min_length=1, examples=["Pricing"])

    description: str = Field(..., title="Description", min_length=1)

    robots: RobotsDirective | None = Field(
        None,
        title="Robots directive",
        description="Omitted for pages with the default crawler behavior",
    )

    alternates: Alternates | None = Field(None, title="Alternate URLs")

    @property
    def canonical(self) -> str | None:
        """Canonical URL of the page, if declared."""
        return self.alternates.canonical if self.alternates else None

    @property
    def is_indexable(self) -> bool:
        """Whether crawlers may index the page."""
        return self.robots is None or self.robots.index
