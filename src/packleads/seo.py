"""Crawler-facing documents: ``robots.txt`` and ``sitemap.xml``."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

import jinja2

from .metadata import iter_pages

__all__ = [
    "SITEMAP_ENTRIES",
    "ChangeFrequency",
    "RobotsRule",
    "SitemapEntry",
    "absolute_url",
    "build_robots_rules",
    "render_robots",
    "render_sitemap",
]

_ALWAYS_DISALLOWED = (
    "/dashboard",
    "/account",
    "/library",
    "/history",
    "/api/",
    "/auth/",
)
"""Paths hidden from crawlers regardless of page metadata."""

_environment = jinja2.Environment(
    loader=jinja2.PackageLoader("packleads", "templates"),
    undefined=jinja2.StrictUndefined,
    autoescape=jinja2.select_autoescape(["xml"]),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


class ChangeFrequency(StrEnum):
    """How often a page is likely to change, as defined by sitemaps.org."""

    always = "always"
    hourly = "hourly"
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"
    never = "never"


@dataclass(frozen=True)
class RobotsRule:
    """A group of ``robots.txt`` directives for one user agent."""

    user_agent: str
    allow: list[str] = field(default_factory=list)
    disallow: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SitemapEntry:
    """A page listed in the sitemap."""

    path: str
    last_modified: date
    change_frequency: ChangeFrequency
    priority: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.priority <= 1.0:
            msg = f"Sitemap priority {self.priority} not between 0 and 1"
            raise ValueError(msg)
        if not self.path.startswith("/"):
            raise ValueError(f"Sitemap path {self.path} must be absolute")


SITEMAP_ENTRIES: tuple[SitemapEntry, ...] = (
    SitemapEntry("/", date(2025, 2, 7), ChangeFrequency.weekly, 1.0),
    SitemapEntry("/pricing", date(2025, 2, 7), ChangeFrequency.monthly, 0.9),
    SitemapEntry("/faq", date(2025, 2, 1), ChangeFrequency.monthly, 0.8),
    SitemapEntry("/contact", date(2025, 1, 15), ChangeFrequency.monthly, 0.6),
    SitemapEntry("/privacy", date(2025, 1, 1), ChangeFrequency.yearly, 0.3),
    SitemapEntry("/terms", date(2025, 1, 1), ChangeFrequency.yearly, 0.3),
)


def absolute_url(base_url: str, path: str) -> str:
    """Join the public base URL and a route path.

    The root path maps to the bare base URL, without a trailing slash.
    """
    base_url = base_url.rstrip("/")
    if path == "/":
        return base_url
    return base_url + path


def build_robots_rules() -> list[RobotsRule]:
    """Build the ``robots.txt`` rules for the site.

    Every section whose metadata forbids indexing is disallowed in addition
    to the fixed list of private and API paths.
    """
    disallow = list(_ALWAYS_DISALLOWED)
    for section, metadata in iter_pages():
        if not metadata.is_indexable and section.path not in disallow:
            disallow.append(section.path)
    return [RobotsRule(user_agent="*", allow=["/"], disallow=disallow)]


def render_robots(base_url: str) -> str:
    """Render ``robots.txt``.

    Parameters
    ----------
    base_url
        Public base URL of the site, used for the ``Sitemap`` line.
    """
    template = _environment.get_template("robots.txt")
    return template.render(
        rules=build_robots_rules(),
        sitemap_url=absolute_url(base_url, "/sitemap.xml"),
    )


def render_sitemap(
    base_url: str, entries: tuple[SitemapEntry, ...] = SITEMAP_ENTRIES
) -> str:
    """Render ``sitemap.xml``.

    Parameters
    ----------
    base_url
        Public base URL of the site.
    entries
        Pages to list.
    """
    urls = [
        {
            "loc": absolute_url(base_url, e.path),
            "lastmod": e.last_modified.isoformat(),
            "changefreq": e.change_frequency.value,
            "priority": f"{e.priority:.1f}",
        }
        for e in entries
    ]
    return _environment.get_template("sitemap.xml").render(urls=urls)
