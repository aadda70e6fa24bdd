"""Tests for robots.txt and sitemap.xml generation."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date

import pytest

from packleads.metadata import Section, get_page_metadata
from packleads.seo import (
    SITEMAP_ENTRIES,
    ChangeFrequency,
    SitemapEntry,
    absolute_url,
    build_robots_rules,
    render_robots,
    render_sitemap,
)

_NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}


def test_absolute_url() -> None:
    assert absolute_url("https://example.com/", "/") == "https://example.com"
    assert absolute_url("https://example.com", "/faq") == (
        "https://example.com/faq"
    )


def test_robots_rules() -> None:
    rules = build_robots_rules()
    assert len(rules) == 1
    rule = rules[0]
    assert rule.user_agent == "*"
    assert rule.allow == ["/"]
    assert rule.disallow == [
        "/dashboard",
        "/account",
        "/library",
        "/history",
        "/api/",
        "/auth/",
        "/pipeline",
    ]


def test_robots_disallows_every_private_section() -> None:
    disallowed = build_robots_rules()[0].disallow
    for section in Section:
        if not get_page_metadata(section).is_indexable:
            assert section.path in disallowed
        else:
            assert section.path not in disallowed


def test_render_robots() -> None:
    robots = render_robots("https://example.com/")
    assert robots == (
        "User-Agent: *\n"
        "Allow: /\n"
        "Disallow: /dashboard\n"
        "Disallow: /account\n"
        "Disallow: /library\n"
        "Disallow: /history\n"
        "Disallow: /api/\n"
        "Disallow: /auth/\n"
        "Disallow: /pipeline\n"
        "\n"
        "Sitemap: https://example.com/sitemap.xml\n"
    )


def test_sitemap_entries_are_indexable() -> None:
    paths = {s.path: s for s in Section}
    for entry in SITEMAP_ENTRIES:
        assert entry.path in paths
        assert get_page_metadata(paths[entry.path]).is_indexable


def test_render_sitemap() -> None:
    sitemap = render_sitemap("https://example.com")
    root = ET.fromstring(sitemap.encode())
    assert root.tag == "{http://www.sitemaps.org/schemas/sitemap/0.9}urlset"
    urls = [
        {
            "loc": url.findtext("sm:loc", namespaces=_NS),
            "lastmod": url.findtext("sm:lastmod", namespaces=_NS),
            "changefreq": url.findtext("sm:changefreq", namespaces=_NS),
            "priority": url.findtext("sm:priority", namespaces=_NS),
        }
        for url in root.findall("sm:url", _NS)
    ]
    assert urls == [
        {
            "loc": "https://example.com",
            "lastmod": "2025-02-07",
            "changefreq": "weekly",
            "priority": "1.0",
        },
        {
            "loc": "https://example.com/pricing",
            "lastmod": "2025-02-07",
            "changefreq": "monthly",
            "priority": "0.9",
        },
        {
            "loc": "https://example.com/faq",
            "lastmod": "2025-02-01",
            "changefreq": "monthly",
            "priority": "0.8",
        },
        {
            "loc": "https://example.com/contact",
            "lastmod": "2025-01-15",
            "changefreq": "monthly",
            "priority": "0.6",
        },
        {
            "loc": "https://example.com/privacy",
            "lastmod": "2025-01-01",
            "changefreq": "yearly",
            "priority": "0.3",
        },
        {
            "loc": "https://example.com/terms",
            "lastmod": "2025-01-01",
            "changefreq": "yearly",
            "priority": "0.3",
        },
    ]


def test_render_sitemap_escapes() -> None:
    entry = SitemapEntry(
        "/search?a=1&b=2", date(2025, 1, 1), ChangeFrequency.daily, 0.5
    )
    sitemap = render_sitemap("https://example.com", (entry,))
    assert "https://example.com/search?a=1&amp;b=2" in sitemap
    ET.fromstring(sitemap.encode())


def test_sitemap_entry_validation() -> None:
    with pytest.raises(ValueError, match="priority"):
        SitemapEntry("/", date(2025, 1, 1), ChangeFrequency.daily, 1.5)
    with pytest.raises(ValueError, match="absolute"):
        SitemapEntry("faq", date(2025, 1, 1), ChangeFrequency.daily, 0.5)
