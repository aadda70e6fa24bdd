"""Metadata records for each routed section of the site."""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from ..exceptions import UnknownPageError
from ._models import Alternates, PageMetadata, RobotsDirective

__all__ = [
    "ACCOUNT_METADATA",
    "CONTACT_METADATA",
    "DASHBOARD_METADATA",
    "FAQ_METADATA",
    "FEATURES_METADATA",
    "HOME_METADATA",
    "LIBRARY_METADATA",
    "PIPELINE_METADATA",
    "PRICING_METADATA",
    "PRIVACY_METADATA",
    "TERMS_METADATA",
    "PageRegistry",
    "Section",
    "get_page_metadata",
    "iter_pages",
    "registry",
]

_PRIVATE = RobotsDirective(index=False, follow=False)


class Section(StrEnum):
    """Routed sections of the site that declare metadata."""

    home = "home"
    account = "account"
    contact = "contact"
    dashboard = "dashboard"
    faq = "faq"
    features = "features"
    library = "library"
    pipeline = "pipeline"
    pricing = "pricing"
    privacy = "privacy"
    terms = "terms"

    @property
    def path(self) -> str:
        """Route path of the section."""
        if self is Section.home:
            return "/"
        return f"/{self.value}"


HOME_METADATA = PageMetadata(
    title="Locus - Market Intelligence for SEO Agencies",
    description="Identify high-propensity leads with Hidden Signals analysis",
)

ACCOUNT_METADATA = PageMetadata(
    title="Account",
    description="Manage your Packleads account, subscription, and billing.",
    robots=_PRIVATE,
)

CONTACT_METADATA = PageMetadata(
    title="Contact Us",
    description=(
        "Get in touch with the Packleads team. Report bugs, ask billing"
        " questions, or request features."
    ),
    alternates=Alternates(canonical="/contact"),
)

DASHBOARD_METADATA = PageMetadata(
    title="Dashboard",
    description=(
        "Search and analyze local businesses. Find SEO prospects with weak"
        " GMB presence, poor rankings, and dormant owners."
    ),
    robots=_PRIVATE,
)

FAQ_METADATA = PageMetadata(
    title="FAQ",
    description=(
        "Frequently asked questions about Scoutblind. Learn about credits,"
        " GBP signals, pricing, data accuracy, and more."
    ),
    alternates=Alternates(canonical="/faq"),
)

FEATURES_METADATA = PageMetadata(
    title="Features — Packleads",
    description=(
        "Find businesses that need your services. Get scored leads,"
        " personalized audit reports, and ready-to-send outreach — all from"
        " a single search."
    ),
)

LIBRARY_METADATA = PageMetadata(
    title="Library",
    description="Your saved market research and prospect analyses.",
    robots=_PRIVATE,
)

PIPELINE_METADATA = PageMetadata(
    title="Pipeline",
    description="Track and manage your leads through the sales pipeline.",
    robots=_PRIVATE,
)

PRICING_METADATA = PageMetadata(
    title="Pricing",
    description=(
        "Simple, transparent pricing for Scoutblind. Start free with 5"
        " credits. Scale with Starter ($29/mo) or Pro ($79/mo) plans."
    ),
    alternates=Alternates(canonical="/pricing"),
)

PRIVACY_METADATA = PageMetadata(
    title="Privacy Policy",
    description=(
        "How Scoutblind collects, uses, and protects your data. Learn about"
        " our third-party services, cookies, and your data rights."
    ),
)

TERMS_METADATA = PageMetadata(
    title="Terms of Service",
    description=(
        "Terms and conditions for using Packleads. Read our acceptable use"
        " policy, billing terms, and data disclaimers."
    ),
    alternates=Alternates(canonical="/terms"),
)


class PageRegistry:
    """Mapping of sections to their metadata records.

    Each route path may have at most one record.
    """

    def __init__(self) -> None:
        self._pages: dict[Section, PageMetadata] = {}

    def __contains__(self, section: object) -> bool:
        return section in self._pages

    def __iter__(self) -> Iterator[tuple[Section, PageMetadata]]:
        return iter(self._pages.items())

    def __len__(self) -> int:
        return len(self._pages)

    def get(self, section: Section | str) -> PageMetadata:
        """Return the metadata for a section.

        Parameters
        ----------
        section
            The section, or its string value.

        Raises
        ------
        UnknownPageError
            Raised if the section is not known or has no metadata.
        """
        try:
            return self._pages[Section(section)]
        except (KeyError, ValueError) as e:
            raise UnknownPageError(f"Unknown page {section}") from e

    def register(self, section: Section, metadata: PageMetadata) -> None:
        """Register the metadata for a section.

        Raises
        ------
        ValueError
            Raised if the section's route already has a record.
        """
        if section in self._pages:
            raise ValueError(f"Metadata for {section.path} already defined")
        self._pages[section] = metadata


registry = PageRegistry()
"""Metadata records for all sections, in declaration order."""

for _section, _metadata in (
    (Section.home, HOME_METADATA),
    (Section.account, ACCOUNT_METADATA),
    (Section.contact, CONTACT_METADATA),
    (Section.dashboard, DASHBOARD_METADATA),
    (Section.faq, FAQ_METADATA),
    (Section.features, FEATURES_METADATA),
    (Section.library, LIBRARY_METADATA),
    (Section.pipeline, PIPELINE_METADATA),
    (Section.pricing, PRICING_METADATA),
    (Section.privacy, PRIVACY_METADATA),
    (Section.terms, TERMS_METADATA),
):
    registry.register(_section, _metadata)


def get_page_metadata(section: Section | str) -> PageMetadata:
    """Return the metadata record for a section.

    Raises
    ------
    UnknownPageError
        Raised if the section is not known.
    """
    return registry.get(section)


def iter_pages() -> Iterator[tuple[Section, PageMetadata]]:
    """Iterate over all sections and their metadata in declaration order."""
    return iter(registry)
