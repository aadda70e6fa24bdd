"""Pass-through layouts for routed sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from ._models import PageMetadata
from ._sections import Section, get_page_metadata

__all__ = [
    "Layout",
    "account_layout",
    "contact_layout",
    "dashboard_layout",
    "faq_layout",
    "get_layout",
    "library_layout",
    "pipeline_layout",
    "pricing_layout",
]

T = TypeVar("T")


@dataclass(frozen=True)
class Layout:
    """Layout wrapper for a routed section.

    The layout only contributes its section's metadata to the page; calling
    it returns the nested content untouched.
    """

    section: Section
    """Section the layout wraps."""

    metadata: PageMetadata
    """Metadata record of the section."""

    def __call__(self, children: T) -> T:
        return children


def get_layout(section: Section | str) -> Layout:
    """Return the layout for a section.

    Raises
    ------
    packleads.exceptions.UnknownPageError
        Raised if the section is not known.
    """
    metadata = get_page_metadata(section)
    return Layout(section=Section(section), metadata=metadata)


account_layout = get_layout(Section.account)
contact_layout = get_layout(Section.contact)
dashboard_layout = get_layout(Section.dashboard)
faq_layout = get_layout(Section.faq)
library_layout = get_layout(Section.library)
pipeline_layout = get_layout(Section.pipeline)
pricing_layout = get_layout(Section.pricing)
