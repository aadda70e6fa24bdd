"""Static metadata for the routed sections of the Packleads site."""

from ._faq import (
    FAQ_ENTRIES,
    FAQ_STRUCTURED_DATA,
    FaqEntry,
    build_faq_structured_data,
)
from ._layout import (
    Layout,
    account_layout,
    contact_layout,
    dashboard_layout,
    faq_layout,
    get_layout,
    library_layout,
    pipeline_layout,
    pricing_layout,
)
from ._models import Alternates, PageMetadata, RobotsDirective
from ._sections import (
    ACCOUNT_METADATA,
    CONTACT_METADATA,
    DASHBOARD_METADATA,
    FAQ_METADATA,
    FEATURES_METADATA,
    HOME_METADATA,
    LIBRARY_METADATA,
    PIPELINE_METADATA,
    PRICING_METADATA,
    PRIVACY_METADATA,
    TERMS_METADATA,
    PageRegistry,
    Section,
    get_page_metadata,
    iter_pages,
)

__all__ = [
    "ACCOUNT_METADATA",
    "CONTACT_METADATA",
    "DASHBOARD_METADATA",
    "FAQ_ENTRIES",
    "FAQ_METADATA",
    "FAQ_STRUCTURED_DATA",
    "FEATURES_METADATA",
    "HOME_METADATA",
    "LIBRARY_METADATA",
    "PIPELINE_METADATA",
    "PRICING_METADATA",
    "PRIVACY_METADATA",
    "TERMS_METADATA",
    "Alternates",
    "FaqEntry",
    "Layout",
    "PageMetadata",
    "PageRegistry",
    "RobotsDirective",
    "Section",
    "account_layout",
    "build_faq_structured_data",
    "contact_layout",
    "dashboard_layout",
    "faq_layout",
    "get_layout",
    "get_page_metadata",
    "iter_pages",
    "library_layout",
    "pipeline_layout",
    "pricing_layout",
]
