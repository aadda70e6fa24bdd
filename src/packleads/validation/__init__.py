"""Validation schemas for Packleads API requests."""

from ..models import LeadStatus
from ._primitives import CamelCaseModel, Location, Niche, safe_string
from ._schemas import (
    AnalyzePreviewRequest,
    AnalyzeRequest,
    AnalyzeSingleRequest,
    Business,
    CheckoutRequest,
    ContactRequest,
    CreditsCheckout,
    LeadsDeleteRequest,
    LeadUpdateRequest,
    SearchRequest,
    SessionBusiness,
    SessionDeleteRequest,
    SessionSaveRequest,
    SubscriptionCheckout,
    VisibilityRequest,
    parse_checkout,
)

__all__ = [
    "AnalyzePreviewRequest",
    "AnalyzeRequest",
    "AnalyzeSingleRequest",
    "Business",
    "CamelCaseModel",
    "CheckoutRequest",
    "ContactRequest",
    "CreditsCheckout",
    "LeadStatus",
    "LeadUpdateRequest",
    "LeadsDeleteRequest",
    "Location",
    "Niche",
    "SearchRequest",
    "SessionBusiness",
    "SessionDeleteRequest",
    "SessionSaveRequest",
    "SubscriptionCheckout",
    "VisibilityRequest",
    "parse_checkout",
    "safe_string",
]
