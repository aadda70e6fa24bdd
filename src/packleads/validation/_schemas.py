"""Request schemas for the Packleads API."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Self
from uuid import UUID

from pydantic import (
    ConfigDict,
    EmailStr,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    field_validator,
    model_validator,
)

from ..models import LeadStatus
from ..pricing import PAID_TIERS, BillingInterval, PackName, TierName
from ._primitives import CamelCaseModel, Location, Niche, safe_string

__all__ = [
    "AnalyzePreviewRequest",
    "AnalyzeRequest",
    "AnalyzeSingleRequest",
    "Business",
    "CheckoutRequest",
    "ContactRequest",
    "CreditsCheckout",
    "LeadUpdateRequest",
    "LeadsDeleteRequest",
    "SearchRequest",
    "SessionBusiness",
    "SessionDeleteRequest",
    "SessionSaveRequest",
    "SubscriptionCheckout",
    "VisibilityRequest",
    "parse_checkout",
]

BusinessName = safe_string(300)
ShortText = safe_string(200)
LongText = safe_string(5000)


class Business(CamelCaseModel):
    """A business listing as returned by a search.

    Only ``name`` is required, since listing data often has missing fields.
    Numbers and flags must be sent as JSON numbers and booleans. Strings such
    as ``"4.5"`` or ``"yes"`` are rejected rather than coerced.
    """

    name: BusinessName = Field(..., title="Business name")

    place_id: str | None = Field(None, title="Google place ID")

    address: str = Field("", title="Street address")

    phone: str | None = Field(None, title="Phone number")

    website: str | None = Field(None, title="Website URL")

    rating: StrictFloat = Field(0, title="Average review rating")

    review_count: StrictInt = Field(0, title="Number of reviews")

    category: str = Field("", title="Primary category")

    claimed: StrictBool = Field(False, title="Whether the profile is claimed")

    sponsored: StrictBool = Field(False, title="Whether the listing is an ad")


class SearchRequest(CamelCaseModel):
    """Body of ``POST /api/search``."""

    niche: Niche
    location: Location


class AnalyzeRequest(CamelCaseModel):
    """Body of ``POST /api/analyze-stream`` and ``/api/analyze-selected``."""

    businesses: list[Business] = Field(..., min_length=1)
    niche: Niche
    location: Location


class AnalyzeSingleRequest(CamelCaseModel):
    """Body of ``POST /api/analyze-single``."""

    business: Business
    niche: Niche
    location: Location


class AnalyzePreviewRequest(CamelCaseModel):
    """Body of ``POST /api/analyze-preview``.

    Previews are limited to a handful of businesses.
    """

    businesses: list[Business] = Field(..., min_length=1, max_length=3)
    niche: Niche
    location: Location


class VisibilityRequest(CamelCaseModel):
    """Body of ``POST /api/visibility``."""

    business_name: BusinessName
    niche: Niche
    location: Location


class LeadUpdateRequest(CamelCaseModel):
    """Body of ``PATCH /api/leads``."""

    lead_id: UUID = Field(..., title="Lead ID")

    status: LeadStatus | None = Field(None, title="New pipeline status")

    notes: str | None = Field(None, title="Notes", max_length=5000)

    @field_validator("status", "notes", mode="before")
    @classmethod
    def _validate_not_null(cls, v: Any) -> Any:
        # Omit a field to leave it unchanged. An explicit null is an error.
        if v is None:
            raise ValueError("Value may be omitted but must not be null")
        return v

    @model_validator(mode="after")
    def _validate_has_change(self) -> Self:
        if self.status is None and self.notes is None:
            msg = "At least one of status or notes must be provided"
            raise ValueError(msg)
        return self


class LeadsDeleteRequest(CamelCaseModel):
    """Body of ``DELETE /api/leads``."""

    lead_ids: list[UUID] = Field(..., min_length=1, max_length=100)


class SessionBusiness(CamelCaseModel):
    """A business saved with a search session.

    Only the name is checked. All other keys are kept as given.
    """

    model_config = ConfigDict(extra="allow")

    name: str


class SessionSaveRequest(CamelCaseModel):
    """Body of ``POST /api/session``."""

    niche: Niche
    location: Location
    businesses: list[SessionBusiness] = Field(..., min_length=1)


class SessionDeleteRequest(CamelCaseModel):
    """Query parameters of ``DELETE /api/session``."""

    key: str | None = Field(None, min_length=3, max_length=350)


class SubscriptionCheckout(CamelCaseModel):
    """Checkout of a subscription plan."""

    type: Literal["subscription"]

    tier: TierName = Field(..., examples=["starter"])

    interval: BillingInterval | None = None

    @field_validator("tier")
    @classmethod
    def _validate_paid_tier(cls, v: TierName) -> TierName:
        if v not in PAID_TIERS:
            raise ValueError(f"Tier {v.value} cannot be purchased")
        return v


class CreditsCheckout(CamelCaseModel):
    """Checkout of a one-time credit pack."""

    type: Literal["credits"]

    pack: PackName = Field(..., examples=["medium"])


CheckoutRequest = Annotated[
    SubscriptionCheckout | CreditsCheckout, Field(discriminator="type")
]
"""Body of ``POST /api/stripe/checkout``, discriminated by ``type``."""

_checkout_adapter: TypeAdapter[SubscriptionCheckout | CreditsCheckout] = (
    TypeAdapter(CheckoutRequest)
)


def parse_checkout(data: Any) -> SubscriptionCheckout | CreditsCheckout:
    """Validate a checkout request body.

    Raises
    ------
    pydantic.ValidationError
        Raised if the body is not a valid checkout request.
    """
    return _checkout_adapter.validate_python(data)


class ContactRequest(CamelCaseModel):
    """Body of ``POST /api/contact``."""

    name: ShortText

    email: EmailStr

    subject: ShortText

    message: LongText

    @field_validator("email", mode="before")
    @classmethod
    def _validate_email_length(cls, v: Any) -> Any:
        if isinstance(v, str) and len(v) > 200:
            raise ValueError("Email address must be at most 200 characters")
        return v
