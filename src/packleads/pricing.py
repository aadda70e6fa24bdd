"""Subscription tiers and credit packs.

This is the single source of truth for plan pricing. Checkout validation and
the pricing page copy both refer to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

__all__ = [
    "CREDIT_PACKS",
    "PAID_TIERS",
    "SUBSCRIPTION_TIERS",
    "BillingInterval",
    "CreditPack",
    "PackName",
    "SubscriptionTier",
    "TierName",
    "get_pack",
    "get_tier",
]


class TierName(StrEnum):
    """Names of the subscription tiers."""

    free = "free"
    starter = "starter"
    pro = "pro"
    enterprise = "enterprise"


class PackName(StrEnum):
    """Names of the one-time credit packs."""

    small = "small"
    medium = "medium"
    large = "large"
    xl = "xl"


class BillingInterval(StrEnum):
    """Billing interval of a subscription."""

    month = "month"
    year = "year"


@dataclass(frozen=True)
class SubscriptionTier:
    """A subscription plan."""

    name: str
    """Display name of the plan."""

    credits: int
    """Credits granted per month (or once, for the free tier)."""

    price_monthly: int
    """Price in US dollars when billed monthly."""

    price_yearly: int
    """Price in US dollars when billed yearly."""

    features: tuple[str, ...] = field(default_factory=tuple)
    """Feature bullets shown on the pricing page."""

    popular: bool = False
    """Whether the plan is highlighted as the most popular choice."""


@dataclass(frozen=True)
class CreditPack:
    """A one-time purchase of credits."""

    name: str
    credits: int
    price: int


SUBSCRIPTION_TIERS: dict[TierName, SubscriptionTier] = {
    TierName.free: SubscriptionTier(
        name="Free",
        credits=5,
        price_monthly=0,
        price_yearly=0,
        features=(
            "5 credits on signup",
            "General business search",
            "CSV export",
        ),
    ),
    TierName.starter: SubscriptionTier(
        name="Starter",
        credits=50,
        price_monthly=29,
        price_yearly=290,
        features=(
            "50 credits per month",
            "SEO Signals Pro analysis",
            "All signals",
            "Priority support",
        ),
    ),
    TierName.pro: SubscriptionTier(
        name="Pro",
        credits=200,
        price_monthly=79,
        price_yearly=790,
        features=(
            "200 credits per month",
            "SEO Signals Pro analysis",
            "All signals",
            "Priority support",
        ),
        popular=True,
    ),
    TierName.enterprise: SubscriptionTier(
        name="Enterprise",
        credits=1000,
        price_monthly=199,
        price_yearly=1990,
        features=(
            "1000 credits per month",
            "SEO Signals Pro analysis",
            "All signals",
            "Dedicated support",
        ),
    ),
}

CREDIT_PACKS: dict[PackName, CreditPack] = {
    PackName.small: CreditPack(name="25 Credits", credits=25, price=15),
    PackName.medium: CreditPack(name="50 Credits", credits=50, price=25),
    PackName.large: CreditPack(name="100 Credits", credits=100, price=45),
    PackName.xl: CreditPack(name="250 Credits", credits=250, price=99),
}

PAID_TIERS: tuple[TierName, ...] = tuple(
    t for t in TierName if t != TierName.free
)
"""Tiers that can be purchased through checkout."""


def get_tier(name: TierName | str) -> SubscriptionTier:
    """Look up a subscription tier by name.

    Raises
    ------
    ValueError
        Raised if the name is not a known tier.
    """
    return SUBSCRIPTION_TIERS[TierName(name)]


def get_pack(name: PackName | str) -> CreditPack:
    """Look up a credit pack by name.

    Raises
    ------
    ValueError
        Raised if the name is not a known pack.
    """
    return CREDIT_PACKS[PackName(name)]
