"""schema.org structured data for the FAQ page."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "FAQ_ENTRIES",
    "FAQ_STRUCTURED_DATA",
    "FaqEntry",
    "build_faq_structured_data",
]


@dataclass(frozen=True)
class FaqEntry:
    """One question and its answer."""

    question: str
    answer: str


FAQ_ENTRIES: tuple[FaqEntry, ...] = (
    FaqEntry(
        question="What is Scoutblind?",
        answer=(
            "Scoutblind is a prospecting tool for agencies and freelancers"
            " who sell digital services to local businesses. It scans Google"
            " Business Profiles in any market and analyzes key signals — like"
            " review response rates, owner activity, profile completeness,"
            " and local pack rankings — to help you find businesses that"
            " actually need your services."
        ),
    ),
    FaqEntry(
        question="How do credits work?",
        answer=(
            "Each search costs 1 credit. A search scans all GBP profiles for"
            " a given niche + location combination and returns a prioritized"
            " prospect list with signal analysis. You get 5 free credits when"
            " you sign up, and can purchase additional credits or subscribe"
            " to a monthly plan."
        ),
    ),
    FaqEntry(
        question="What GBP signals are analyzed?",
        answer=(
            "We analyze 10+ signals including: local pack ranking, review"
            " count and average rating, review response rate, last owner"
            " activity date, profile claim status, website presence and tech"
            " stack, business category optimization, photo count, and more."
            " These signals are combined into an overall Need Score."
        ),
    ),
    FaqEntry(
        question="Where does the data come from?",
        answer=(
            "All business data comes from publicly available Google Maps and"
            " Google Business Profile listings. We retrieve this data in"
            " real-time when you run a search, so results reflect current"
            " public information."
        ),
    ),
    FaqEntry(
        question="Is the data accurate?",
        answer=(
            "Scoutblind employs high-performance algorithms that integrate"
            " real-time GBP data with the same analytical methodologies used"
            " by industry experts. Our system processes complex signals—like"
            " review trends and response metrics—through a technical lens to"
            " provide consistent, actionable intelligence."
        ),
    ),
    FaqEntry(
        question="How does pricing work?",
        answer=(
            "Scoutblind offers a free tier (5 credits), a Starter plan"
            " ($29/mo for 50 credits), and a Pro plan ($79/mo for 200"
            " credits). All plans include full signal analysis, CSV export,"
            " and search history. Subscriptions are billed monthly via Stripe"
            " and can be canceled anytime."
        ),
    ),
    FaqEntry(
        question="Can I export my data?",
        answer=(
            "Yes. Every search result can be exported as a CSV file"
            " containing all prospect data, signal scores, and contact"
            " information. The export is ready for import into your CRM or"
            " outreach tools."
        ),
    ),
    FaqEntry(
        question="How do I delete my account?",
        answer=(
            "You can delete your account from the Account settings page."
            " This will permanently remove your personal data, search"
            " history, and saved searches. If you have an active"
            " subscription, please cancel it before deleting your account."
        ),
    ),
    FaqEntry(
        question="What payment methods are accepted?",
        answer=(
            "We accept all major credit and debit cards (Visa, Mastercard,"
            " American Express) through Stripe. We do not store your card"
            " details — all payment processing is handled securely by"
            " Stripe."
        ),
    ),
)


def build_faq_structured_data(entries: Iterable[FaqEntry]) -> dict[str, Any]:
    """Build a schema.org ``FAQPage`` JSON-LD document.

    Parameters
    ----------
    entries
        Questions and answers, in display order.

    Returns
    -------
    dict
        JSON-serializable JSON-LD document.
    """
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": entry.question,
                "acceptedAnswer": {"@type": "Answer", "text": entry.answer},
            }
            for entry in entries
        ],
    }


FAQ_STRUCTURED_DATA = build_faq_structured_data(FAQ_ENTRIES)
"""Prebuilt JSON-LD document for the FAQ page."""
