"""Reusable building blocks for request schemas."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

__all__ = [
    "CamelCaseModel",
    "Location",
    "Niche",
    "safe_string",
]


def safe_string(max_length: int) -> type[str]:
    """Build a string type that is stripped and must be non-empty.

    Leading and trailing whitespace is removed before the length is checked,
    so a string of only whitespace is rejected.

    Parameters
    ----------
    max_length
        Maximum length after stripping.

    Returns
    -------
    type
        Annotated `str` type usable as a Pydantic field type.
    """
    return Annotated[  # type: ignore[return-value]
        str,
        StringConstraints(
            strip_whitespace=True, min_length=1, max_length=max_length
        ),
    ]


Niche = safe_string(100)
"""Business category being searched, such as ``plumbers``."""

Location = safe_string(150)
"""Market being searched, such as ``Austin, TX``."""


class CamelCaseModel(BaseModel):
    """`pydantic.BaseModel` that accepts camel-case input.

    The web client sends camel-case JSON keys. Models derived from this class
    may be initialized with either camel-case keys or the snake-case
    attribute names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
