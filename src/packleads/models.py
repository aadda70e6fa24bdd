"""Shared models: API error bodies and domain enumerations."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

__all__ = [
    "ErrorDetail",
    "ErrorLocation",
    "ErrorModel",
    "LeadStatus",
]


class ErrorLocation(StrEnum):
    """Possible locations for an error.

    The first element of ``loc`` in `ErrorDetail` should be chosen from one of
    these values.
    """

    body = "body"
    header = "header"
    path = "path"
    query = "query"


class ErrorDetail(BaseModel):
    """The detail of the error message."""

    loc: list[str] | None = Field(
        None, title="Location", examples=[["path", "section"]]
    )

    msg: str = Field(..., title="Message", examples=["Unknown page"])

    type: str = Field(..., title="Error type", examples=["unknown_page"])


class ErrorModel(BaseModel):
    """A structured API error message, compatible with FastAPI errors."""

    detail: list[ErrorDetail] = Field(..., title="Detail")


class LeadStatus(StrEnum):
    """Stage of a lead in the sales pipeline.

    Members are declared in pipeline order, so iterating the enum yields the
    columns of the pipeline board from left to right.
    """

    new = "new"
    contacted = "contacted"
    pitched = "pitched"
    won = "won"
    lost = "lost"
