"""Public HTTP handlers."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from pydantic import Field
from structlog.stdlib import BoundLogger

from ..config import Config
from ..dependencies.client_ip import client_ip_dependency
from ..dependencies.config import config_dependency
from ..dependencies.contact import contact_service_dependency
from ..dependencies.logger import logger_dependency
from ..exceptions import UnknownPageError
from ..metadata import (
    FAQ_STRUCTURED_DATA,
    PageMetadata,
    Section,
    get_page_metadata,
    iter_pages,
)
from ..models import ErrorLocation, ErrorModel
from ..seo import render_robots, render_sitemap
from ..services.contact import ContactService
from ..validation import CamelCaseModel, ContactRequest

__all__ = ["ContactResponse", "PageDetail", "PageSummary", "external_router"]

external_router = APIRouter()
"""FastAPI router for all external handlers."""


class PageSummary(CamelCaseModel):
    """Metadata for one page of the site."""

    section: Section = Field(..., title="Section", examples=["pricing"])

    path: str = Field(..., title="Route path", examples=["/pricing"])

    metadata: PageMetadata = Field(..., title="Page metadata")


class PageDetail(PageSummary):
    """Metadata for one page, with any structured data it publishes."""

    structured_data: list[dict[str, Any]] = Field(
        default_factory=list,
        title="JSON-LD structured data",
        description="schema.org documents to embed in the page",
    )


class ContactResponse(CamelCaseModel):
    """Result of a contact form submission."""

    success: bool = Field(True, title="Whether the submission was accepted")


@external_router.get(
    "/robots.txt",
    response_class=PlainTextResponse,
    include_in_schema=False,
)
async def get_robots(
    config: Annotated[Config, Depends(config_dependency)],
) -> str:
    return render_robots(config.site_url)


@external_router.get("/sitemap.xml", include_in_schema=False)
async def get_sitemap(
    config: Annotated[Config, Depends(config_dependency)],
) -> Response:
    return Response(
        render_sitemap(config.site_url), media_type="application/xml"
    )


@external_router.get(
    "/api/pages",
    response_model_exclude_none=True,
    summary="List page metadata",
)
async def list_pages() -> list[PageSummary]:
    return [
        PageSummary(section=s, path=s.path, metadata=m)
        for s, m in iter_pages()
    ]


@external_router.get(
    "/api/pages/{section}",
    response_model_exclude_none=True,
    responses={404: {"description": "Unknown page", "model": ErrorModel}},
    summary="Get page metadata",
)
async def get_page(
    section: str,
    logger: Annotated[BoundLogger, Depends(logger_dependency)],
) -> PageDetail:
    try:
        metadata = get_page_metadata(section)
    except UnknownPageError as e:
        e.location = ErrorLocation.path
        e.field_path = ["section"]
        logger.debug("Requested unknown page", section=section)
        raise
    page = Section(section)
    structured_data = [FAQ_STRUCTURED_DATA] if page == Section.faq else []
    return PageDetail(
        section=page,
        path=page.path,
        metadata=metadata,
        structured_data=structured_data,
    )


@external_router.post(
    "/api/contact",
    responses={
        429: {"description": "Too many submissions", "model": ErrorModel}
    },
    summary="Submit the contact form",
)
async def post_contact(
    contact: ContactRequest,
    client_ip: Annotated[str, Depends(client_ip_dependency)],
    service: Annotated[ContactService, Depends(contact_service_dependency)],
) -> ContactResponse:
    await service.submit(contact, client_ip)
    return ContactResponse(success=True)
