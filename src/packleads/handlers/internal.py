"""Internal HTTP handlers.

These handlers are for the application's own use, such as health checks, and
are not meant to be exposed through the public ingress.
"""

from __future__ import annotations

from email.message import Message
from importlib.metadata import metadata
from typing import Annotated, cast

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ..config import Config
from ..dependencies.config import config_dependency

__all__ = ["ApplicationInfo", "get_application_info", "internal_router"]

internal_router = APIRouter()
"""FastAPI router for all internal handlers."""


class ApplicationInfo(BaseModel):
    """Metadata about the running application."""

    name: str = Field(..., title="Application name", examples=["packleads"])

    version: str = Field(..., title="Version", examples=["1.0.0"])

    description: str | None = Field(None, title="Description")

    repository_url: str | None = Field(
        None, title="Repository URL", examples=["https://example.com/"]
    )


def _get_project_url(meta: Message, label: str) -> str | None:
    prefix = f"{label}, "
    for key, value in meta.items():
        if key == "Project-URL" and value.startswith(prefix):
            return value[len(prefix) :]
    return None


def get_application_info(
    *, package_name: str, application_name: str
) -> ApplicationInfo:
    """Retrieve metadata for the application from its installed package.

    Parameters
    ----------
    package_name
        Name of the distribution whose metadata is read.
    application_name
        Value to report as the application name.
    """
    pkg_metadata = cast(Message, metadata(package_name))
    return ApplicationInfo(
        name=application_name,
        version=pkg_metadata.get("Version", "0.0.0"),
        description=pkg_metadata.get("Summary", None),
        repository_url=_get_project_url(pkg_metadata, "Source"),
    )


@internal_router.get(
    "/",
    description=(
        "Return metadata about the running application. Can also be used as"
        " a health check. This route is not exposed outside the cluster and"
        " therefore cannot be used by external clients."
    ),
    include_in_schema=False,
    response_model_exclude_none=True,
    summary="Application metadata",
)
async def get_index(
    config: Annotated[Config, Depends(config_dependency)],
) -> ApplicationInfo:
    return get_application_info(
        package_name="packleads", application_name=config.name
    )
