"""Exceptions for Packleads and their FastAPI error handler."""

from __future__ import annotations

from typing import ClassVar

from fastapi import Request, status
from fastapi.responses import JSONResponse

from .models import ErrorLocation

__all__ = [
    "ClientRequestError",
    "RateLimitedError",
    "UnknownPageError",
    "client_request_error_handler",
]


class ClientRequestError(Exception):
    """Represents an expected error in a client request.

    Errors of this type result in a 4xx HTTP status with an error message in
    the body, serialized in the same structure FastAPI uses for its own
    validation errors (see `~packleads.models.ErrorModel`). They do not
    represent server failures.

    Subclasses set the class variable ``error`` to a unique error code and
    ``status_code`` to the HTTP status code to return (422 by default).

    Attributes
    ----------
    location
        The part of the request giving rise to the error. Handlers that know
        where the data came from may catch the exception, set this attribute,
        and re-raise it.
    field_path
        Field, as a hierarchical list of structure elements, within that part
        of the request giving rise to the error.

    Parameters
    ----------
    message
        Error message, used as the ``msg`` key in the serialized error.
    location
        The part of the request giving rise to the error, if known.
    field_path
        Field within ``location`` giving rise to the error, if known.
    """

    error: ClassVar[str] = "validation_failed"
    """Used as the ``type`` field of the error message."""

    status_code: ClassVar[int] = status.HTTP_422_UNPROCESSABLE_ENTITY
    """HTTP status code for this type of error."""

    def __init__(
        self,
        message: str,
        location: ErrorLocation | None = None,
        field_path: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.location = location
        self.field_path = field_path

    def to_dict(self) -> dict[str, list[str] | str]:
        """Serialize the exception as one member of an error ``detail`` list.

        Returns
        -------
        dict
            Dictionary with the same structure as
            `~packleads.models.ErrorDetail`.
        """
        result: dict[str, list[str] | str] = {
            "msg": str(self),
            "type": self.error,
        }
        if self.location:
            result["loc"] = [self.location.value, *(self.field_path or [])]
        return result


class UnknownPageError(ClientRequestError):
    """The requested page section does not exist."""

    error = "unknown_page"
    status_code = status.HTTP_404_NOT_FOUND


class RateLimitedError(ClientRequestError):
    """The client has made too many requests of this kind recently."""

    error = "rate_limited"
    status_code = status.HTTP_429_TOO_MANY_REQUESTS


async def client_request_error_handler(
    request: Request, exc: ClientRequestError
) -> JSONResponse:
    """Exception handler for exceptions derived from `ClientRequestError`.

    Install with ``app.exception_handler(ClientRequestError)`` on the
    application.

    Parameters
    ----------
    request
        Request that gave rise to the exception.
    exc
        Exception.

    Returns
    -------
    fastapi.responses.JSONResponse
        Serialization of the exception following
        `~packleads.models.ErrorModel`.
    """
    return JSONResponse(
        status_code=exc.status_code, content={"detail": [exc.to_dict()]}
    )
