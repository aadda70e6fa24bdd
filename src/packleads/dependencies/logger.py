"""Logger dependency for FastAPI.

Provides a structlog logger bound with information about the current request.
"""

import uuid

import structlog
from fastapi import Request
from structlog.stdlib import BoundLogger

from .. import logging

__all__ = ["LoggerDependency", "logger_dependency"]


class LoggerDependency:
    """Provides a structlog logger configured with request information.

    The bound context includes a UUID for the request and, under
    ``httpRequest`` (the naming Google Log Explorer expects), the method and
    URL of the request, the client IP address, and the ``User-Agent`` header
    if present.
    """

    async def __call__(self, request: Request) -> BoundLogger:
        logger = structlog.get_logger(logging.logger_name)
        request_data = {
            "requestMethod": request.method,
            "requestUrl": str(request.url),
        }
        if request.client:
            request_data["remoteIp"] = request.client.host
        user_agent = request.headers.get("User-Agent")
        if user_agent:
            request_data["userAgent"] = user_agent
        return logger.new(
            httpRequest=request_data, request_id=str(uuid.uuid4())
        )


logger_dependency = LoggerDependency()
"""The dependency that will return the logger for the current request."""
