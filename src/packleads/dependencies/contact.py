"""Contact service dependency for FastAPI."""

from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from structlog.stdlib import BoundLogger

from ..ratelimit import SlidingWindowRateLimiter
from ..services.contact import ContactService, ContactStore
from .logger import logger_dependency

__all__ = ["ContactServiceDependency", "contact_service_dependency"]


class ContactServiceDependency:
    """Provides a `~packleads.services.contact.ContactService`.

    The store and rate limiter are shared by all requests. They are created
    by `initialize`, which must be called during application startup.
    """

    def __init__(self) -> None:
        self._store: ContactStore | None = None
        self._limiter: SlidingWindowRateLimiter | None = None

    async def __call__(
        self, logger: Annotated[BoundLogger, Depends(logger_dependency)]
    ) -> ContactService:
        if self._store is None or self._limiter is None:
            raise RuntimeError("ContactServiceDependency not initialized")
        return ContactService(self._store, self._limiter, logger)

    @property
    def store(self) -> ContactStore:
        """Store of accepted submissions."""
        if self._store is None:
            raise RuntimeError("ContactServiceDependency not initialized")
        return self._store

    def initialize(self, limit: int, window: timedelta) -> None:
        """Create the shared store and rate limiter.

        Calling this again discards all previous submissions and rate limit
        state.

        Parameters
        ----------
        limit
            Submissions allowed per client within the window.
        window
            Length of the rate limit window.
        """
        self._store = ContactStore()
        self._limiter = SlidingWindowRateLimiter(limit, window)


contact_service_dependency = ContactServiceDependency()
"""The dependency that will return the contact service."""
