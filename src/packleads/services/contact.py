"""Service for contact form submissions."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field
from structlog.stdlib import BoundLogger

from ..exceptions import RateLimitedError
from ..ratelimit import SlidingWindowRateLimiter
from ..validation import ContactRequest

__all__ = [
    "ContactService",
    "ContactStore",
    "ContactSubmission",
]


class ContactSubmission(BaseModel):
    """A stored contact form submission."""

    name: str = Field(..., title="Sender name")

    email: str = Field(..., title="Sender email address")

    subject: str = Field(..., title="Subject")

    message: str = Field(..., title="Message")

    client_ip: str = Field(..., title="Client IP address")

    submitted_at: datetime = Field(..., title="Submission time")


class ContactStore:
    """Append-only, in-process storage of contact form submissions."""

    def __init__(self) -> None:
        self._submissions: list[ContactSubmission] = []

    async def add(self, submission: ContactSubmission) -> None:
        """Store a submission."""
        self._submissions.append(submission)

    async def list_submissions(self) -> list[ContactSubmission]:
        """Return all stored submissions, oldest first."""
        return list(self._submissions)


class ContactService:
    """Accept contact form submissions subject to a per-client rate limit.

    Parameters
    ----------
    store
        Storage for accepted submissions.
    limiter
        Rate limiter keyed by client IP address.
    logger
        Logger to use.
    """

    def __init__(
        self,
        store: ContactStore,
        limiter: SlidingWindowRateLimiter,
        logger: BoundLogger,
    ) -> None:
        self._store = store
        self._limiter = limiter
        self._logger = logger

    async def submit(
        self, request: ContactRequest, client_ip: str
    ) -> ContactSubmission:
        """Store a contact form submission.

        Only successful submissions count against the rate limit.

        Parameters
        ----------
        request
            Validated contact form.
        client_ip
            IP address of the client, used as the rate limit key.

        Returns
        -------
        ContactSubmission
            The stored submission.

        Raises
        ------
        RateLimitedError
            Raised if the client has submitted too many forms recently.
        """
        now = datetime.now(tz=UTC)
        if not self._limiter.is_allowed(client_ip, now):
            self._logger.warning(
                "Contact form rate limit exceeded", client_ip=client_ip
            )
            msg = "Too many submissions. Please try again later."
            raise RateLimitedError(msg)

        submission = ContactSubmission(
            name=request.name,
            email=request.email,
            subject=request.subject,
            message=request.message,
            client_ip=client_ip,
            submitted_at=now,
        )
        await self._store.add(submission)
        self._limiter.record(client_ip, now)
        self._logger.info(
            "Contact form submitted",
            client_ip=client_ip,
            subject=request.subject,
        )
        return submission
