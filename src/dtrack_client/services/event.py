"""
Event service for asynchronous server-side operations.

Mutating calls such as project cloning return an event token; this service
reports whether the server is still processing the event behind it.
"""

import structlog

from ..exceptions import InvalidArgumentError
from ..models import EventStatus
from ..polling import EventWaiter, WaitResult
from .base import BaseService

logger = structlog.get_logger(__name__)


class EventService(BaseService):
    """Checks the processing status of event tokens."""

    async def is_being_processed(self, token: str) -> bool:
        """
        Check whether the event behind a token is still being processed.

        Args:
            token: Event token returned by a mutating call

        Returns:
            True while the server is processing the event

        Raises:
            InvalidArgumentError: If the token is empty
        """
        if not token:
            raise InvalidArgumentError("Event token must not be empty", "token")

        status = await self._get(
            f"/api/v1/event/token/{self._segment(token)}", EventStatus
        )
        return status.processing

    async def wait(
        self,
        token: str,
        timeout: float | None = None,
        interval: float = 0.0,
    ) -> WaitResult:
        """
        Block until the event behind a token is no longer being processed.

        Args:
            token: Event token returned by a mutating call
            timeout: Optional deadline in seconds
            interval: Delay between status checks in seconds

        Returns:
            WaitResult describing the completed wait
        """
        waiter = EventWaiter(self.is_being_processed, timeout=timeout, interval=interval)
        return await waiter.wait(token)
