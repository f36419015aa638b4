"""
Event waiter for the Dependency-Track client.

This module polls an event status check until the server reports that the
event is no longer being processed.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable

import structlog

from ..exceptions import EventWaitTimeoutError, InvalidArgumentError

logger = structlog.get_logger(__name__)

StatusCheck = Callable[[str], Awaitable[bool]]


class _StatusCheckFailed(Exception):
    """Carries an error raised by the status check past the deadline handling."""

    def __init__(self, error: Exception):
        super().__init__(str(error))
        self.error = error


class WaitResult:
    """Outcome of a completed event wait."""

    def __init__(self, token: str, checks: int, elapsed_seconds: float):
        self.token = token
        self.checks = checks
        self.elapsed_seconds = elapsed_seconds

    def __repr__(self) -> str:
        return (
            f"WaitResult(token={self.token!r}, checks={self.checks}, "
            f"elapsed_seconds={self.elapsed_seconds:.3f})"
        )


class EventWaiter:
    """
    Polls an event token until it is no longer being processed.

    Each wait issues status checks back to back until one reports that the
    event is done. By default there is no delay between checks; ``interval``
    adds one. The loop has no bound of its own: ``timeout`` or cancelling the
    awaiting task are the only ways to stop a wait on an event that never
    completes. Errors raised by the status check are not retried and propagate
    to the caller unchanged.
    """

    def __init__(
        self,
        check_status: StatusCheck,
        timeout: float | None = None,
        interval: float = 0.0,
    ):
        """
        Initialize the event waiter.

        Args:
            check_status: Coroutine function returning True while the event
                behind a token is still being processed
            timeout: Optional deadline in seconds for each wait
            interval: Delay between status checks in seconds
        """
        if timeout is not None and timeout <= 0:
            raise InvalidArgumentError("timeout must be positive", "timeout")
        if interval < 0:
            raise InvalidArgumentError("interval must not be negative", "interval")

        self.check_status = check_status
        self.timeout = timeout
        self.interval = interval

    async def wait(self, token: str) -> WaitResult:
        """
        Wait until the event behind a token is no longer being processed.

        Args:
            token: Event token returned by a mutating call

        Returns:
            WaitResult with the number of status checks issued

        Raises:
            InvalidArgumentError: If the token is empty; nothing is sent
            EventWaitTimeoutError: If the deadline passes first
        """
        if not token:
            raise InvalidArgumentError("Event token must not be empty", "token")

        checks = [0]
        started = time.monotonic()
        failure: Exception | None = None

        try:
            if self.timeout is None:
                await self._poll(token, checks)
            else:
                await asyncio.wait_for(self._poll(token, checks), self.timeout)
        except _StatusCheckFailed as e:
            failure = e.error
        except asyncio.TimeoutError as e:
            # Check errors arrive wrapped, so this is the waiter's own deadline
            logger.warning(
                "Event wait timed out",
                token=token,
                checks=checks[0],
                timeout=self.timeout,
            )
            raise EventWaitTimeoutError(
                f"Event {token} still processing after {self.timeout}s",
                token=token,
                checks=checks[0],
            ) from e
        except asyncio.CancelledError:
            logger.info("Event wait cancelled", token=token, checks=checks[0])
            raise

        if failure is not None:
            logger.warning(
                "Event status check failed",
                token=token,
                checks=checks[0],
                error=str(failure),
            )
            raise failure

        result = WaitResult(token, checks[0], time.monotonic() - started)
        logger.info(
            "Event processed",
            token=token,
            checks=result.checks,
            elapsed_seconds=round(result.elapsed_seconds, 3),
        )
        return result

    async def _poll(self, token: str, checks: list[int]) -> None:
        while True:
            checks[0] += 1
            try:
                processing = await self.check_status(token)
            except Exception as e:
                raise _StatusCheckFailed(e) from e
            logger.debug(
                "Event status checked",
                token=token,
                check=checks[0],
                processing=processing,
            )
            if not processing:
                return
            # Yields to the event loop even with no interval so deadlines fire
            await asyncio.sleep(self.interval)


async def wait_for_event(
    check_status: StatusCheck,
    token: str,
    timeout: float | None = None,
    interval: float = 0.0,
) -> WaitResult:
    """
    Wait until the event behind a token is no longer being processed.

    Convenience wrapper around EventWaiter for one-off waits.
    """
    waiter = EventWaiter(check_status, timeout=timeout, interval=interval)
    return await waiter.wait(token)
