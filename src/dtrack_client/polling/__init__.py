"""
Event polling for the Dependency-Track client.

This package turns the one-shot event tokens returned by asynchronous server
operations into awaitable waits.
"""

from .waiter import EventWaiter, StatusCheck, WaitResult, wait_for_event

__all__ = ["EventWaiter", "StatusCheck", "WaitResult", "wait_for_event"]
