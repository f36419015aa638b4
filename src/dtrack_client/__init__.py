"""
Dependency-Track client

An async client for the Dependency-Track REST API, with helpers for waiting
on asynchronous server-side events such as project cloning.
"""

__version__ = "0.1.0"

from .client import DTrackClient
from .config import Settings, get_settings
from .exceptions import DTrackError
from .models import (
    About,
    CollectionLogic,
    ParentRef,
    Project,
    ProjectCloneRequest,
    Tag,
)
from .polling import EventWaiter, WaitResult, wait_for_event

__all__ = [
    "About",
    "CollectionLogic",
    "DTrackClient",
    "DTrackError",
    "EventWaiter",
    "ParentRef",
    "Project",
    "ProjectCloneRequest",
    "Settings",
    "Tag",
    "WaitResult",
    "get_settings",
    "wait_for_event",
]
