"""
Resource services for the Dependency-Track client.
"""

from .about import AboutService
from .event import EventService
from .project import ProjectService
from .tag import TagService

__all__ = ["AboutService", "EventService", "ProjectService", "TagService"]
