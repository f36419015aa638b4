"""
Server information service.
"""

import structlog

from ..models import About
from .base import BaseService

logger = structlog.get_logger(__name__)


class AboutService(BaseService):
    """Reads version information from the server."""

    async def get(self) -> About:
        """
        Get the server's version information.

        Returns:
            About model with application and framework versions
        """
        about = await self._get("/api/version", About)
        logger.debug("Server version retrieved", version=about.version)
        return about
