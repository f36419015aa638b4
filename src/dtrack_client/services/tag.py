"""
Tag service.

Requires the TAG_MANAGEMENT permission.
"""

import structlog

from ..exceptions import InvalidArgumentError
from .base import BaseService

logger = structlog.get_logger(__name__)


class TagService(BaseService):
    """Manages portfolio tags."""

    async def create(self, names: list[str]) -> None:
        """
        Create one or more tags.

        Args:
            names: Tag names to create

        Raises:
            InvalidArgumentError: If no names are given or a name is blank
        """
        if not names:
            raise InvalidArgumentError("At least one tag name is required", "names")
        if any(not name or not name.strip() for name in names):
            raise InvalidArgumentError("Tag names must not be blank", "names")

        await self._request("PUT", "/api/v1/tag", json=list(names))
        logger.info("Tags created", tags=names)
