"""
Base class for Dependency-Track resource services.
"""

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

if TYPE_CHECKING:
    from ..client import DTrackClient

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseService:
    """Base class for API resource services."""

    def __init__(self, client: "DTrackClient") -> None:
        self._client = client

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        return await self._client.request(method, path, **kwargs)

    async def _get(self, path: str, model: type[ModelT], **kwargs: Any) -> ModelT:
        response = await self._request("GET", path, **kwargs)
        return self._client.decode(response, model)

    @staticmethod
    def _segment(value: object) -> str:
        """Quote a value for use as a single URL path segment."""
        return quote(str(value), safe="")
