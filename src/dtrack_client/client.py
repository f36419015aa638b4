"""
Dependency-Track API client.

This module provides the async HTTP client shared by all resource services.
It handles API key authentication, maps failed responses onto the client's
exception hierarchy and decodes JSON bodies into typed models.
"""

from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from . import __version__
from .config import Settings, get_settings
from .exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DecodingError,
    NotFoundError,
    TransportError,
)
from .services import AboutService, EventService, ProjectService, TagService

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class DTrackClient:
    """
    Async client for the Dependency-Track REST API.

    Resource services are exposed as attributes (``project``, ``tag``,
    ``event``, ``about``). Use the client as an async context manager so the
    underlying connection pool is closed when done.
    """

    API_KEY_HEADER = "X-Api-Key"

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 10.0,
        verify_ssl: bool = True,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the Dependency-Track client.

        Args:
            base_url: Server URL, e.g. "https://dtrack.example.com"
            api_key: API key sent with every request
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            user_agent: Optional User-Agent override
            transport: Optional httpx transport (used by tests)
        """
        if not base_url:
            raise ConfigurationError("A Dependency-Track base URL is required")

        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            verify=verify_ssl,
            headers=self._default_headers(api_key, user_agent),
            transport=transport,
        )

        self.about = AboutService(self)
        self.project = ProjectService(self)
        self.tag = TagService(self)
        self.event = EventService(self)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "DTrackClient":
        """Create a client from application settings."""
        settings = settings or get_settings()
        if not settings.is_configured:
            raise ConfigurationError(
                "DTRACK_BASE_URL environment variable is required. "
                "Please set it to your Dependency-Track server URL."
            )
        config = settings.http_config
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            user_agent=config.user_agent,
            transport=transport,
        )

    @staticmethod
    def _default_headers(api_key: str, user_agent: str | None) -> dict[str, str]:
        """Get default request headers."""
        headers = {
            "Accept": "application/json",
            "User-Agent": user_agent or f"dtrack-client/{__version__}",
        }
        if api_key:
            headers[DTrackClient.API_KEY_HEADER] = api_key
        return headers

    async def __aenter__(self) -> "DTrackClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Send a request and return the successful response.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            json: Optional JSON body
            params: Optional query parameters

        Returns:
            The httpx response for any 2xx status

        Raises:
            TransportError: On network failures and timeouts
            APIError: On non-2xx responses
        """
        try:
            response = await self._client.request(
                method, path, json=json, params=params
            )
        except httpx.TransportError as e:
            logger.error("API request failed", method=method, path=path, error=str(e))
            raise TransportError(
                f"{method} {path} failed: {e}",
                context={"method": method, "path": path},
            ) from e

        logger.debug(
            "API request", method=method, path=path, status_code=response.status_code
        )

        if response.is_success:
            return response
        raise self._error_for(method, path, response)

    @staticmethod
    def _error_for(method: str, path: str, response: httpx.Response) -> APIError:
        """Map a failed response onto an exception."""
        status_code = response.status_code
        body = response.text
        message = f"{method} {path} returned {status_code}"
        context = {"method": method, "path": path}

        logger.warning(
            "API request rejected", method=method, path=path, status_code=status_code
        )

        if status_code == 401:
            return AuthenticationError(message, body=body, context=context)
        if status_code == 403:
            return AuthorizationError(message, body=body, context=context)
        if status_code == 404:
            return NotFoundError(message, body=body, context=context)
        return APIError(message, status_code=status_code, body=body, context=context)

    @staticmethod
    def decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
        """
        Decode a JSON response body into a model.

        Raises:
            DecodingError: If the body is not JSON or does not fit the model
        """
        try:
            data = response.json()
        except ValueError as e:
            raise DecodingError(
                f"Response from {response.request.url.path} is not valid JSON",
                body=response.text,
            ) from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodingError(
                f"Unexpected {model.__name__} payload: {e}", body=response.text
            ) from e
