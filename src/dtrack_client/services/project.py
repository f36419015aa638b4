"""
Project service.

Write operations require the PORTFOLIO_MANAGEMENT permission; reads require
VIEW_PORTFOLIO.
"""

from uuid import UUID

import structlog

from ..exceptions import InvalidArgumentError
from ..models import EventTokenResponse, Project, ProjectCloneRequest
from .base import BaseService

logger = structlog.get_logger(__name__)


class ProjectService(BaseService):
    """Creates, reads, clones and deletes projects."""

    async def create(self, project: Project) -> Project:
        """
        Create a project.

        Args:
            project: Project to create; ``name`` is required

        Returns:
            The project as stored by the server, including its UUID
        """
        if not project.name:
            raise InvalidArgumentError("Project name must not be empty", "name")

        response = await self._request(
            "PUT", "/api/v1/project", json=project.to_payload()
        )
        created = self._client.decode(response, Project)

        logger.info(
            "Project created",
            project_uuid=str(created.uuid),
            name=created.name,
            version=created.version,
        )
        return created

    async def get(self, project_uuid: UUID) -> Project:
        """
        Get a project by UUID.

        Args:
            project_uuid: Project UUID

        Returns:
            Project model
        """
        return await self._get(f"/api/v1/project/{self._segment(project_uuid)}", Project)

    async def delete(self, project_uuid: UUID) -> None:
        """
        Delete a project by UUID.

        Args:
            project_uuid: Project UUID
        """
        await self._request("DELETE", f"/api/v1/project/{self._segment(project_uuid)}")
        logger.info("Project deleted", project_uuid=str(project_uuid))

    async def clone(self, request: ProjectCloneRequest) -> str:
        """
        Clone a project into a new version.

        Cloning runs asynchronously on the server. Servers from 4.11 on answer
        with an event token that can be passed to the event service; older
        servers answer with an empty body, in which case an empty token is
        returned.

        Args:
            request: Clone options

        Returns:
            Event token, or "" if the server did not issue one
        """
        if not request.version:
            raise InvalidArgumentError("Clone version must not be empty", "version")

        response = await self._request(
            "PUT", "/api/v1/project/clone", json=request.to_payload()
        )

        token = ""
        if response.content.strip():
            token = self._client.decode(response, EventTokenResponse).token

        logger.info(
            "Project clone requested",
            project_uuid=str(request.project_uuid),
            version=request.version,
            token=token or None,
        )
        return token

    async def clone_and_wait(
        self,
        request: ProjectCloneRequest,
        timeout: float | None = None,
        interval: float = 0.0,
    ) -> str:
        """
        Clone a project and wait until the server has finished cloning it.

        Returns immediately when the server does not issue an event token.

        Returns:
            Event token, or "" if the server did not issue one
        """
        token = await self.clone(request)
        if token:
            await self._client.event.wait(token, timeout=timeout, interval=interval)
        return token

    async def latest(self, name: str) -> Project:
        """
        Get the version of a project flagged as latest.

        Requires Dependency-Track 4.12 or newer.

        Args:
            name: Project name

        Returns:
            Latest version of the project
        """
        if not name:
            raise InvalidArgumentError("Project name must not be empty", "name")

        return await self._get(f"/api/v1/project/latest/{self._segment(name)}", Project)
