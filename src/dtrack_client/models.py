"""
Data models for Dependency-Track API payloads.

Field names are snake_case in Python and camelCase on the wire. Unset optional
fields are left out of request bodies so the server applies its own defaults.
"""

from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base model with camelCase aliases and lenient parsing."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CollectionLogic(str, Enum):
    """How a collection project aggregates metrics from its children."""

    NONE = "NONE"
    AGGREGATE_DIRECT_CHILDREN = "AGGREGATE_DIRECT_CHILDREN"
    AGGREGATE_DIRECT_CHILDREN_WITH_TAG = "AGGREGATE_DIRECT_CHILDREN_WITH_TAG"
    AGGREGATE_LATEST_VERSION_CHILDREN = "AGGREGATE_LATEST_VERSION_CHILDREN"


class Tag(APIModel):
    name: str


class ParentRef(APIModel):
    uuid: UUID


class Project(APIModel):
    """A project in the portfolio."""

    uuid: UUID | None = None
    name: str = ""
    version: str | None = None
    description: str | None = None
    classifier: str | None = None
    group: str | None = None
    publisher: str | None = None
    purl: str | None = None
    active: bool | None = None
    is_latest: bool | None = None
    tags: list[Tag] | None = None
    parent: ParentRef | None = None
    collection_logic: CollectionLogic | None = None
    collection_tag: Tag | None = None
    last_bom_import: int | None = None


class ProjectCloneRequest(APIModel):
    """Options for cloning a project into a new version."""

    project_uuid: UUID = Field(..., alias="project")
    version: str
    include_tags: bool = False
    include_properties: bool = False
    include_components: bool = False
    include_services: bool = False
    include_audit_history: bool = False
    include_acl: bool = Field(default=False, alias="includeACL")
    include_policy_violations: bool = False
    make_clone_latest: bool | None = None


class EventTokenResponse(APIModel):
    token: str = ""


class EventStatus(APIModel):
    processing: bool


class About(APIModel):
    """Server version information."""

    version: str
    timestamp: str | None = None
    uuid: UUID | None = None
    system_uuid: UUID | None = None
    application: str | None = None
    framework: dict[str, Any] | None = None
