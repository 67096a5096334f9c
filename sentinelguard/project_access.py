"""Project access records, API shapes and sorting options."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from .project import NIL_UUID, Record, RecordResponse, SortSpec, sortable_fields


@dataclass
class ProjectAccessResponse(RecordResponse):
    project_id: str = ""
    service_account_id: str = ""
    environment_id: str = ""
    enabled: bool = False


@dataclass
class ProjectAccess(Record):
    project_id: UUID = NIL_UUID
    service_account_id: UUID = NIL_UUID
    environment_id: UUID = NIL_UUID
    enabled: bool = False

    def to_response(self) -> ProjectAccessResponse:
        """Convert the stored project access into its API representation."""
        return self._convert(ProjectAccessResponse, "project access")


@dataclass
class ProjectAccessFilter:
    project_id: str | None = None
    service_account_id: str | None = None
    environment_id: str | None = None
    enabled: bool | None = None


@dataclass
class ProjectAccessCreatePayload:
    project_id: str
    service_account_id: str
    environment_id: str
    enabled: bool


@dataclass
class ProjectAccessUpdatePayload:
    enabled: bool | None = None


ProjectAccessSortableFields = sortable_fields(
    "ProjectAccessSortableFields",
    "id",
    "project_id",
    "service_account_id",
    "environment_id",
    "updated_at",
    "created_at",
)


class ProjectAccessSortOrder(SortSpec):
    """Sort specification for project access listings."""