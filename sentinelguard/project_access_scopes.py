"""Project access scope records, API shapes and sorting options."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from .project import NIL_UUID, Record, RecordResponse, SortSpec, sortable_fields


@dataclass
class ProjectAccessScopeResponse(RecordResponse):
    project_access_id: str = ""
    scope_id: str = ""
    enabled: bool = False


@dataclass
class ProjectAccessScope(Record):
    project_access_id: UUID = NIL_UUID
    scope_id: UUID = NIL_UUID
    enabled: bool = False

    def to_response(self) -> ProjectAccessScopeResponse:
        """Convert the stored project access scope into its API representation."""
        return self._convert(ProjectAccessScopeResponse, "project access scope")


@dataclass
class ProjectAccessScopeFilter:
    project_access_id: str | None = None
    scope_id: str | None = None


@dataclass
class ProjectAccessScopeCreatePayload:
    project_access_id: str
    scope_id: str


@dataclass
class ProjectAccessScopeUpdatePayload:
    enabled: bool | None = None


ProjectAccessScopeSortableFields = sortable_fields(
    "ProjectAccessScopeSortableFields",
    "id",
    "project_access_id",
    "scope_id",
    "updated_at",
    "created_at",
)


class ProjectAccessScopeSortOrder(SortSpec):
    """Sort specification for project access scope listings."""