"""Project scope records, API shapes and sorting options."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from .project import NIL_UUID, Record, RecordResponse, SortSpec, sortable_fields


@dataclass
class ProjectScopeResponse(RecordResponse):
    project_id: str = ""
    scope: str = ""
    description: str = ""
    enabled: bool = False


@dataclass
class ProjectScope(Record):
    project_id: UUID = NIL_UUID
    scope: str = ""
    description: str = ""
    enabled: bool = False

    def to_response(self) -> ProjectScopeResponse:
        """Convert the stored project scope into its API representation."""
        return self._convert(ProjectScopeResponse, "project scope")


@dataclass
class ProjectScopeFilter:
    project_id: str | None = None
    scope: str | None = None
    description: str | None = None
    enabled: bool | None = None


@dataclass
class ProjectScopeCreatePayload:
    project_id: str
    scope: str
    description: str
    enabled: bool


@dataclass
class ProjectScopeUpdatePayload:
    scope: str | None = None
    description: str | None = None
    enabled: bool | None = None


ProjectScopeSortableFields = sortable_fields(
    "ProjectScopeSortableFields", "id", "project_id", "scope", "updated_at", "created_at"
)


class ProjectScopeSortOrder(SortSpec):
    """Sort specification for project scope listings."""