"""Environment records, API shapes and sorting options."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from .project import NIL_UUID, Record, RecordResponse, SortSpec, sortable_fields


@dataclass
class EnvironmentResponse(RecordResponse):
    project_id: str = ""
    name: str = ""
    description: str = ""
    enabled: bool = False


@dataclass
class Environment(Record):
    project_id: UUID = NIL_UUID
    name: str = ""
    description: str = ""
    enabled: bool = False

    def to_response(self) -> EnvironmentResponse:
        """Convert the stored environment into its API representation."""
        return self._convert(EnvironmentResponse, "environment")


@dataclass
class EnvironmentFilter:
    project_id: str | None = None
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None


@dataclass
class EnvironmentCreatePayload:
    project_id: str
    name: str
    description: str
    enabled: bool


@dataclass
class EnvironmentUpdatePayload:
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None


EnvironmentSortableFields = sortable_fields(
    "EnvironmentSortableFields", "id", "project_id", "name", "updated_at", "created_at"
)


class EnvironmentSortOrder(SortSpec):
    """Sort specification for environment listings."""