"""Project records, API shapes and sorting options, plus the shared record machinery."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from enum import Enum, StrEnum
from typing import Any, TypeVar
from uuid import UUID

from .sort import SortOrder

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
NIL_UUID = UUID(int=0)

_R = TypeVar("_R")


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ``YYYY-MM-DD HH:MM:SS[.fff|.ffffff] UTC``.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    micros = value.microsecond
    if micros:
        if micros % 1000 == 0:
            text += f".{micros // 1000:03d}"
        else:
            text += f".{micros:06d}"
    return f"{text} UTC"


def _to_wire(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


def sortable_fields(name: str, *columns: str) -> type[StrEnum]:
    """Build an enum of sortable columns; member names are the upper-cased columns."""
    return StrEnum(name, [(column.upper(), column) for column in columns])


@dataclass(kw_only=True)
class RecordResponse:
    """Fields every API representation of a stored record carries."""

    id: str = ""
    created_at: str = ""
    updated_at: str = ""


@dataclass(kw_only=True)
class Record:
    """A stored record with an optional id and creation/update timestamps."""

    id: UUID | None = None
    created_at: datetime = EPOCH
    updated_at: datetime = EPOCH

    def _convert(self, response_type: type[_R], label: str) -> _R:
        """Build ``response_type`` from this record's fields, rendered for the wire."""
        if self.id is None:
            raise ValueError(f"{label} has no id")
        return response_type(
            **{f.name: _to_wire(getattr(self, f.name)) for f in fields(response_type)}
        )


@dataclass
class SortSpec:
    """A column to sort by and the direction."""

    field: StrEnum
    order: SortOrder


@dataclass
class ProjectResponse(RecordResponse):
    name: str = ""
    description: str = ""
    enabled: bool = False


@dataclass
class Project(Record):
    name: str = ""
    description: str = ""
    enabled: bool = False

    def to_response(self) -> ProjectResponse:
        """Convert the stored project into its API representation."""
        return self._convert(ProjectResponse, "project")


@dataclass
class ProjectFilter:
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None


@dataclass
class ProjectCreatePayload:
    name: str
    description: str
    enabled: bool


@dataclass
class ProjectUpdatePayload:
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None


ProjectSortableFields = sortable_fields(
    "ProjectSortableFields", "id", "name", "updated_at", "created_at"
)


class ProjectSortOrder(SortSpec):
    """Sort specification for project listings."""