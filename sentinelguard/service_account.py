"""Service account records, API shapes and sorting options."""

from __future__ import annotations

from dataclasses import dataclass

from .project import Record, RecordResponse, SortSpec, sortable_fields


@dataclass
class ServiceAccountResponse(RecordResponse):
    name: str = ""
    email: str = ""
    secret: str = ""
    description: str = ""
    enabled: bool = False


@dataclass
class ServiceAccount(Record):
    name: str = ""
    email: str = ""
    secret: str = ""
    description: str = ""
    enabled: bool = False

    def to_response(self) -> ServiceAccountResponse:
        """Convert the stored service account into its API representation."""
        return self._convert(ServiceAccountResponse, "service account")


@dataclass
class ServiceAccountFilter:
    name: str | None = None
    email: str | None = None
    description: str | None = None
    enabled: bool | None = None


@dataclass
class ServiceAccountCreatePayload:
    name: str
    email: str
    secret: str
    description: str
    enabled: bool


@dataclass
class ServiceAccountUpdatePayload:
    name: str | None = None
    email: str | None = None
    secret: str | None = None
    description: str | None = None
    enabled: bool | None = None


ServiceAccountSortableFields = sortable_fields(
    "ServiceAccountSortableFields", "id", "name", "email", "updated_at", "created_at"
)


class ServiceAccountSortOrder(SortSpec):
    """Sort specification for service account listings."""