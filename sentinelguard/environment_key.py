"""Environment signing-key records, API shapes and sorting options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from .project import NIL_UUID, Record, RecordResponse, SortSpec, sortable_fields


class Algorithm(Enum):
    """Token signing algorithms an environment key may use."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    ES256 = "ES256"
    ES384 = "ES384"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    PS256 = "PS256"
    PS384 = "PS384"
    PS512 = "PS512"
    EdDSA = "EdDSA"

    def __str__(self) -> str:
        return self.value


@dataclass
class EnvironmentKeyResponse(RecordResponse):
    environment_id: str = ""
    algorithm: str = ""


@dataclass
class EnvironmentKey(Record):
    environment_id: UUID = NIL_UUID
    algorithm: Algorithm = Algorithm.HS256

    def to_response(self) -> EnvironmentKeyResponse:
        """Convert the stored environment key into its API representation."""
        return self._convert(EnvironmentKeyResponse, "environment key")


@dataclass
class EnvironmentKeyFilter:
    environment_id: str | None = None
    algorithm: str | None = None


@dataclass
class EnvironmentKeyCreatePayload:
    environment_id: str
    algorithm: str
    key: str


@dataclass
class EnvironmentKeyUpdatePayload:
    key: str | None = None


EnvironmentKeySortableFields = sortable_fields(
    "EnvironmentKeySortableFields", "id", "environment_id", "algorithm", "created_at", "updated_at"
)


class EnvironmentKeySortOrder(SortSpec):
    """Sort specification for environment key listings."""