"""Generic sort specification shared by the list endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SortOrder(Enum):
    """Direction of a sort, rendered as the SQL keyword."""

    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value


@dataclass
class Sort:
    """A sort on a named column in a given direction."""

    field: str
    order: SortOrder