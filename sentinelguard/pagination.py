"""Offset/limit pagination parameters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Pagination:
    """Optional offset and limit for list queries."""

    offset: int | None = None
    limit: int | None = None