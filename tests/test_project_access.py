from dataclasses import asdict
from datetime import datetime, timezone
from uuid import UUID

import pytest

from sentinelguard.project_access import (
    ProjectAccess,
    ProjectAccessFilter,
    ProjectAccessSortableFields,
    ProjectAccessSortOrder,
    ProjectAccessUpdatePayload,
)
from sentinelguard.sort import SortOrder

NIL = UUID(int=0)


def test_project_access_default():
    access = ProjectAccess()
    assert access.id is None
    assert {access.project_id, access.service_account_id, access.environment_id} == {NIL}
    assert access.enabled is False


def test_project_access_filter_and_update_defaults():
    assert asdict(ProjectAccessFilter()) == dict.fromkeys(
        ("project_id", "service_account_id", "environment_id", "enabled")
    )
    assert ProjectAccessUpdatePayload().enabled is None


def test_project_access_sortable_fields_to_string():
    pairs = [
        ("ID", "id"),
        ("PROJECT_ID", "project_id"),
        ("SERVICE_ACCOUNT_ID", "service_account_id"),
        ("ENVIRONMENT_ID", "environment_id"),
        ("UPDATED_AT", "updated_at"),
        ("CREATED_AT", "created_at"),
    ]
    assert [(f.name, str(f)) for f in ProjectAccessSortableFields] == pairs
    assert [ProjectAccessSortableFields(value).name for _, value in pairs] == [n for n, _ in pairs]


def test_project_access_sort_order_new():
    sort = ProjectAccessSortOrder(ProjectAccessSortableFields.PROJECT_ID, SortOrder.ASC)
    assert (sort.field, sort.order) == (ProjectAccessSortableFields.PROJECT_ID, SortOrder.ASC)


def test_to_response_converts_fields():
    stamp = datetime(2025, 6, 16, 3, 48, 22, tzinfo=timezone.utc)
    access = ProjectAccess(
        id=UUID(int=0x101),
        project_id=UUID("123e4567-e89b-12d3-a456-426614174000"),
        service_account_id=UUID("123e4567-e89b-12d3-a456-426614174001"),
        environment_id=UUID(int=1),
        enabled=True,
        created_at=stamp,
        updated_at=stamp,
    )
    assert asdict(access.to_response()) == {
        "id": "00000000-0000-0000-0000-000000000101",
        "project_id": "123e4567-e89b-12d3-a456-426614174000",
        "service_account_id": "123e4567-e89b-12d3-a456-426614174001",
        "environment_id": "00000000-0000-0000-0000-000000000001",
        "enabled": True,
        "created_at": "2025-06-16 03:48:22 UTC",
        "updated_at": "2025-06-16 03:48:22 UTC",
    }


def test_to_response_without_id_raises():
    with pytest.raises(ValueError, match="project access has no id"):
        ProjectAccess().to_response()