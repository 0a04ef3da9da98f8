"""Shared helpers for mock route handlers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from lockstep_sdk.schemas.types import LockstepModel, to_wire
from mock_servers.lockstep_mock.db import get_db
from mock_servers.lockstep_mock.errors import not_found


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def store(table: str, model: LockstepModel) -> dict:
    """Insert a validated model, stamping ``created`` like the real API."""
    record = to_wire(model)
    record.setdefault("created", now_iso())
    return get_db().insert(table, record)


def require(table: str, record_id: str, label: str) -> dict:
    record = get_db().get(table, record_id)
    if record is None:
        raise not_found(label, record_id)
    return record


def query_page(
    table: str,
    filter: Optional[str],
    order: Optional[str],
    page_size: Optional[int],
    page_number: Optional[int],
) -> dict:
    return get_db().fetch(table, filter, order, page_size, page_number)
