"""Shared helpers for resource clients: query options and path building."""

from __future__ import annotations

from typing import Any, Optional
from uuid import UUID

from lockstep_sdk.config.constants import MAX_PAGE_SIZE


def query_options(
    filter: Optional[str] = None,
    include: Optional[str] = None,
    order: Optional[str] = None,
    page_size: Optional[int] = None,
    page_number: Optional[int] = None,
) -> dict[str, Any]:
    """Build Searchlight query parameters; ``None`` entries are dropped later."""
    if page_size is not None and not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")
    if page_number is not None and page_number < 0:
        raise ValueError(f"page_number must not be negative, got {page_number}")
    return {
        "filter": filter,
        "include": include,
        "order": order,
        "pageSize": page_size,
        "pageNumber": page_number,
    }


def record_path(prefix: str, record_id: UUID | str) -> str:
    """``/api/v1/<resource>/<id>`` with the id in canonical form."""
    return f"{prefix}/{record_id}"
