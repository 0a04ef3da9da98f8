"""In-memory database for the Lockstep mock server.

Loads seed data from JSON and provides CRUD, Searchlight-style filtering,
ordering and page-based pagination for all record types.
"""

from __future__ import annotations

import copy
import json
import re
import uuid
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

from lockstep_sdk.config.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

# Primary key field of each table.
TABLE_KEYS: Dict[str, str] = {
    "journalEntry": "journalEntryId",
    "journalEntryLine": "journalEntryLineId",
    "magicLink": "magicLinkId",
    "workflowStatus": "id",
    "groupAccount": "groupKey",
    "financialInstitutionAccount": "financialInstitutionAccountId",
    "attachmentLink": "attachmentId",
    "accountingProfile": "accountingProfileId",
    "accountingProfileContact": "accountingProfileContactId",
    "publicCompanyProfile": "publicUrlSlug",
    "transaction": "transactionId",
    "transactionDetail": "transactionDetailId",
}

_CONDITION = re.compile(
    r"^\s*(\w+)\s+(eq|ne|contains|startswith)\s+(?:'([^']*)'|(\S+))\s*$",
    re.IGNORECASE,
)


class SearchlightError(ValueError):
    """A filter or order expression the mock cannot parse."""


class InMemoryDB:
    """Simple in-memory store keyed by record type."""

    def __init__(self) -> None:
        self.tables: Dict[str, Dict[str, dict]] = {name: {} for name in TABLE_KEYS}

    # --- CRUD ---

    def insert(self, table: str, record: dict) -> dict:
        key = TABLE_KEYS[table]
        if not record.get(key):
            record[key] = str(uuid.uuid4())
        self.tables[table][str(record[key])] = record
        return record

    def get(self, table: str, record_id: str) -> Optional[dict]:
        return self.tables.get(table, {}).get(str(record_id))

    def update(self, table: str, record_id: str, data: dict) -> Optional[dict]:
        existing = self.get(table, record_id)
        if existing is None:
            return None
        existing.update(data)
        existing[TABLE_KEYS[table]] = str(record_id)  # prevent id overwrite
        return existing

    def delete(self, table: str, record_id: str) -> bool:
        return self.tables.get(table, {}).pop(str(record_id), None) is not None

    def list_all(self, table: str) -> List[dict]:
        return list(self.tables.get(table, {}).values())

    # --- Searchlight ---

    def search(self, table: str, filter: Optional[str] = None, order: Optional[str] = None) -> List[dict]:
        """Filter and sort a table, e.g. ``status eq 'active' and name contains 'Bank'``."""
        conditions = _parse_filter(filter)
        rows = [r for r in self.list_all(table) if all(_matches(r, c) for c in conditions)]
        if order:
            field, descending = _parse_order(order)
            rows.sort(key=lambda r: _sort_key(r.get(field)), reverse=descending)
        return rows

    def fetch(
        self,
        table: str,
        filter: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> dict:
        """Build a fetch envelope for one page of a filtered table."""
        rows = self.search(table, filter, order)
        return paginate(rows, page_size, page_number)

    # --- Seed data loading ---

    def load_seed_data(self, path: str | Path) -> None:
        path = Path(path)
        if not path.exists():
            return
        with open(path, "r") as f:
            data = json.load(f)

        for table_name in TABLE_KEYS:
            for record in data.get(table_name, []):
                self.insert(table_name, copy.deepcopy(record))


def paginate(rows: List[dict], page_size: Optional[int] = None, page_number: Optional[int] = None) -> dict:
    size = DEFAULT_PAGE_SIZE if page_size is None else page_size
    number = 0 if page_number is None else page_number
    if not 1 <= size <= MAX_PAGE_SIZE:
        raise SearchlightError(f"pageSize must be between 1 and {MAX_PAGE_SIZE}.")
    if number < 0:
        raise SearchlightError("pageNumber must not be negative.")
    start = size * number
    return {
        "totalCount": len(rows),
        "pageSize": size,
        "pageNumber": number,
        "records": rows[start:start + size],
    }


# --- Helpers ---

def _parse_filter(filter: Optional[str]) -> List[tuple]:
    if not filter or not filter.strip():
        return []
    conditions = []
    for part in re.split(r"\s+and\s+", filter.strip(), flags=re.IGNORECASE):
        match = _CONDITION.match(part)
        if match is None:
            raise SearchlightError(f"Unable to parse filter expression {part!r}.")
        field, op, quoted, bare = match.groups()
        conditions.append((field, op.lower(), quoted if quoted is not None else bare))
    return conditions


def _parse_order(order: str) -> tuple:
    parts = order.split()
    if len(parts) == 1:
        return parts[0], False
    if len(parts) == 2 and parts[1].lower() in ("asc", "desc"):
        return parts[0], parts[1].lower() == "desc"
    raise SearchlightError(f"Unable to parse order expression {order!r}.")


def _normalize(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _matches(record: dict, condition: tuple) -> bool:
    field, op, target = condition
    value = _normalize(record.get(field))
    if op == "eq":
        return value.lower() == target.lower()
    if op == "ne":
        return value.lower() != target.lower()
    if op == "contains":
        return target.lower() in value.lower()
    return value.lower().startswith(target.lower())


def _sort_key(value: Any) -> tuple:
    if value is None:
        return (2, 0.0, "")
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return (0, float(value), "")
    return (1, 0.0, str(value))


# --- Singleton ---

_db: Optional[InMemoryDB] = None


def get_db() -> InMemoryDB:
    global _db
    if _db is None:
        _db = InMemoryDB()
        seed_path = Path(__file__).parent / "data" / "seed_data.json"
        _db.load_seed_data(seed_path)
    return _db


def reset_db() -> InMemoryDB:
    """Reset the database (useful for testing)."""
    global _db
    _db = None
    return get_db()
