"""Journal entry and journal entry line records."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from .types import DateOnly
from .types import LockstepModel
from .types import Money


class JournalEntryModel(LockstepModel):
  """A journal entry synced from a general ledger.

  ``source`` and ``status`` are server-defined integers; new values can
  appear without an SDK release, so they are not mapped to enums.
  """

  journalEntryId: UUID | None = None
  groupKey: UUID | None = None
  appEnrollmentId: UUID | None = None
  erpKey: str | None = None
  journalId: str | None = None
  source: int | None = None
  postingDate: DateOnly | None = None
  status: int | None = None
  description: str | None = None
  comment: str | None = None
  referenceNumber: str | None = None
  sourcePostingDate: datetime | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
  modified: datetime | None = None
  modifiedUserId: UUID | None = None
  sourceModifiedDate: datetime | None = None
  lines: list[JournalEntryLineModel] | None = None
  attachments: list[dict[str, Any]] | None = None


class JournalEntryLineModel(LockstepModel):
  """A single debit or credit line of a journal entry."""

  journalEntryLineId: UUID | None = None
  journalEntryId: UUID | None = None
  groupKey: UUID | None = None
  appEnrollmentId: UUID | None = None
  erpKey: str | None = None
  financialAccountId: UUID | None = None
  accountNumber: str | None = None
  accountName: str | None = None
  debit: Money | None = None
  credit: Money | None = None
  currencyCode: str | None = None
  baseDebit: Money | None = None
  baseCredit: Money | None = None
  baseCurrencyCode: str | None = None
  sourceCreatedUser: str | None = None
  memo: str | None = None
  dimensions: dict[str, Any] | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
  modified: datetime | None = None
  modifiedUserId: UUID | None = None
  sourceModifiedDate: datetime | None = None
  journalEntry: JournalEntryModel | None = None


JournalEntryModel.model_rebuild()
JournalEntryLineModel.model_rebuild()
