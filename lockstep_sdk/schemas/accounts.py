"""Group account and financial institution account records."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from .types import LockstepModel


class GroupAccountModel(LockstepModel):
  """The account for an entire group; one per ``groupKey``."""

  groupKey: UUID | None = None
  groupName: str | None = None
  primaryUserId: UUID | None = None
  groupCompanyId: UUID | None = None
  baseCurrencyCode: str | None = None
  isActive: bool | None = None
  onboardingScheduled: bool | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
  modified: datetime | None = None
  modifiedUserId: UUID | None = None
  countryCode: str | None = None


class FinancialInstitutionAccountModel(LockstepModel):
  """A checking, savings or credit card account used for transactions.

  ``status`` and ``accountType`` are open codes (e.g. ``active`` or
  ``Asset``); the server may add values at any time.
  """

  financialInstitutionAccountId: UUID | None = None
  groupKey: UUID | None = None
  bankAccountId: str | None = None
  erpKey: str | None = None
  appEnrollmentId: UUID | None = None
  name: str | None = None
  status: str | None = None
  description: str | None = None
  accountType: str | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
  modified: datetime | None = None
  modifiedUserId: UUID | None = None
