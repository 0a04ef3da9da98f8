"""Magic link records."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from .types import LockstepModel


class MagicLinkModel(LockstepModel):
  """A magic link that can be used to log in to an ADS Platform application.

  ``magicLinkUrl`` is only returned when the link is created.
  """

  magicLinkId: UUID | None = None
  groupKey: UUID | None = None
  userId: UUID | None = None
  userRole: UUID | None = None
  applicationId: UUID | None = None
  expires: datetime | None = None
  revoked: datetime | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
  modified: datetime | None = None
  modifiedUserId: UUID | None = None
  companyId: UUID | None = None
  accountingProfileId: UUID | None = None
  magicLinkUrl: str | None = None
  user: dict[str, Any] | None = None
  visits: int | None = None
  status: int | None = None
  notes: list[dict[str, Any]] | None = None
  customFieldValues: list[dict[str, Any]] | None = None


class MagicLinkSummaryModel(LockstepModel):
  """Historic totals for all magic links sent in a group."""

  groupKey: UUID | None = None
  totalCount: int | None = None
  totalBounced: int | None = None
  totalVisited: int | None = None


class MagicLinkStatusModel(LockstepModel):
  """Status of the magic link a user authenticated with."""

  magicLinkId: UUID | None = None
  applicationId: UUID | None = None
  companyId: UUID | None = None
  accountingProfileId: UUID | None = None
  expires: datetime | None = None
