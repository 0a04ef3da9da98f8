"""Accounting profile and public company profile records."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from .types import LockstepModel


class AccountingProfileModel(LockstepModel):
  """An accounting function (AR, AP, Treasury, ...) of a company profile."""

  accountingProfileId: UUID | None = None
  companyId: UUID | None = None
  groupKey: UUID | None = None
  name: str | None = None
  type: str | None = None
  emailAddress: str | None = None
  phone: str | None = None
  address1: str | None = None
  address2: str | None = None
  address3: str | None = None
  city: str | None = None
  region: str | None = None
  postalCode: str | None = None
  country: str | None = None
  primaryContactId: UUID | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
  modified: datetime | None = None
  modifiedUserId: UUID | None = None
  notes: list[dict[str, Any]] | None = None
  attachments: list[dict[str, Any]] | None = None
  customFieldDefinitions: list[dict[str, Any]] | None = None
  customFieldValues: list[dict[str, Any]] | None = None


class AccountingProfileContactModel(LockstepModel):
  """A secondary contact linked to an accounting profile."""

  accountingProfileContactId: UUID | None = None
  accountingProfileId: UUID | None = None
  contactId: UUID | None = None
  groupKey: UUID | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
  modified: datetime | None = None
  modifiedUserId: UUID | None = None


class PublicCompanyProfileModel(LockstepModel):
  companyId: UUID | None = None
  companyName: str | None = None
  companyLogoUrl: str | None = None
  website: str | None = None
  description: str | None = None
  publicUrlSlug: str | None = None
