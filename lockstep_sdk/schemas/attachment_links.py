"""Attachment link records."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from .types import LockstepModel


class AttachmentLinkModel(LockstepModel):
  """Links an attachment to a record identified by ``tableKey``/``objectKey``."""

  groupKey: UUID | None = None
  attachmentId: UUID | None = None
  objectKey: UUID | None = None
  tableKey: str | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
