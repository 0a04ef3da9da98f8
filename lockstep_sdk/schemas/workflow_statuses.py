"""Workflow status records."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from .types import LockstepModel


class WorkflowStatusModel(LockstepModel):
  """The state of a specific workflow for an entity."""

  id: UUID | None = None
  name: str | None = None
  description: str | None = None
  parentWorkflowStatusId: UUID | None = None
  category: str | None = None
  code: str | None = None
  isNotesRequired: bool | None = None
  promoteToErp: bool | None = None
  created: datetime | None = None
  createdUserId: UUID | None = None
  modified: datetime | None = None
  modifiedUserId: UUID | None = None
