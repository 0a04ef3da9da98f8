"""Exports for all Lockstep schema models."""

from __future__ import annotations

from .accounts import FinancialInstitutionAccountModel
from .accounts import GroupAccountModel
from .attachment_links import AttachmentLinkModel
from .common import ActionResultModel
from .common import DeleteResult
from .common import ErrorResult
from .common import FetchResult
from .common import SummaryAgingTotalsModel
from .common import SummaryFetchResult
from .common import TransactionCurrencySummaryModel
from .journal_entries import JournalEntryLineModel
from .journal_entries import JournalEntryModel
from .magic_links import MagicLinkModel
from .magic_links import MagicLinkStatusModel
from .magic_links import MagicLinkSummaryModel
from .profiles import AccountingProfileContactModel
from .profiles import AccountingProfileModel
from .profiles import PublicCompanyProfileModel
from .transactions import TransactionDetailModel
from .transactions import TransactionFetchResult
from .transactions import TransactionModel
from .transactions import TransactionSummaryTotalModel
from .types import DateOnly
from .types import LockstepModel
from .types import Money
from .types import dumps
from .types import loads
from .types import to_wire
from .types import type_adapter
from .workflow_statuses import WorkflowStatusModel

__all__ = [
  "AccountingProfileContactModel",
  "AccountingProfileModel",
  "ActionResultModel",
  "AttachmentLinkModel",
  "DateOnly",
  "DeleteResult",
  "ErrorResult",
  "FetchResult",
  "FinancialInstitutionAccountModel",
  "GroupAccountModel",
  "JournalEntryLineModel",
  "JournalEntryModel",
  "LockstepModel",
  "MagicLinkModel",
  "MagicLinkStatusModel",
  "MagicLinkSummaryModel",
  "Money",
  "PublicCompanyProfileModel",
  "SummaryAgingTotalsModel",
  "SummaryFetchResult",
  "TransactionCurrencySummaryModel",
  "TransactionDetailModel",
  "TransactionFetchResult",
  "TransactionModel",
  "TransactionSummaryTotalModel",
  "WorkflowStatusModel",
  "dumps",
  "loads",
  "to_wire",
  "type_adapter",
]
