"""Transaction records and the transaction query envelope."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from .common import SummaryFetchResult
from .types import DateOnly
from .types import LockstepModel
from .types import Money


class TransactionModel(LockstepModel):
  """An invoice, credit memo or payment as seen by the transactions view.

  ``transactionType`` and ``transactionStatus`` are open codes.
  """

  groupKey: UUID | None = None
  transactionId: UUID | None = None
  companyId: UUID | None = None
  referenceCode: str | None = None
  transactionType: str | None = None
  transactionStatus: str | None = None
  transactionDate: DateOnly | None = None
  dueDate: DateOnly | None = None
  currencyCode: str | None = None
  transactionAmount: Money | None = None
  outstandingAmount: Money | None = None
  baseCurrencyCode: str | None = None
  baseCurrencyTransactionAmount: Money | None = None
  baseCurrencyOutstandingAmount: Money | None = None
  daysPastDue: int | None = None
  paymentNumber: str | None = None
  isVoided: bool | None = None
  inDispute: bool | None = None
  modified: datetime | None = None


class TransactionSummaryTotalModel(LockstepModel):
  """Totals for every transaction matching a query."""

  totalCount: int | None = None
  totalAmount: Money | None = None
  outstandingAmount: Money | None = None
  invoiceOpenCount: int | None = None
  invoicePastDueCount: int | None = None


class TransactionDetailModel(LockstepModel):
  """A transaction applied to, or applied from, another transaction."""

  transactionId: UUID | None = None
  groupKey: UUID | None = None
  transactionType: str | None = None
  referenceCode: str | None = None
  transactionDate: DateOnly | None = None
  currencyCode: str | None = None
  amount: Money | None = None
  baseCurrencyCode: str | None = None
  baseCurrencyAmount: Money | None = None


TransactionFetchResult = SummaryFetchResult[TransactionModel, TransactionSummaryTotalModel]
