"""Common result envelopes shared by every Lockstep endpoint."""

from __future__ import annotations

from typing import Any
from typing import Generic
from typing import TypeVar

from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

from .types import LockstepModel
from .types import Money

_T = TypeVar("_T")
_S = TypeVar("_S")


class ErrorResult(LockstepModel):
  """Problem-details payload returned on any non-success response.

  Every field is optional: older servers omit ``instance`` and proxies in
  front of the API may return no JSON at all. ``status`` is the field to
  branch on; the rest is diagnostic text whose vocabulary the server owns.
  """

  type: str | None = None
  title: str | None = None
  status: int | None = None
  detail: str | None = None
  instance: str | None = None
  errors: dict[str, list[str]] | None = None

  # Raw response body, attached by the client rather than sent by the server.
  content: str | None = Field(default=None, exclude=True)

  @field_validator("errors", mode="before")
  @classmethod
  def _listify_errors(cls, errors: Any) -> Any:
    # Some servers send a single message per field instead of a list.
    if isinstance(errors, dict):
      return {
        key: [value] if isinstance(value, str) else value
        for key, value in errors.items()
      }
    return errors

  @property
  def is_client_error(self) -> bool:
    return self.status is not None and 400 <= self.status < 500

  @property
  def is_server_error(self) -> bool:
    return self.status is not None and self.status >= 500

  def describe(self) -> str:
    """One-line rendering of the envelope for log messages."""
    parts = [
      f"status={self.status}",
      f"title={self.title!r}",
      f"type={self.type!r}",
      f"detail={self.detail!r}",
      f"instance={self.instance!r}",
    ]
    return " ".join(parts)


class FetchResult(LockstepModel, Generic[_T]):
  """One page of records returned by a query endpoint."""

  totalCount: int | None = None
  pageSize: int | None = None
  pageNumber: int | None = None
  records: list[_T]

  @model_validator(mode="after")
  def _validate_paging(self) -> FetchResult[_T]:
    if (self.pageSize is None) != (self.pageNumber is None):
      raise ValueError("pageSize and pageNumber must be present together.")
    return self


class SummaryAgingTotalsModel(LockstepModel):
  """Outstanding balance for one aging bucket."""

  bucket: str | None = None
  outstandingBalance: Money | None = None


class TransactionCurrencySummaryModel(LockstepModel):
  """Transaction totals for one currency."""

  currencyCode: str | None = None
  totalAmount: Money | None = None
  outstandingAmount: Money | None = None


class SummaryFetchResult(FetchResult[_T], Generic[_T, _S]):
  """A page of records with query-wide totals attached."""

  summary: _S | None = None
  agingSummary: list[SummaryAgingTotalsModel] | None = None
  currencySummaries: list[TransactionCurrencySummaryModel] | None = None


class DeleteResult(LockstepModel):
  """Result of a delete request."""

  messages: list[str] | None = None


class ActionResultModel(LockstepModel):
  """Result of an action such as a revoke or a single-record delete."""

  messages: list[str] | None = None
