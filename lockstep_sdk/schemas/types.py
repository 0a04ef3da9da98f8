"""Wire conventions shared by every Lockstep record model.

Dates documented as date-only travel as ``YYYY-MM-DD`` strings, monetary
values as JSON numbers parsed into ``Decimal``, identifiers as UUID strings
and every field is nullable. Fields the source system does not provide are
omitted on the way out; absence and ``null`` mean the same thing on the way in.
"""

from __future__ import annotations

from datetime import date
from datetime import datetime
from decimal import Decimal
from functools import lru_cache
from typing import Annotated
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import ConfigDict
from pydantic import PlainSerializer
from pydantic import TypeAdapter
import simplejson


def _truncate_to_date(value: Any) -> Any:
  # Keep the calendar date as written; never convert through a timezone.
  if isinstance(value, datetime):
    return value.date()
  if isinstance(value, str) and len(value) > 10 and value[10] in "Tt ":
    return value[:10]
  return value


def _finite_decimal(value: Decimal) -> Decimal:
  if not value.is_finite():
    raise ValueError(f"Monetary value {value} is not a finite number.")
  return value


DateOnly = Annotated[date, BeforeValidator(_truncate_to_date)]
"""A calendar date with no time component, ``YYYY-MM-DD`` on the wire."""

Money = Annotated[
  Decimal,
  PlainSerializer(_finite_decimal, return_type=Decimal, when_used="always"),
]
"""A decimal-safe monetary amount, written with its exact digits as a JSON number."""


class LockstepModel(BaseModel):
  """Immutable base configuration for record models and envelopes."""

  model_config = ConfigDict(frozen=True, extra="ignore")


@lru_cache(maxsize=None)
def type_adapter(tp: Any) -> TypeAdapter:
  """Returns a cached adapter for validating payloads into ``tp``."""

  return TypeAdapter(tp)


def loads(content: bytes | str) -> Any:
  """Parses a JSON body, keeping every non-integer number as ``Decimal``."""

  if isinstance(content, bytes):
    content = content.decode("utf-8")
  return simplejson.loads(content, use_decimal=True)


def _leaf_to_wire(value: Any) -> Any:
  if isinstance(value, Decimal):
    return _finite_decimal(value)
  if isinstance(value, (date, datetime)):
    return value.isoformat()
  if isinstance(value, UUID):
    return str(value)
  return value


def to_wire(body: Any) -> Any:
  """Converts models, lists and dicts into their wire form.

  Monetary values stay ``Decimal`` so ``dumps`` can write their exact digits.
  """

  if isinstance(body, BaseModel):
    return to_wire(body.model_dump(exclude_none=True))
  if isinstance(body, (list, tuple)):
    return [to_wire(item) for item in body]
  if isinstance(body, dict):
    return {key: to_wire(value) for key, value in body.items()}
  return _leaf_to_wire(body)


def dumps(body: Any) -> str:
  """Serializes a request body to JSON text."""

  return simplejson.dumps(to_wire(body), use_decimal=True)
