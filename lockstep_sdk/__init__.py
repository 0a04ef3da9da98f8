"""Python SDK for the Lockstep Platform API."""

from __future__ import annotations

from .api import ApiKeyAuth, AuthStrategy, BearerTokenAuth, LockstepApi, LockstepResponse
from .config.settings import LockstepSettings, get_settings
from .errors import (
    ApplicationError,
    LockstepError,
    MalformedResponseError,
    TransportError,
    UnknownEnvironmentError,
)
from .schemas import ErrorResult, FetchResult, SummaryFetchResult

__all__ = [
    "ApiKeyAuth",
    "ApplicationError",
    "AuthStrategy",
    "BearerTokenAuth",
    "ErrorResult",
    "FetchResult",
    "LockstepApi",
    "LockstepError",
    "LockstepResponse",
    "LockstepSettings",
    "MalformedResponseError",
    "SummaryFetchResult",
    "TransportError",
    "UnknownEnvironmentError",
    "get_settings",
]
