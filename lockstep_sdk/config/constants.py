"""Shared constants for the Lockstep SDK and its mock server."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SDK_NAME: str = "Python"

SDK_VERSION: str = "2022.15.31"

SANDBOX: str = "sbx"
PRODUCTION: str = "prd"

ENVIRONMENT_URLS: Mapping[str, str] = MappingProxyType(
  {
    SANDBOX: "https://api.sbx.lockstep.io/",
    PRODUCTION: "https://api.lockstep.io/",
  }
)

DEFAULT_PAGE_SIZE: int = 200

MAX_PAGE_SIZE: int = 10_000

DEFAULT_TIMEOUT_SECONDS: float = 30.0

SERVER_DURATION_HEADER: str = "ServerDuration"
