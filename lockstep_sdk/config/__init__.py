"""Shared Lockstep SDK configuration exports."""

from __future__ import annotations

from .constants import DEFAULT_PAGE_SIZE
from .constants import ENVIRONMENT_URLS
from .constants import MAX_PAGE_SIZE
from .constants import PRODUCTION
from .constants import SANDBOX
from .constants import SDK_NAME
from .constants import SDK_VERSION
from .settings import LockstepSettings
from .settings import get_settings

__all__ = [
  "DEFAULT_PAGE_SIZE",
  "ENVIRONMENT_URLS",
  "MAX_PAGE_SIZE",
  "PRODUCTION",
  "SANDBOX",
  "SDK_NAME",
  "SDK_VERSION",
  "LockstepSettings",
  "get_settings",
]
