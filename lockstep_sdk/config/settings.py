"""Settings model for the Lockstep API client."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from .constants import DEFAULT_TIMEOUT_SECONDS
from .constants import ENVIRONMENT_URLS
from .constants import SANDBOX


class LockstepSettings(BaseSettings):
  """Runtime settings loaded from environment variables."""

  environment: str = SANDBOX
  server_url: str | None = None

  api_key: str | None = None
  bearer_token: str | None = None
  app_name: str | None = None

  timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

  model_config = SettingsConfigDict(
    env_prefix="LOCKSTEP_",
    env_file=".env",
    extra="ignore",
  )

  @field_validator("environment", mode="before")
  @classmethod
  def _validate_environment(cls, environment: str) -> str:
    normalized = environment.lower()
    if normalized not in ENVIRONMENT_URLS:
      raise ValueError(
        f"Invalid environment {environment!r}. "
        f"Expected one of {sorted(ENVIRONMENT_URLS)}."
      )
    return normalized

  @field_validator("timeout_seconds")
  @classmethod
  def _validate_timeout(cls, timeout: float) -> float:
    if timeout <= 0:
      raise ValueError("timeout_seconds must be positive.")
    return timeout

  @property
  def base_url(self) -> str:
    """The custom server URL when set, otherwise the environment's URL."""
    return self.server_url or ENVIRONMENT_URLS[self.environment]


@lru_cache(maxsize=1)
def get_settings() -> LockstepSettings:
  """Returns a cached settings object for repeated client construction."""

  return LockstepSettings()
