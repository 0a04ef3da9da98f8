"""Error hierarchy raised by the Lockstep API client.

Transport, application and malformed-response failures are kept apart so
callers can tell "the network failed" from "the server said no" from "the
server answered in a shape this SDK does not understand".
"""

from __future__ import annotations

from lockstep_sdk.schemas.common import ErrorResult


class LockstepError(Exception):
    """Base error for all Lockstep SDK errors."""

    message: str = "Lockstep API error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.__class__.message
        super().__init__(self.message)


class TransportError(LockstepError):
    """The request could not be sent or no response was received."""

    message = "Request to the Lockstep API failed before a response arrived"

    def __init__(self, message: str | None = None, *, method: str = "", url: str = "") -> None:
        self.method = method
        self.url = url
        super().__init__(message)


class ApplicationError(LockstepError):
    """The server answered with a non-success status and an error envelope."""

    message = "Lockstep API returned an error"

    def __init__(self, error: ErrorResult, status_code: int) -> None:
        self.error = error
        self.status_code = status_code
        super().__init__(f"{status_code} {error.title or self.__class__.message}: {error.describe()}")

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class MalformedResponseError(LockstepError):
    """A success status was returned with a body of the wrong shape."""

    message = "Lockstep API response did not match the expected shape"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        content: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.content = content
        super().__init__(message)


class UnknownEnvironmentError(LockstepError, ValueError):
    """An environment name with no known server URL."""

    message = "Unknown environment"
