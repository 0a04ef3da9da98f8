"""Lockstep Platform API connector with pluggable auth strategy."""
from __future__ import annotations

import logging
import socket
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Generic, Optional, TypeVar
from uuid import UUID

import httpx
from pydantic import ValidationError

from lockstep_sdk.clients import (
    AttachmentLinksClient,
    FinancialInstitutionAccountsClient,
    GroupAccountsClient,
    JournalEntriesClient,
    JournalEntryLinesClient,
    MagicLinksClient,
    ProfilesAccountingClient,
    ProfilesAccountingContactsClient,
    ProfilesCompaniesClient,
    TransactionsClient,
    WorkflowStatusesClient,
)
from lockstep_sdk.config.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    ENVIRONMENT_URLS,
    SDK_NAME,
    SDK_VERSION,
    SERVER_DURATION_HEADER,
)
from lockstep_sdk.config.settings import LockstepSettings, get_settings
from lockstep_sdk.errors import (
    ApplicationError,
    MalformedResponseError,
    TransportError,
    UnknownEnvironmentError,
)
from lockstep_sdk.schemas.common import ErrorResult
from lockstep_sdk.schemas.types import dumps, loads, type_adapter

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class AuthStrategy(ABC):
    @abstractmethod
    def get_headers(self) -> dict[str, str]: ...


class ApiKeyAuth(AuthStrategy):
    """Lockstep Platform API key, sent as ``Api-Key``."""
    def __init__(self, api_key: str):
        self._api_key = api_key
    def get_headers(self) -> dict[str, str]:
        return {"Api-Key": self._api_key}


class BearerTokenAuth(AuthStrategy):
    """JWT bearer token."""
    def __init__(self, token: str):
        self._token = token
    def get_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}


@dataclass(frozen=True)
class LockstepResponse(Generic[_T]):
    """A successful API call: the parsed value plus timing information.

    ``server_duration`` is the server's own processing time and
    ``total_roundtrip`` includes network time and JSON parsing, both in
    milliseconds.
    """

    status_code: int
    value: Optional[_T] = None
    server_duration: Optional[int] = None
    total_roundtrip: int = 0


class LockstepApi:
    """Client for the Lockstep Platform API.

    Start from ``with_environment("sbx")`` or ``from_settings()``. An
    ``http_client`` may be injected to reuse a connection pool or to route
    requests somewhere other than the network; it is never closed here.
    """

    def __init__(
        self,
        server_url: str,
        auth: Optional[AuthStrategy] = None,
        app_name: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.Client] = None,
    ):
        self._server_url = server_url.rstrip("/")
        self._auth = auth
        self._app_name = app_name
        self._timeout = timeout
        self._http_client = http_client
        self._machine_name = socket.gethostname()

        self.attachment_links = AttachmentLinksClient(self)
        self.financial_institution_accounts = FinancialInstitutionAccountsClient(self)
        self.group_accounts = GroupAccountsClient(self)
        self.journal_entries = JournalEntriesClient(self)
        self.journal_entry_lines = JournalEntryLinesClient(self)
        self.magic_links = MagicLinksClient(self)
        self.profiles_accounting = ProfilesAccountingClient(self)
        self.profiles_accounting_contacts = ProfilesAccountingContactsClient(self)
        self.profiles_companies = ProfilesCompaniesClient(self)
        self.transactions = TransactionsClient(self)
        self.workflow_statuses = WorkflowStatusesClient(self)

    # --- Construction ---

    @classmethod
    def with_environment(cls, env: str, **kwargs: Any) -> LockstepApi:
        """Client for a named environment: ``sbx`` or ``prd``."""
        url = ENVIRONMENT_URLS.get(env)
        if url is None:
            raise UnknownEnvironmentError(
                f"Unknown environment {env!r}. Expected one of {sorted(ENVIRONMENT_URLS)}."
            )
        return cls(url, **kwargs)

    @classmethod
    def with_custom_environment(cls, unsafe_url: str, **kwargs: Any) -> LockstepApi:
        """Client for a non-standard server such as a proxy or API gateway."""
        return cls(unsafe_url, **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[LockstepSettings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> LockstepApi:
        settings = settings or get_settings()
        api = cls(
            settings.base_url,
            app_name=settings.app_name,
            timeout=settings.timeout_seconds,
            http_client=http_client,
        )
        if settings.bearer_token:
            api.with_bearer_token(settings.bearer_token)
        elif settings.api_key:
            api.with_api_key(settings.api_key)
        return api

    def with_app_name(self, name: str) -> LockstepApi:
        self._app_name = name
        return self

    def with_api_key(self, api_key: str) -> LockstepApi:
        """Authenticate with an API key, replacing any bearer token."""
        self._auth = ApiKeyAuth(api_key)
        return self

    def with_bearer_token(self, token: str) -> LockstepApi:
        """Authenticate with a JWT bearer token, replacing any API key."""
        self._auth = BearerTokenAuth(token)
        return self

    @property
    def server_url(self) -> str:
        return self._server_url

    # --- Transport ---

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self._timeout)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "SdkName": SDK_NAME,
            "SdkVersion": SDK_VERSION,
            "MachineName": self._machine_name,
        }
        if self._app_name:
            headers["ApplicationName"] = self._app_name
        if self._auth is not None:
            headers.update(self._auth.get_headers())
        return headers

    def _send(self, client: httpx.Client, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.warning("Lockstep %s %s failed: %s", method, url, exc)
            raise TransportError(
                f"{method} {url} failed: {exc}", method=method, url=url
            ) from exc

    def request(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        params: Optional[dict[str, Any]] = None,
        body: Any = None,
    ) -> LockstepResponse[Any]:
        """Send one request and convert the response into a value or an error.

        ``response_type`` is any type pydantic can validate into, ``bytes``
        for a file download, or ``None`` when no body is expected.
        """
        url = f"{self._server_url}{path}"
        query = {k: _query_value(v) for k, v in (params or {}).items() if v is not None}
        headers = self._headers()
        content = None
        if body is not None:
            content = dumps(body)
            headers["Content-Type"] = "application/json"

        started = time.perf_counter()
        kwargs = {"params": query, "content": content, "headers": headers}
        if self._http_client is not None:
            response = self._send(self._http_client, method, url, **kwargs)
        else:
            with self._client() as c:
                response = self._send(c, method, url, **kwargs)

        server_duration = _parse_server_duration(response.headers.get(SERVER_DURATION_HEADER))
        if not response.is_success:
            error = _error_from_response(response)
            logger.warning("Lockstep %s %s returned an error: %s", method, url, error.describe())
            raise ApplicationError(error, response.status_code)

        value = self._parse_value(method, url, response, response_type)
        total_roundtrip = int((time.perf_counter() - started) * 1000)
        logger.debug(
            "Lockstep %s %s -> %s in %sms (server %sms)",
            method, url, response.status_code, total_roundtrip, server_duration,
        )
        return LockstepResponse(
            status_code=response.status_code,
            value=value,
            server_duration=server_duration,
            total_roundtrip=total_roundtrip,
        )

    def _parse_value(self, method: str, url: str, response: httpx.Response, response_type: Any) -> Any:
        if response_type is None:
            return None
        if response_type is bytes:
            return response.content

        try:
            payload = loads(response.content)
        except ValueError as exc:
            logger.error("Lockstep %s %s returned a body that is not JSON", method, url)
            raise MalformedResponseError(
                f"{method} {url} returned a body that is not valid JSON",
                status_code=response.status_code,
                content=response.text,
            ) from exc

        try:
            return type_adapter(response_type).validate_python(payload)
        except ValidationError as exc:
            logger.error("Lockstep %s %s returned an unexpected shape: %s", method, url, exc)
            raise MalformedResponseError(
                f"{method} {url} returned a body that does not match "
                f"{getattr(response_type, '__name__', response_type)}: {exc}",
                status_code=response.status_code,
                content=response.text,
            ) from exc


def _query_value(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    return value


def _parse_server_duration(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _validate_error_fields(payload: dict[str, Any]) -> ErrorResult:
    """Validate an error body, dropping only the fields that have the wrong shape."""
    try:
        return ErrorResult.model_validate(payload)
    except ValidationError as exc:
        rejected = {err["loc"][0] for err in exc.errors() if err["loc"]}
        logger.debug("Dropping malformed error envelope fields: %s", sorted(map(str, rejected)))
    kept = {key: value for key, value in payload.items() if key not in rejected}
    return ErrorResult.model_validate(kept)


def _error_from_response(response: httpx.Response) -> ErrorResult:
    """Best-effort parse of an error body.

    Proxy errors and outages often come back without JSON, so an unreadable
    body still produces an envelope carrying the status and raw content.
    """
    content = response.text
    error: Optional[ErrorResult] = None
    if content:
        try:
            payload = loads(content)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            error = _validate_error_fields(payload)

    if error is None:
        return ErrorResult(
            title=f"{response.status_code} {response.reason_phrase}",
            status=response.status_code,
            content=content,
        )
    update: dict[str, Any] = {"content": content}
    if error.status is None:
        update["status"] = response.status_code
    return error.model_copy(update=update)
