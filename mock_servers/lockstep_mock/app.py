"""Lockstep Platform API Mock Server.

FastAPI application implementing the subset of the Lockstep Platform API
covered by the SDK's resource clients, for local development and testing.

Start with:
    uvicorn mock_servers.lockstep_mock.app:app --port 8084
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from lockstep_sdk.config.constants import SDK_VERSION, SERVER_DURATION_HEADER
from mock_servers.lockstep_mock.auth import LockstepAuthMiddleware
from mock_servers.lockstep_mock.errors import register_error_handlers
from mock_servers.lockstep_mock.routes.accounts import router as accounts_router
from mock_servers.lockstep_mock.routes.attachment_links import router as attachment_links_router
from mock_servers.lockstep_mock.routes.journal_entries import router as journal_entries_router
from mock_servers.lockstep_mock.routes.magic_links import router as magic_links_router
from mock_servers.lockstep_mock.routes.profiles import router as profiles_router
from mock_servers.lockstep_mock.routes.transactions import router as transactions_router
from mock_servers.lockstep_mock.routes.workflow_statuses import router as workflow_statuses_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Lockstep Platform API Mock",
    description="Mock implementation of the Lockstep Platform API for SDK development",
    version=f"{SDK_VERSION}-mock",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Auth
app.add_middleware(LockstepAuthMiddleware)

# Errors
register_error_handlers(app)


@app.middleware("http")
async def server_duration(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    response.headers[SERVER_DURATION_HEADER] = str(elapsed_ms)
    logger.info("%s %s -> %s (%sms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


# Routes
app.include_router(journal_entries_router, prefix="/api/v1")
app.include_router(magic_links_router, prefix="/api/v1/useraccounts")
app.include_router(workflow_statuses_router, prefix="/api/v1")
app.include_router(accounts_router, prefix="/api/v1")
app.include_router(attachment_links_router, prefix="/api/v1")
app.include_router(profiles_router, prefix="/api/v1/profiles")
app.include_router(transactions_router, prefix="/api/v1")


@app.get("/")
async def root():
    return {
        "type": "mock",
        "name": "Lockstep Platform API Mock",
        "version": SDK_VERSION,
        "endpoints": [
            "/api/v1/journal-entries",
            "/api/v1/journal-entry-lines",
            "/api/v1/useraccounts/magic-links",
            "/api/v1/workflow-statuses",
            "/api/v1/GroupAccounts",
            "/api/v1/financial-institution-accounts",
            "/api/v1/AttachmentLinks",
            "/api/v1/profiles/accounting",
            "/api/v1/profiles/accounting/contacts",
            "/api/v1/profiles/companies",
            "/api/v1/Transactions",
        ],
    }


@app.get("/health")
async def health():
    return {"status": "ok"}
