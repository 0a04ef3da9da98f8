"""Tests for the Lockstep resource clients, run against the in-process mock server."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from lockstep_sdk import ApplicationError, LockstepApi
from lockstep_sdk.clients.helpers import query_options
from lockstep_sdk.schemas import (
    AccountingProfileContactModel,
    AccountingProfileModel,
    AttachmentLinkModel,
    JournalEntryModel,
    WorkflowStatusModel,
)
from mock_servers.lockstep_mock.app import app
from mock_servers.lockstep_mock.db import reset_db

GROUP_KEY = "3f2b1c9e-0d4a-4c7e-9a51-6b2f8e1d0a01"
JOURNAL_ENTRY_ID = "8c1f6a0e-2b7d-4f3a-9e11-0a5c7d9b1e01"
JOURNAL_LINE_ID = "9d2a7b1f-3c8e-4a4b-8f22-1b6d8e0c2f02"
MAGIC_LINK_ID = "a1b2c3d4-1111-4a2b-8c3d-000000000001"
WORKFLOW_STATUS_ID = "b2c3d4e5-2222-4b3c-9d4e-000000000001"
FI_ACCOUNT_ID = "c3d4e5f6-3333-4c4d-8e5f-000000000001"
ATTACHMENT_ID = "d4e5f6a7-4444-4d5e-9f6a-000000000001"
PROFILE_ID = "e5f6a7b8-5555-4e6f-8a7b-000000000001"
PROFILE_CONTACT_ID = "f6a7b8c9-6666-4f7a-9b8c-000000000001"
INVOICE_ID = "1b2c3d4e-8888-4b9c-8d0e-000000000001"
PAYMENT_ID = "1b2c3d4e-8888-4b9c-8d0e-000000000003"


@pytest.fixture
def http():
    reset_db()
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api(http):
    """Authenticated connector routed into the mock server."""
    return LockstepApi("http://testserver", http_client=http).with_api_key("mock-api-key")


@pytest.fixture
def anonymous_api(http):
    return LockstepApi("http://testserver", http_client=http)


# --- Query options ---


class TestQueryOptions:
    def test_camel_case_names(self):
        assert query_options("name eq 'x'", "Lines", "name", 10, 2) == {
            "filter": "name eq 'x'",
            "include": "Lines",
            "order": "name",
            "pageSize": 10,
            "pageNumber": 2,
        }

    @pytest.mark.parametrize("page_size", [0, -1, 10_001])
    def test_page_size_bounds(self, page_size):
        with pytest.raises(ValueError):
            query_options(page_size=page_size)

    def test_negative_page_number(self):
        with pytest.raises(ValueError):
            query_options(page_number=-1)

    def test_invalid_paging_never_sent(self, api):
        with pytest.raises(ValueError):
            api.workflow_statuses.query_workflow_statuses(page_size=0)


# --- Cross-cutting behavior ---


class TestAuthAndErrors:
    def test_missing_credentials(self, anonymous_api):
        with pytest.raises(ApplicationError) as exc_info:
            anonymous_api.group_accounts.retrieve_group_account_data()
        err = exc_info.value
        assert err.status_code == 401
        assert err.error.instance == "/api/v1/GroupAccounts/me"

    def test_bearer_token_accepted(self, anonymous_api):
        account = anonymous_api.with_bearer_token("jwt").group_accounts.retrieve_group_account_data()
        assert str(account.groupKey) == GROUP_KEY

    def test_not_found_problem_details(self, api):
        missing = uuid4()
        with pytest.raises(ApplicationError) as exc_info:
            api.journal_entries.retrieve_journal_entry(missing)
        err = exc_info.value
        assert err.status_code == 404
        assert err.error.status == 404
        assert err.error.title == "Record not found"
        assert err.error.instance == f"/api/v1/journal-entries/{missing}"
        assert err.error.type.startswith("https://")

    def test_invalid_filter(self, api):
        with pytest.raises(ApplicationError) as exc_info:
            api.workflow_statuses.query_workflow_statuses(filter="name like 'x'")
        assert exc_info.value.status_code == 400
        assert exc_info.value.error.title == "Invalid query"

    def test_body_validation_errors(self, api):
        with pytest.raises(ApplicationError) as exc_info:
            api.request("POST", "/api/v1/journal-entries", body={"journalId": "JE-1"})
        assert exc_info.value.status_code == 400
        assert exc_info.value.error.errors

    def test_server_duration_reported(self, api, caplog):
        caplog.set_level(logging.INFO, logger="mock_servers.lockstep_mock.app")
        response = api.request("GET", "/health", dict)
        assert response.value == {"status": "ok"}
        assert response.server_duration is not None
        assert any("GET /health -> 200" in r.getMessage() for r in caplog.records)


# --- Resource clients ---


class TestJournalEntries:
    def test_retrieve(self, api):
        entry = api.journal_entries.retrieve_journal_entry(JOURNAL_ENTRY_ID)
        assert entry.journalId == "JE-1001"
        assert entry.postingDate == date(2023, 3, 1)
        assert entry.lines is None

    def test_retrieve_with_lines(self, api):
        entry = api.journal_entries.retrieve_journal_entry(UUID(JOURNAL_ENTRY_ID), include="Lines")
        assert len(entry.lines) == 2
        assert sum(line.debit for line in entry.lines) == sum(line.credit for line in entry.lines)
        assert entry.lines[0].debit == Decimal("1234.56")

    def test_query_pages(self, api):
        page = api.journal_entries.query_journal_entries(order="postingDate desc", page_size=1, page_number=0)
        assert page.totalCount == 2
        assert page.pageSize == 1
        assert page.pageNumber == 0
        assert [e.journalId for e in page.records] == ["JE-1002"]

    def test_query_past_last_page(self, api):
        page = api.journal_entries.query_journal_entries(page_size=10, page_number=5)
        assert page.totalCount == 2
        assert page.records == []

    def test_create(self, api):
        created = api.journal_entries.create_journal_entries(
            [JournalEntryModel(journalId="JE-2000", postingDate=date(2023, 4, 1), description="Depreciation")]
        )
        assert len(created) == 1
        assert created[0].journalEntryId is not None
        fetched = api.journal_entries.retrieve_journal_entry(created[0].journalEntryId)
        assert fetched.postingDate == date(2023, 4, 1)
        assert fetched.description == "Depreciation"

    def test_lines(self, api):
        line = api.journal_entry_lines.retrieve_journal_entry_line(JOURNAL_LINE_ID)
        assert line.credit == Decimal("1234.56")
        assert line.accountName == "Accrued Liabilities"
        page = api.journal_entry_lines.query_journal_entry_lines(filter=f"journalEntryId eq '{JOURNAL_ENTRY_ID}'")
        assert page.totalCount == 2


class TestMagicLinks:
    def test_retrieve(self, api):
        link = api.magic_links.retrieve_magic_link(MAGIC_LINK_ID)
        assert link.visits == 4
        assert link.revoked is None

    def test_revoke(self, api):
        result = api.magic_links.revoke_magic_link(MAGIC_LINK_ID)
        assert result.messages
        assert api.magic_links.retrieve_magic_link(MAGIC_LINK_ID).revoked is not None

    def test_query(self, api):
        page = api.magic_links.query_magic_links(filter="status eq 3")
        assert page.totalCount == 1

    def test_summary_window(self, api):
        summary = api.magic_links.magic_link_summary(
            from_=datetime(2023, 3, 1, tzinfo=timezone.utc),
            to=datetime(2023, 3, 31, tzinfo=timezone.utc),
        )
        assert str(summary.groupKey) == GROUP_KEY
        assert summary.totalCount == 2
        assert summary.totalBounced == 1
        assert summary.totalVisited == 4

    def test_summary_all_time(self, api):
        assert api.magic_links.magic_link_summary().totalCount == 3


class TestWorkflowStatuses:
    def test_retrieve(self, api):
        status = api.workflow_statuses.retrieve_workflow_status(WORKFLOW_STATUS_ID)
        assert status.code == "DISPUTED"
        assert status.isNotesRequired is True

    def test_create_and_query(self, api):
        created = api.workflow_statuses.create_workflow_statuses(
            [WorkflowStatusModel(name="Escalated", code="ESCALATED", category="Collections")]
        )
        assert created[0].id is not None
        page = api.workflow_statuses.query_workflow_statuses(filter="code eq 'ESCALATED'")
        assert [s.id for s in page.records] == [created[0].id]

    def test_query_order(self, api):
        page = api.workflow_statuses.query_workflow_statuses(order="name desc")
        assert [s.name for s in page.records] == ["Promise to pay", "Disputed"]


class TestAccounts:
    def test_group_account(self, api):
        account = api.group_accounts.retrieve_group_account_data()
        assert account.groupName == "Acme Holdings"
        assert account.baseCurrencyCode == "USD"

    def test_update_group_account(self, api):
        updated = api.group_accounts.update_group_account(GROUP_KEY, {"groupName": "Acme Group"})
        assert updated.groupName == "Acme Group"
        assert updated.modified is not None
        assert api.group_accounts.retrieve_group_account_data().groupName == "Acme Group"

    def test_update_read_only_field(self, api):
        with pytest.raises(ApplicationError) as exc_info:
            api.group_accounts.update_group_account(GROUP_KEY, {"created": "2020-01-01T00:00:00Z"})
        assert exc_info.value.status_code == 400

    def test_financial_institution_accounts(self, api):
        account = api.financial_institution_accounts.retrieve_financial_institution_account(FI_ACCOUNT_ID)
        assert account.name == "Operating Checking"
        page = api.financial_institution_accounts.query_financial_institution_accounts(filter="status eq 'active'")
        assert [a.bankAccountId for a in page.records] == ["CHK-0001"]


class TestAttachmentLinks:
    def test_retrieve(self, api):
        link = api.attachment_links.retrieve_attachment_link(ATTACHMENT_ID, JOURNAL_ENTRY_ID, "JournalEntry")
        assert str(link.attachmentId) == ATTACHMENT_ID

    @pytest.mark.parametrize("attachment_id", ["o'brien", "x' and tableKey eq 'Invoice"])
    def test_unusual_ids_are_not_found(self, api, attachment_id):
        with pytest.raises(ApplicationError) as exc_info:
            api.attachment_links.retrieve_attachment_link(attachment_id, JOURNAL_ENTRY_ID, "JournalEntry")
        assert exc_info.value.status_code == 404
        result = api.attachment_links.delete_attachment_link(attachment_id=attachment_id)
        assert result.messages == []

    def test_upload_and_query(self, api):
        attachment_id = uuid4()
        created = api.attachment_links.upload_attachment(
            [AttachmentLinkModel(attachmentId=attachment_id, objectKey=UUID(INVOICE_ID), tableKey="Invoice")]
        )
        assert created[0].attachmentId == attachment_id
        page = api.attachment_links.query_attachment_links(filter="tableKey eq 'Invoice'")
        assert page.totalCount == 1

    def test_delete(self, api):
        result = api.attachment_links.delete_attachment_link(attachment_id=ATTACHMENT_ID)
        assert len(result.messages) == 1
        with pytest.raises(ApplicationError) as exc_info:
            api.attachment_links.retrieve_attachment_link(ATTACHMENT_ID, JOURNAL_ENTRY_ID, "JournalEntry")
        assert exc_info.value.status_code == 404


class TestProfiles:
    def test_accounting_profile_lifecycle(self, api):
        profile = api.profiles_accounting.retrieve_accounting_profile(PROFILE_ID)
        assert profile.type == "AR"

        updated = api.profiles_accounting.update_accounting_profile(PROFILE_ID, {"name": "Collections"})
        assert updated.name == "Collections"

        result = api.profiles_accounting.delete_accounting_profile(PROFILE_ID)
        assert result.messages
        with pytest.raises(ApplicationError):
            api.profiles_accounting.retrieve_accounting_profile(PROFILE_ID)

    def test_create_and_query_profiles(self, api):
        api.profiles_accounting.create_accounting_profiles(
            [AccountingProfileModel(name="Treasury", type="Treasury", companyId=uuid4())]
        )
        page = api.profiles_accounting.query_accounting_profiles(order="name")
        assert [p.name for p in page.records] == ["Payables", "Receivables", "Treasury"]

    def test_contacts(self, api):
        contact = api.profiles_accounting_contacts.retrieve_accounting_profile_contact(PROFILE_CONTACT_ID)
        assert str(contact.accountingProfileId) == PROFILE_ID

        new_contact = uuid4()
        updated = api.profiles_accounting_contacts.update_accounting_profile_contact(PROFILE_CONTACT_ID, new_contact)
        assert updated.contactId == new_contact

        created = api.profiles_accounting_contacts.create_accounting_profile_contacts(
            [AccountingProfileContactModel(accountingProfileId=UUID(PROFILE_ID), contactId=uuid4())]
        )
        page = api.profiles_accounting_contacts.query_accounting_profile_contacts(
            filter=f"accountingProfileId eq '{PROFILE_ID}'"
        )
        assert page.totalCount == 2

        deleted = api.profiles_accounting_contacts.delete_accounting_profile_contact(
            created[0].accountingProfileContactId
        )
        assert deleted.messages

    def test_public_company_profiles_need_no_auth(self, anonymous_api):
        company = anonymous_api.profiles_companies.retrieve_public_company_profile("acme-holdings")
        assert company.companyName == "Acme Holdings"
        page = anonymous_api.profiles_companies.query_public_company_profiles(filter="companyName startswith 'acme'")
        assert page.totalCount == 1

    def test_unknown_company_slug(self, anonymous_api):
        with pytest.raises(ApplicationError) as exc_info:
            anonymous_api.profiles_companies.retrieve_public_company_profile("nobody")
        assert exc_info.value.status_code == 404


class TestTransactions:
    def test_query_totals(self, api):
        page = api.transactions.query_transactions(current_date=date(2023, 3, 1))
        assert page.totalCount == 4
        assert page.pageSize == 200
        assert page.pageNumber == 0

        days = {t.referenceCode: t.daysPastDue for t in page.records}
        assert days == {"INV-1001": 28, "INV-1002": 0, "PMT-2001": 0, "INV-1003": 90}

        assert page.summary.totalCount == 4
        assert page.summary.totalAmount == Decimal("3449.75")
        assert page.summary.outstandingAmount == Decimal("1950.75")
        assert page.summary.invoiceOpenCount == 3
        assert page.summary.invoicePastDueCount == 2

    def test_aging_buckets(self, api):
        page = api.transactions.query_transactions(current_date=date(2023, 3, 1))
        aging = {a.bucket: a.outstandingBalance for a in page.agingSummary}
        assert aging == {
            "Current": Decimal("500.25"),
            "1-30": Decimal("250.50"),
            "31-60": Decimal("0"),
            "61-90": Decimal("1200.00"),
            "90+": Decimal("0"),
        }

    def test_currency_summaries(self, api):
        page = api.transactions.query_transactions(current_date=date(2023, 3, 1))
        totals = {c.currencyCode: (c.totalAmount, c.outstandingAmount) for c in page.currencySummaries}
        assert totals == {
            "USD": (Decimal("2249.75"), Decimal("750.75")),
            "EUR": (Decimal("1200"), Decimal("1200")),
        }

    def test_summary_covers_whole_query(self, api):
        page = api.transactions.query_transactions(
            filter="transactionType eq 'Invoice'", page_size=1, current_date=date(2023, 3, 1)
        )
        assert len(page.records) == 1
        assert page.totalCount == 3
        assert page.summary.totalCount == 3

    def test_details(self, api):
        details = api.transactions.retrieve_transaction_details(INVOICE_ID)
        assert len(details) == 1
        assert str(details[0].transactionId) == PAYMENT_ID
        assert details[0].amount == Decimal("749.50")
        assert details[0].transactionDate == date(2023, 2, 10)
