"""Resource clients grouped by Lockstep API resource."""

from .accounts import FinancialInstitutionAccountsClient, GroupAccountsClient
from .attachment_links import AttachmentLinksClient
from .journal_entries import JournalEntriesClient, JournalEntryLinesClient
from .magic_links import MagicLinksClient
from .profiles import (
    ProfilesAccountingClient,
    ProfilesAccountingContactsClient,
    ProfilesCompaniesClient,
)
from .transactions import TransactionsClient
from .workflow_statuses import WorkflowStatusesClient

__all__ = [
    "AttachmentLinksClient",
    "FinancialInstitutionAccountsClient",
    "GroupAccountsClient",
    "JournalEntriesClient",
    "JournalEntryLinesClient",
    "MagicLinksClient",
    "ProfilesAccountingClient",
    "ProfilesAccountingContactsClient",
    "ProfilesCompaniesClient",
    "TransactionsClient",
    "WorkflowStatusesClient",
]
