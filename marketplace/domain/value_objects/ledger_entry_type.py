"""
Ledger entry type value object.
"""

from enum import Enum


class LedgerEntryType(str, Enum):
    """Kind of balance movement recorded in the ledger."""

    DEPOSIT = "deposit"
    JOB_PAYMENT = "job_payment"
