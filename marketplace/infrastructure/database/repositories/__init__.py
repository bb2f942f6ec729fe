"""
Repository implementations.
"""

from .contract_repository import ContractRepository
from .job_repository import JobRepository
from .ledger_repository import LedgerRepository
from .profile_repository import ProfileRepository
from .transaction_repository import TransactionService

__all__ = [
    "ProfileRepository",
    "ContractRepository",
    "JobRepository",
    "LedgerRepository",
    "TransactionService",
]
