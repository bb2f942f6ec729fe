"""
Database package.
"""

from .models import (
    Base,
    BaseModel,
    ContractModel,
    JobModel,
    LedgerEntryModel,
    ProfileModel,
)
from .repositories import (
    ContractRepository,
    JobRepository,
    LedgerRepository,
    ProfileRepository,
    TransactionService,
)

__all__ = [
    # Models
    "Base",
    "BaseModel",
    "ContractModel",
    "JobModel",
    "LedgerEntryModel",
    "ProfileModel",
    # Repositories
    "ContractRepository",
    "JobRepository",
    "LedgerRepository",
    "ProfileRepository",
    "TransactionService",
]
