"""
Database models package.
"""

from .base import Base, BaseModel
from .contract import ContractModel
from .job import JobModel
from .ledger_entry import LedgerEntryModel
from .profile import ProfileModel

__all__ = [
    "Base",
    "BaseModel",
    "ContractModel",
    "JobModel",
    "LedgerEntryModel",
    "ProfileModel",
]
