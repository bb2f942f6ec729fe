"""
Domain entities package.
"""

from .contract import Contract
from .job import Job
from .ledger_entry import LedgerEntry
from .profile import Profile

__all__ = [
    "Contract",
    "Job",
    "LedgerEntry",
    "Profile",
]
