"""
Domain value objects package.
"""

from .actor import Actor, Role
from .approval_status import ApprovalStatus
from .contract_status import ContractStatus
from .ledger_entry_type import LedgerEntryType
from .profile_type import ProfileType

__all__ = [
    "Actor",
    "ApprovalStatus",
    "ContractStatus",
    "LedgerEntryType",
    "ProfileType",
    "Role",
]
