"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Contract",
    "Job",
    "LedgerEntry",
    "Profile",
    # Exceptions
    "AuthorizationError",
    "ConflictError",
    "NotFoundError",
    "ValidationError",
    # Value Objects
    "Actor",
    "ApprovalStatus",
    "ContractStatus",
    "LedgerEntryType",
    "ProfileType",
    "Role",
]
