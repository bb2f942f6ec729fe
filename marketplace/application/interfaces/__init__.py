"""
Application interfaces package.
"""

from .repositories import (
    ContractDetails,
    ContractRepositoryInterface,
    JobDetails,
    JobRepositoryInterface,
    LedgerRepositoryInterface,
    Page,
    ProfileFilters,
    ProfileRepositoryInterface,
)
from .security import PasswordHasherInterface, TokenServiceInterface

__all__ = [
    "ContractDetails",
    "ContractRepositoryInterface",
    "JobDetails",
    "JobRepositoryInterface",
    "LedgerRepositoryInterface",
    "Page",
    "ProfileFilters",
    "ProfileRepositoryInterface",
    "PasswordHasherInterface",
    "TokenServiceInterface",
]
