"""
Infrastructure package.
"""

from .database import *
from .monitoring import *
from .security import *

__all__ = [
    # Database
    "Base",
    "BaseModel",
    "ContractModel",
    "JobModel",
    "LedgerEntryModel",
    "ProfileModel",
    "ContractRepository",
    "JobRepository",
    "LedgerRepository",
    "ProfileRepository",
    "TransactionService",
    # Monitoring
    "HealthChecker",
    "get_metrics",
    "get_metrics_content_type",
    "record_contract_transition",
    "record_deposit",
    "record_funds_transferred",
    "record_payment",
    # Security
    "BcryptPasswordHasher",
    "TokenService",
]
