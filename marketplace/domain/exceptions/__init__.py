"""
Domain exceptions package.
"""

from .authorization_error import AuthenticationError, AuthorizationError
from .conflict_error import (
    ConflictError,
    ContractTerminatedError,
    EmailAlreadyRegisteredError,
    InsufficientBalanceError,
    JobAlreadyPaidError,
    JobNotPayableError,
)
from .not_found_error import (
    ContractNotFoundError,
    EntityNotFoundError,
    JobNotFoundError,
    NotFoundError,
    ProfileNotFoundError,
    ReportDataNotFoundError,
)
from .validation_error import (
    DepositLimitExceededError,
    InvalidApprovalStatusError,
    InvalidPriceError,
    InvalidProfileUpdateError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "ContractTerminatedError",
    "EmailAlreadyRegisteredError",
    "InsufficientBalanceError",
    "JobAlreadyPaidError",
    "JobNotPayableError",
    "NotFoundError",
    "EntityNotFoundError",
    "ProfileNotFoundError",
    "ReportDataNotFoundError",
    "ContractNotFoundError",
    "JobNotFoundError",
    "ValidationError",
    "DepositLimitExceededError",
    "InvalidApprovalStatusError",
    "InvalidPriceError",
    "InvalidProfileUpdateError",
]
