"""
State-conflict domain exceptions.
"""

from decimal import Decimal
from uuid import UUID


class ConflictError(Exception):
    """Base exception for operations that violate the current entity state."""

    pass


class JobAlreadyPaidError(ConflictError):
    """Raised when a job has already been paid."""

    def __init__(self, job_id: UUID):
        self.job_id = job_id
        super().__init__(f"Job {job_id} already paid for")


class JobNotPayableError(ConflictError):
    """Raised when a job is not both completed and approved."""

    def __init__(self, job_id: UUID, completed: bool, approval_status: str):
        self.job_id = job_id
        self.completed = completed
        self.approval_status = approval_status
        super().__init__(
            f"Job {job_id} must be completed and approved before payment "
            f"(completed={completed}, approval_status={approval_status})"
        )


class InsufficientBalanceError(ConflictError):
    """Raised when the paying client cannot cover the job price."""

    def __init__(self, profile_id: UUID, balance: Decimal, required: Decimal):
        self.profile_id = profile_id
        self.balance = balance
        self.required = required
        super().__init__(
            f"Insufficient balance: {balance} available, {required} required"
        )


class ContractTerminatedError(ConflictError):
    """Raised when a job is created under a terminated contract."""

    def __init__(self, contract_id: UUID):
        self.contract_id = contract_id
        super().__init__(f"Cannot create a job for terminated contract {contract_id}")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when a profile e-mail is already in use."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already in use")
