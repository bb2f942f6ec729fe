"""
Validation-related domain exceptions.
"""

from decimal import Decimal


class ValidationError(Exception):
    """Base exception for malformed or out-of-policy input."""

    pass


class InvalidPriceError(ValidationError):
    """Raised when a job price is not a positive amount."""

    def __init__(self, price):
        self.price = price
        super().__init__(f"Price must be a positive number, got {price}")


class InvalidApprovalStatusError(ValidationError):
    """Raised when an approval decision is not approved/rejected."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(
            f"Invalid approval status '{status}', expected 'approved' or 'rejected'"
        )


class DepositLimitExceededError(ValidationError):
    """Raised when a deposit exceeds the allowed share of outstanding work."""

    def __init__(self, amount: Decimal, max_deposit: Decimal, ratio: Decimal):
        self.amount = amount
        self.max_deposit = max_deposit
        self.ratio = ratio
        super().__init__(
            f"Deposit amount exceeds {ratio:.0%} of total due. "
            f"Maximum allowed deposit is {max_deposit}"
        )


class InvalidProfileUpdateError(ValidationError):
    """Raised when a profile update touches a field it may not change."""

    pass
