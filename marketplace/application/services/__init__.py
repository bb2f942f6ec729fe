"""
Application services package.
"""

from .escrow_service import DepositResult, EscrowService, PaymentResult
from .reporting_service import BestProfession, ClientPayments, ReportingService

__all__ = [
    "BestProfession",
    "ClientPayments",
    "DepositResult",
    "EscrowService",
    "PaymentResult",
    "ReportingService",
]
