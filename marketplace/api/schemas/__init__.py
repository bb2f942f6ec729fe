"""
API schemas for the marketplace service.
"""

from .balance import DepositRequest, DepositResponse, LedgerEntryResponse
from .common import ErrorResponse, PaginatedResponse
from .contract import ContractCreateRequest, ContractDetailResponse, ContractResponse
from .job import (
    JobApprovalRequest,
    JobCompleteRequest,
    JobCreateRequest,
    JobDetailResponse,
    JobModifyRequest,
    JobResponse,
    PaymentResponse,
)
from .profile import (
    AuthResponse,
    LoginRequest,
    ProfileCreateRequest,
    ProfileModifyRequest,
    ProfileResponse,
)
from .report import BestClientResponse, BestProfessionResponse

__all__ = [
    "AuthResponse",
    "BestClientResponse",
    "BestProfessionResponse",
    "ContractCreateRequest",
    "ContractDetailResponse",
    "ContractResponse",
    "DepositRequest",
    "DepositResponse",
    "ErrorResponse",
    "JobApprovalRequest",
    "JobCompleteRequest",
    "JobCreateRequest",
    "JobDetailResponse",
    "JobModifyRequest",
    "JobResponse",
    "LedgerEntryResponse",
    "LoginRequest",
    "PaginatedResponse",
    "PaymentResponse",
    "ProfileCreateRequest",
    "ProfileModifyRequest",
    "ProfileResponse",
]
