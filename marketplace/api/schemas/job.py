"""
Job-related API schemas.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from marketplace.application.interfaces.repositories import JobDetails
from marketplace.domain.value_objects.approval_status import ApprovalStatus

from .common import TimestampMixin
from .profile import ProfileResponse


class JobCreateRequest(BaseModel):
    """Job creation request schema."""

    contract_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", max_length=5000)
    price: Decimal = Field(..., max_digits=12, decimal_places=2)


class JobModifyRequest(BaseModel):
    """Partial job update. Omitted fields are left unchanged."""

    job_id: UUID
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
    description: Optional[str] = Field(None, max_length=5000)


class JobCompleteRequest(BaseModel):
    job_id: UUID


class JobApprovalRequest(BaseModel):
    job_id: UUID
    status: str = Field(..., description="Either 'approved' or 'rejected'")


class JobResponse(TimestampMixin):
    """Job response schema."""

    id: UUID
    contract_id: UUID
    client_id: UUID
    contractor_id: UUID
    title: str
    description: str
    price: Decimal
    completed: bool
    approval_status: ApprovalStatus
    paid: bool
    paid_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class JobContractSummary(BaseModel):
    id: UUID
    status: str

    model_config = {"from_attributes": True}


class JobDetailResponse(JobResponse):
    """Job with its contract and both parties."""

    contract: JobContractSummary
    client: ProfileResponse
    contractor: ProfileResponse

    @classmethod
    def from_details(cls, details: JobDetails) -> "JobDetailResponse":
        return cls(
            **JobResponse.model_validate(details.job).model_dump(),
            contract=JobContractSummary(
                id=details.contract.id, status=details.contract.status.value
            ),
            client=ProfileResponse.model_validate(details.client),
            contractor=ProfileResponse.model_validate(details.contractor),
        )


class PaymentResponse(BaseModel):
    """Outcome of a job payment."""

    job: JobResponse
    amount: Decimal
    client_balance: Decimal
    contractor_balance: Decimal
