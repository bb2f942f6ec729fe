"""
Contract-related API schemas.
"""

from typing import List
from uuid import UUID

from pydantic import BaseModel

from marketplace.application.interfaces.repositories import ContractDetails
from marketplace.domain.value_objects.contract_status import ContractStatus

from .common import TimestampMixin
from .job import JobResponse
from .profile import ProfileResponse


class ContractCreateRequest(BaseModel):
    """The acting client names the contractor."""

    contractor_id: UUID


class ContractResponse(TimestampMixin):
    id: UUID
    client_id: UUID
    contractor_id: UUID
    status: ContractStatus

    model_config = {"from_attributes": True}


class ContractDetailResponse(ContractResponse):
    """Contract with both parties and its jobs."""

    client: ProfileResponse
    contractor: ProfileResponse
    jobs: List[JobResponse] = []

    @classmethod
    def from_details(cls, details: ContractDetails) -> "ContractDetailResponse":
        contract = details.contract
        return cls(
            id=contract.id,
            client_id=contract.client_id,
            contractor_id=contract.contractor_id,
            status=contract.status,
            created_at=contract.created_at,
            updated_at=contract.updated_at,
            client=ProfileResponse.model_validate(details.client),
            contractor=ProfileResponse.model_validate(details.contractor),
            jobs=[JobResponse.model_validate(job) for job in details.jobs],
        )
