"""Job-related API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, status

from marketplace.api.dependencies import (
    AdminActorDep,
    ClientActorDep,
    CompleteJobUseCaseDep,
    ContractorActorDep,
    CreateJobUseCaseDep,
    CurrentActorDep,
    EscrowServiceDep,
    GetJobUseCaseDep,
    ListJobsUseCaseDep,
    ModifyJobUseCaseDep,
    PaginationDep,
    ReviewJobUseCaseDep,
)
from marketplace.api.schemas.common import PaginatedResponse
from marketplace.api.schemas.job import (
    JobApprovalRequest,
    JobCompleteRequest,
    JobCreateRequest,
    JobDetailResponse,
    JobModifyRequest,
    JobResponse,
    PaymentResponse,
)
from marketplace.application.use_cases import (
    CompleteJobRequest,
    CreateJobRequest,
    ModifyJobRequest,
    ReviewJobRequest,
)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/create", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreateRequest, actor: ClientActorDep, use_case: CreateJobUseCaseDep
):
    """Create a job under one of the actor's contracts."""
    result = await use_case.execute(
        CreateJobRequest(
            actor=actor,
            contract_id=job_data.contract_id,
            title=job_data.title,
            description=job_data.description,
            price=job_data.price,
        )
    )
    return JobResponse.model_validate(result.job)


@router.put("/modify", response_model=JobResponse)
async def modify_job(
    job_data: JobModifyRequest, actor: ClientActorDep, use_case: ModifyJobUseCaseDep
):
    result = await use_case.execute(
        ModifyJobRequest(
            actor=actor,
            job_id=job_data.job_id,
            title=job_data.title,
            price=job_data.price,
            description=job_data.description,
        )
    )
    return JobResponse.model_validate(result.job)


@router.put("/update/completed", response_model=JobResponse)
async def mark_completed(
    job_data: JobCompleteRequest,
    actor: ContractorActorDep,
    use_case: CompleteJobUseCaseDep,
):
    job = await use_case.execute(CompleteJobRequest(actor=actor, job_id=job_data.job_id))
    return JobResponse.model_validate(job)


@router.put("/update/approval", response_model=JobResponse)
async def update_approval_status(
    job_data: JobApprovalRequest, actor: ClientActorDep, use_case: ReviewJobUseCaseDep
):
    job = await use_case.execute(
        ReviewJobRequest(actor=actor, job_id=job_data.job_id, status=job_data.status)
    )
    return JobResponse.model_validate(job)


@router.get("/get/user", response_model=List[JobDetailResponse])
async def get_user_jobs(actor: CurrentActorDep, use_case: ListJobsUseCaseDep):
    """Jobs where the actor is client or contractor."""
    return [JobDetailResponse.from_details(item) for item in await use_case.for_party(actor)]


@router.get("/get/all", response_model=PaginatedResponse[JobDetailResponse])
async def get_all_jobs(
    actor: AdminActorDep, pagination: PaginationDep, use_case: ListJobsUseCaseDep
):
    page = await use_case.all(pagination.page, pagination.per_page)
    return PaginatedResponse[JobDetailResponse].from_page(
        page, [JobDetailResponse.from_details(item) for item in page.items]
    )


@router.get("/unpaid", response_model=List[JobDetailResponse])
async def get_unpaid_jobs(actor: CurrentActorDep, use_case: ListJobsUseCaseDep):
    """Completed, unpaid jobs of the actor's in-progress contracts."""
    return [JobDetailResponse.from_details(item) for item in await use_case.unpaid(actor)]


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(job_id: UUID, actor: CurrentActorDep, use_case: GetJobUseCaseDep):
    return JobDetailResponse.from_details(await use_case.execute(actor, job_id))


@router.post("/{job_id}/pay", response_model=PaymentResponse)
async def pay_for_job(
    job_id: UUID, actor: ClientActorDep, escrow_service: EscrowServiceDep
):
    """Pay the contractor for a completed, approved job."""
    result = await escrow_service.pay_for_job(actor, job_id)
    return PaymentResponse(
        job=JobResponse.model_validate(result.job),
        amount=result.amount,
        client_balance=result.client_balance,
        contractor_balance=result.contractor_balance,
    )
