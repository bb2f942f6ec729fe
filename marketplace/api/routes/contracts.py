"""Contract API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from marketplace.api.dependencies import (
    AdminActorDep,
    ClientActorDep,
    CreateContractUseCaseDep,
    CurrentActorDep,
    GetContractUseCaseDep,
    ListContractsUseCaseDep,
    PaginationDep,
    TerminateContractUseCaseDep,
)
from marketplace.api.schemas.common import PaginatedResponse
from marketplace.api.schemas.contract import (
    ContractCreateRequest,
    ContractDetailResponse,
    ContractResponse,
)
from marketplace.application.use_cases import (
    CreateContractRequest,
    TerminateContractRequest,
)
from marketplace.domain.value_objects.contract_status import ContractStatus

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.post(
    "/create", response_model=ContractResponse, status_code=status.HTTP_201_CREATED
)
async def create_contract(
    contract_data: ContractCreateRequest,
    actor: ClientActorDep,
    use_case: CreateContractUseCaseDep,
):
    """Open a contract between the acting client and a contractor."""
    contract = await use_case.execute(
        CreateContractRequest(actor=actor, contractor_id=contract_data.contractor_id)
    )
    return ContractResponse.model_validate(contract)


@router.put("/terminate/{contract_id}", response_model=ContractResponse)
async def terminate_contract(
    contract_id: UUID, actor: CurrentActorDep, use_case: TerminateContractUseCaseDep
):
    """Terminate a contract. Either party may do so."""
    contract = await use_case.execute(
        TerminateContractRequest(actor=actor, contract_id=contract_id)
    )
    return ContractResponse.model_validate(contract)


@router.get("/getall", response_model=PaginatedResponse[ContractDetailResponse])
async def get_all_contracts(
    actor: AdminActorDep,
    pagination: PaginationDep,
    use_case: ListContractsUseCaseDep,
    statuses: Optional[List[ContractStatus]] = Query(None, alias="status"),
):
    page = await use_case.all(pagination.page, pagination.per_page, statuses)
    return PaginatedResponse[ContractDetailResponse].from_page(
        page, [ContractDetailResponse.from_details(item) for item in page.items]
    )


@router.get("/{contract_id}", response_model=ContractDetailResponse)
async def get_contract(
    contract_id: UUID, actor: CurrentActorDep, use_case: GetContractUseCaseDep
):
    return ContractDetailResponse.from_details(
        await use_case.execute(actor, contract_id)
    )


@router.get("", response_model=PaginatedResponse[ContractDetailResponse])
async def get_user_contracts(
    actor: CurrentActorDep,
    pagination: PaginationDep,
    use_case: ListContractsUseCaseDep,
    statuses: Optional[List[ContractStatus]] = Query(None, alias="status"),
):
    """Contracts of the actor. Terminated ones only when asked for by status."""
    page = await use_case.for_party(
        actor, pagination.page, pagination.per_page, statuses
    )
    return PaginatedResponse[ContractDetailResponse].from_page(
        page, [ContractDetailResponse.from_details(item) for item in page.items]
    )
