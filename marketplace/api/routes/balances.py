"""Balance API endpoints."""

from uuid import UUID

from fastapi import APIRouter

from marketplace.api.dependencies import (
    ClientActorDep,
    CurrentActorDep,
    EscrowServiceDep,
    GetLedgerUseCaseDep,
    PaginationDep,
)
from marketplace.api.schemas.balance import (
    DepositRequest,
    DepositResponse,
    LedgerEntryResponse,
)
from marketplace.api.schemas.common import PaginatedResponse

router = APIRouter(prefix="/balances", tags=["balances"])


@router.post("/deposit/{user_id}", response_model=DepositResponse)
async def deposit(
    user_id: UUID,
    deposit_data: DepositRequest,
    actor: ClientActorDep,
    escrow_service: EscrowServiceDep,
):
    """Top up a client balance, up to a share of its approved unpaid work."""
    result = await escrow_service.deposit(actor, user_id, deposit_data.amount)
    return DepositResponse(
        profile_id=result.profile_id,
        amount=result.amount,
        balance=result.balance,
        max_deposit=result.max_deposit,
    )


@router.get("/{profile_id}/ledger", response_model=PaginatedResponse[LedgerEntryResponse])
async def get_ledger(
    profile_id: UUID,
    actor: CurrentActorDep,
    pagination: PaginationDep,
    use_case: GetLedgerUseCaseDep,
):
    page = await use_case.execute(actor, profile_id, pagination.page, pagination.per_page)
    return PaginatedResponse[LedgerEntryResponse].from_page(
        page, [LedgerEntryResponse.model_validate(entry) for entry in page.items]
    )
