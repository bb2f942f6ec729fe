"""
Admin reporting endpoints.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Query

from marketplace.api.dependencies import AdminActorDep, ReportingServiceDep
from marketplace.api.schemas.report import BestClientResponse, BestProfessionResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/best-profession", response_model=BestProfessionResponse)
async def best_profession(
    actor: AdminActorDep,
    reporting_service: ReportingServiceDep,
    start: datetime = Query(..., description="Inclusive range start (ISO 8601)"),
    end: datetime = Query(..., description="Inclusive range end (ISO 8601)"),
):
    """Profession that earned the most from paid jobs created in the range."""
    result = await reporting_service.best_profession(start, end)
    return BestProfessionResponse(
        profession=result.profession,
        total_earned=result.total_earned,
        contractor_id=result.contractor.id,
    )


@router.get("/best-clients", response_model=List[BestClientResponse])
async def best_clients(
    actor: AdminActorDep,
    reporting_service: ReportingServiceDep,
    start: datetime = Query(..., description="Inclusive range start (ISO 8601)"),
    end: datetime = Query(..., description="Inclusive range end (ISO 8601)"),
    limit: Optional[int] = Query(None, ge=1),
):
    """Clients who paid the most for jobs created in the range."""
    results = await reporting_service.best_clients(start, end, limit)
    return [
        BestClientResponse(
            id=item.client.id,
            full_name=item.client.full_name,
            total_paid=item.total_paid,
        )
        for item in results
    ]
