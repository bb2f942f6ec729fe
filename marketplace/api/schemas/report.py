"""
Admin report API schemas.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class BestProfessionResponse(BaseModel):
    profession: Optional[str]
    total_earned: Decimal
    contractor_id: UUID


class BestClientResponse(BaseModel):
    id: UUID
    full_name: str
    total_paid: Decimal
