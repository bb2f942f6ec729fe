"""
Balance and ledger API schemas.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from marketplace.domain.value_objects.ledger_entry_type import LedgerEntryType


class DepositRequest(BaseModel):
    amount: Decimal = Field(..., max_digits=12, decimal_places=2)


class DepositResponse(BaseModel):
    profile_id: UUID
    amount: Decimal
    balance: Decimal
    max_deposit: Decimal


class LedgerEntryResponse(BaseModel):
    id: UUID
    entry_type: LedgerEntryType
    amount: Decimal
    debit_profile_id: Optional[UUID] = None
    credit_profile_id: UUID
    job_id: Optional[UUID] = None
    created_at: datetime

    model_config = {"from_attributes": True}
