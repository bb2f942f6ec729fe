"""Ledger entry domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.value_objects.ledger_entry_type import LedgerEntryType


@dataclass
class LedgerEntry:
    """Record of one committed balance movement."""

    entry_type: LedgerEntryType
    amount: Decimal
    credit_profile_id: UUID
    debit_profile_id: Optional[UUID] = None
    job_id: Optional[UUID] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if Decimal(self.amount) <= 0:
            raise ValueError("Ledger amount must be positive")

        self.amount = Decimal(self.amount)
        self.entry_type = LedgerEntryType(self.entry_type)

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    def involves(self, profile_id: UUID) -> bool:
        return profile_id in (self.credit_profile_id, self.debit_profile_id)
