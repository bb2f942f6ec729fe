"""Job domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.value_objects.approval_status import ApprovalStatus


@dataclass
class Job:
    """Billable unit of work under a contract.

    ``client_id`` and ``contractor_id`` are copied from the parent contract
    when the job is created and never change afterwards.
    """

    title: str
    description: str
    price: Decimal
    contract_id: UUID
    client_id: UUID
    contractor_id: UUID
    completed: bool = False
    approval_status: ApprovalStatus = ApprovalStatus.PENDING
    paid: bool = False
    paid_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job data."""
        if not self.title or not self.title.strip():
            raise ValueError("Job title is required")
        if self.description is None:
            raise ValueError("Job description is required")
        if self.price is None or Decimal(self.price) <= 0:
            raise ValueError("Job price must be positive")

        self.price = Decimal(self.price)
        self.approval_status = ApprovalStatus(self.approval_status)

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def is_approved(self) -> bool:
        return self.approval_status == ApprovalStatus.APPROVED

    def is_payable(self) -> bool:
        """A job can be paid only once, after completion and approval."""
        return self.completed and self.is_approved and not self.paid

    def apply_changes(
        self,
        title: Optional[str] = None,
        price: Optional[Decimal] = None,
        description: Optional[str] = None,
    ) -> list[str]:
        """Apply a partial update and return the names of changed fields."""
        changed = []
        if title is not None and title != self.title:
            self.title = title
            changed.append("title")
        if price is not None and Decimal(price) != self.price:
            self.price = Decimal(price)
            changed.append("price")
        if description is not None and description != self.description:
            self.description = description
            changed.append("description")

        if changed:
            self.updated_at = datetime.now(timezone.utc)
        return changed

    def mark_completed(self) -> None:
        """Mark the job as completed. There is no way back."""
        self.completed = True
        self.updated_at = datetime.now(timezone.utc)

    def review(self, decision: ApprovalStatus) -> None:
        """Record the client's approval decision."""
        self.approval_status = ApprovalStatus(decision)
        self.updated_at = datetime.now(timezone.utc)

    def mark_paid(self, paid_at: Optional[datetime] = None) -> None:
        """Flag the job as paid. Only the escrow service calls this."""
        self.paid = True
        self.paid_at = paid_at or datetime.now(timezone.utc)
        self.updated_at = self.paid_at
