"""Contract domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.value_objects.contract_status import ContractStatus


@dataclass
class Contract:
    """Work relationship between exactly one client and one contractor."""

    client_id: UUID
    contractor_id: UUID
    status: ContractStatus = ContractStatus.NEW
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate contract data."""
        if self.client_id == self.contractor_id:
            raise ValueError("Client and contractor must be different profiles")

        self.status = ContractStatus(self.status)

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def is_terminated(self) -> bool:
        return self.status.is_final()

    def is_party(self, profile_id: UUID) -> bool:
        """Check if the profile is the client or the contractor."""
        return profile_id in (self.client_id, self.contractor_id)

    def start(self) -> bool:
        """Move a new contract to in_progress.

        Returns True when the status changed.
        """
        if self.status != ContractStatus.NEW:
            return False

        self.status = ContractStatus.IN_PROGRESS
        self.updated_at = datetime.now(timezone.utc)
        return True

    def terminate(self) -> None:
        """Terminate the contract. Re-terminating is accepted and harmless."""
        self.status = ContractStatus.TERMINATED
        self.updated_at = datetime.now(timezone.utc)
