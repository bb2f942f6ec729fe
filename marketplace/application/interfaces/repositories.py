"""
Repository interfaces for dependency inversion.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar
from uuid import UUID

from marketplace.domain.entities.contract import Contract
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.ledger_entry import LedgerEntry
from marketplace.domain.entities.profile import Profile
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.domain.value_objects.profile_type import ProfileType

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a paginated query."""

    items: List[T]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.per_page) if self.per_page else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass
class ProfileFilters:
    """Exact-match filters for profile listings."""

    type: Optional[ProfileType] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profession: Optional[str] = None


@dataclass
class ContractDetails:
    """Contract expanded with both parties and its jobs."""

    contract: Contract
    client: Profile
    contractor: Profile
    jobs: List[Job] = field(default_factory=list)


@dataclass
class JobDetails:
    """Job expanded with its contract and both parties."""

    job: Job
    contract: Contract
    client: Profile
    contractor: Profile


class ProfileRepositoryInterface(ABC):
    """Profile repository interface."""

    @abstractmethod
    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by e-mail, case-insensitively."""
        pass

    @abstractmethod
    async def get_by_ids(self, profile_ids: Sequence[UUID]) -> List[Profile]:
        """Get several profiles at once."""
        pass

    @abstractmethod
    async def find(
        self, filters: ProfileFilters, page: int, per_page: int
    ) -> Page[Profile]:
        """List profiles matching filters, paginated."""
        pass

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> Profile:
        """Update descriptive fields. Never touches balance or type."""
        pass

    @abstractmethod
    async def lock_for_update(self, profile_ids: Sequence[UUID]) -> List[Profile]:
        """Lock the given profile rows in ascending id order and return them."""
        pass

    @abstractmethod
    async def credit(self, profile_id: UUID, amount: Decimal) -> Decimal:
        """Atomically add to a balance and return the new balance."""
        pass

    @abstractmethod
    async def debit_if_sufficient(
        self, profile_id: UUID, amount: Decimal
    ) -> Optional[Decimal]:
        """Atomically subtract from a balance only if it covers the amount.

        Returns the new balance, or None when nothing was debited.
        """
        pass


class ContractRepositoryInterface(ABC):
    """Contract repository interface."""

    @abstractmethod
    async def get_by_id(
        self, contract_id: UUID, for_update: bool = False
    ) -> Optional[Contract]:
        """Get contract by ID, optionally locking the row."""
        pass

    @abstractmethod
    async def get_details(self, contract_id: UUID) -> Optional[ContractDetails]:
        """Get contract with parties and jobs."""
        pass

    @abstractmethod
    async def create(self, contract: Contract) -> Contract:
        """Create a new contract."""
        pass

    @abstractmethod
    async def update_status(self, contract: Contract) -> Contract:
        """Persist the contract status."""
        pass

    @abstractmethod
    async def list_for_party(
        self,
        profile_id: UUID,
        statuses: Sequence[ContractStatus],
        page: int,
        per_page: int,
    ) -> Page[ContractDetails]:
        """List contracts where the profile is client or contractor."""
        pass

    @abstractmethod
    async def list_all(
        self, statuses: Sequence[ContractStatus], page: int, per_page: int
    ) -> Page[ContractDetails]:
        """List all contracts in the given statuses."""
        pass


class JobRepositoryInterface(ABC):
    """Job repository interface."""

    @abstractmethod
    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID."""
        pass

    @abstractmethod
    async def get_details(self, job_id: UUID) -> Optional[JobDetails]:
        """Get job with contract and parties."""
        pass

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Create a new job."""
        pass

    @abstractmethod
    async def update(self, job: Job) -> Job:
        """Persist title, description, price, completion and approval.

        Raises JobAlreadyPaidError when the stored job is already paid.
        """
        pass

    @abstractmethod
    async def mark_paid_if_payable(
        self, job_id: UUID, client_id: UUID, price: Decimal, paid_at: datetime
    ) -> bool:
        """Flip ``paid`` only if the job is still payable at the given price."""
        pass

    @abstractmethod
    async def list_for_party(self, profile_id: UUID) -> List[JobDetails]:
        """List jobs where the profile is client or contractor."""
        pass

    @abstractmethod
    async def list_unpaid_for_party(self, profile_id: UUID) -> List[JobDetails]:
        """List completed unpaid jobs of in-progress contracts for a party."""
        pass

    @abstractmethod
    async def list_all(self, page: int, per_page: int) -> Page[JobDetails]:
        """List all jobs, paginated."""
        pass

    @abstractmethod
    async def sum_outstanding_for_client(self, client_id: UUID) -> Decimal:
        """Sum prices of completed, approved, unpaid jobs of a client."""
        pass

    @abstractmethod
    async def earnings_by_contractor(
        self, start: datetime, end: datetime, limit: int
    ) -> List[Tuple[UUID, Decimal]]:
        """Top contractors by paid job totals, ties broken by lowest id."""
        pass

    @abstractmethod
    async def payments_by_client(
        self, start: datetime, end: datetime, limit: int
    ) -> List[Tuple[UUID, Decimal]]:
        """Top clients by paid job totals, ties broken by lowest id."""
        pass


class LedgerRepositoryInterface(ABC):
    """Ledger repository interface."""

    @abstractmethod
    async def add(self, entry: LedgerEntry) -> LedgerEntry:
        """Record a balance movement."""
        pass

    @abstractmethod
    async def list_for_profile(
        self, profile_id: UUID, page: int, per_page: int
    ) -> Page[LedgerEntry]:
        """List movements involving a profile, newest first."""
        pass
