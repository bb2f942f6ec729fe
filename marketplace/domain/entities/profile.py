"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.value_objects.profile_type import ProfileType


@dataclass
class Profile:
    """Marketplace participant: a paying client or a paid contractor."""

    first_name: str
    last_name: str
    email: str
    type: ProfileType
    profession: Optional[str] = None
    balance: Decimal = Decimal("0")
    password_hash: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate profile data."""
        if not self.first_name or not self.first_name.strip():
            raise ValueError("First name is required")
        if not self.last_name or not self.last_name.strip():
            raise ValueError("Last name is required")
        if not self.email or "@" not in self.email:
            raise ValueError("A valid email is required")

        self.type = ProfileType(self.type)
        self.email = self.email.strip().lower()
        if not self.type.has_profession:
            self.profession = None
        if self.balance < 0:
            raise ValueError("Balance cannot be negative")

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_client(self) -> bool:
        return self.type == ProfileType.CLIENT

    @property
    def is_contractor(self) -> bool:
        return self.type == ProfileType.CONTRACTOR

    def can_cover(self, amount: Decimal) -> bool:
        """Check if the balance covers the given amount."""
        return self.balance >= amount
