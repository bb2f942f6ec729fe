"""
Authenticated actor value object.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class Role(str, Enum):
    """Coarse capability claim carried by an access token."""

    CLIENT = "client"
    CONTRACTOR = "contractor"
    ADMIN = "admin"


@dataclass(frozen=True)
class Actor:
    """Identity injected by the identity provider: subject id and role."""

    subject_id: UUID
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def is_subject(self, profile_id: UUID) -> bool:
        """Check if the actor is the given profile."""
        return self.subject_id == profile_id
