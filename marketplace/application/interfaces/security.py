"""
Identity provider interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from marketplace.domain.value_objects.actor import Actor, Role


class TokenServiceInterface(ABC):
    """Issues and verifies signed access tokens."""

    @abstractmethod
    def create_access_token(self, subject_id: UUID, role: Role) -> str:
        """Issue a token carrying subject id and role."""
        pass

    @abstractmethod
    def decode_access_token(self, token: str) -> Actor:
        """Verify a token and return the actor it identifies."""
        pass


class PasswordHasherInterface(ABC):
    """One-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass
