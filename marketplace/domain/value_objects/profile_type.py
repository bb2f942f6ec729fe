"""
Profile type value object.
"""

from enum import Enum


class ProfileType(str, Enum):
    """Marketplace participant type."""

    CLIENT = "client"
    CONTRACTOR = "contractor"

    @property
    def has_profession(self) -> bool:
        """Only contractors carry a profession."""
        return self == self.CONTRACTOR
