"""
Job approval status value object.
"""

from enum import Enum


class ApprovalStatus(str, Enum):
    """Client review of a job: pending -> approved | rejected."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    def is_decision(self) -> bool:
        """Check if status is a value a client may set."""
        return self in [self.APPROVED, self.REJECTED]

    @classmethod
    def decisions(cls) -> list["ApprovalStatus"]:
        return [cls.APPROVED, cls.REJECTED]
