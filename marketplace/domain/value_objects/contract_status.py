"""
Contract status value object.
"""

from enum import Enum


class ContractStatus(str, Enum):
    """Contract lifecycle: new -> in_progress -> terminated."""

    NEW = "new"
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"

    def is_final(self) -> bool:
        """Check if status is final (no more transitions)."""
        return self == self.TERMINATED

    def accepts_jobs(self) -> bool:
        """Check if jobs may still be created under the contract."""
        return self != self.TERMINATED

    @classmethod
    def active(cls) -> list["ContractStatus"]:
        """Statuses listed when no explicit filter is supplied."""
        return [cls.NEW, cls.IN_PROGRESS]
