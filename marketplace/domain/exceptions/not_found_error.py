"""
Not-found domain exceptions.
"""

from datetime import datetime
from uuid import UUID


class NotFoundError(Exception):
    """Base exception for references to missing entities or data."""

    pass


class EntityNotFoundError(NotFoundError):
    """Raised when an entity looked up by id does not exist."""

    entity = "Entity"

    def __init__(self, entity_id: UUID):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} not found")


class ProfileNotFoundError(EntityNotFoundError):
    entity = "Profile"


class ContractNotFoundError(EntityNotFoundError):
    entity = "Contract"


class JobNotFoundError(EntityNotFoundError):
    entity = "Job"


class ReportDataNotFoundError(NotFoundError):
    """Raised when a report has no paid jobs in its date range."""

    def __init__(self, start: datetime, end: datetime):
        self.start = start
        self.end = end
        super().__init__(
            f"No paid jobs found between {start.isoformat()} and {end.isoformat()}"
        )
