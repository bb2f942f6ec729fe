"""
Admin reports over paid jobs.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Tuple

from marketplace.application.interfaces.repositories import (
    JobRepositoryInterface,
    ProfileRepositoryInterface,
)
from marketplace.config.logging import get_logger
from marketplace.config.settings import settings
from marketplace.domain.entities.profile import Profile
from marketplace.domain.exceptions import (
    ProfileNotFoundError,
    ReportDataNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)


@dataclass
class BestProfession:
    """Highest-earning contractor's profession in a date range."""

    profession: Optional[str]
    total_earned: Decimal
    contractor: Profile


@dataclass
class ClientPayments:
    """A client and what it paid in a date range."""

    client: Profile
    total_paid: Decimal


class ReportingService:
    """Aggregates paid, completed jobs by their creation date.

    Ranges are inclusive on both ends. Equal totals are ordered by the
    lowest profile id first.
    """

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        profile_repo: ProfileRepositoryInterface,
        default_limit: Optional[int] = None,
    ):
        self.job_repo = job_repo
        self.profile_repo = profile_repo
        self.default_limit = default_limit or settings.BEST_CLIENTS_DEFAULT_LIMIT

    async def best_profession(self, start: datetime, end: datetime) -> BestProfession:
        start, end = self._normalize_range(start, end)

        rows = await self.job_repo.earnings_by_contractor(start, end, limit=1)
        if not rows:
            raise ReportDataNotFoundError(start, end)

        contractor_id, total = rows[0]
        contractor = await self.profile_repo.get_by_id(contractor_id)
        if not contractor:
            raise ProfileNotFoundError(contractor_id)

        logger.info(
            "Best profession computed",
            contractor_id=str(contractor_id),
            profession=contractor.profession,
            total_earned=str(total),
        )
        return BestProfession(
            profession=contractor.profession, total_earned=total, contractor=contractor
        )

    async def best_clients(
        self, start: datetime, end: datetime, limit: Optional[int] = None
    ) -> List[ClientPayments]:
        start, end = self._normalize_range(start, end)

        limit = self.default_limit if limit is None else limit
        if limit < 1:
            raise ValidationError("Limit must be at least 1")

        rows = await self.job_repo.payments_by_client(start, end, limit)
        profiles = {
            profile.id: profile
            for profile in await self.profile_repo.get_by_ids([row[0] for row in rows])
        }

        results = []
        for client_id, total in rows:
            client = profiles.get(client_id)
            if client is None:
                raise ProfileNotFoundError(client_id)
            results.append(ClientPayments(client=client, total_paid=total))

        logger.info("Best clients computed", count=len(results), limit=limit)
        return results

    @staticmethod
    def _normalize_range(start: datetime, end: datetime) -> Tuple[datetime, datetime]:
        # Naive bounds are taken as UTC
        start, end = (
            value if value.tzinfo else value.replace(tzinfo=timezone.utc)
            for value in (start, end)
        )
        if start > end:
            raise ValidationError("Start date must not be after end date")
        return start, end
