"""Job query use cases."""

from typing import List
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    JobDetails,
    JobRepositoryInterface,
    Page,
)
from marketplace.application.services.authorization import (
    can_view_job,
    ensure_authorized,
)
from marketplace.domain.exceptions import JobNotFoundError
from marketplace.domain.value_objects.actor import Actor


class GetJobUseCase:
    def __init__(self, job_repo: JobRepositoryInterface):
        self.job_repo = job_repo

    async def execute(self, actor: Actor, job_id: UUID) -> JobDetails:
        details = await self.job_repo.get_details(job_id)
        if not details:
            raise JobNotFoundError(job_id)

        ensure_authorized(
            can_view_job(actor, details.job), "Only the job's parties can view it"
        )
        return details


class ListJobsUseCase:
    def __init__(self, job_repo: JobRepositoryInterface):
        self.job_repo = job_repo

    async def for_party(self, actor: Actor) -> List[JobDetails]:
        return await self.job_repo.list_for_party(actor.subject_id)

    async def unpaid(self, actor: Actor) -> List[JobDetails]:
        """Completed, unpaid jobs of the actor's in-progress contracts."""
        return await self.job_repo.list_unpaid_for_party(actor.subject_id)

    async def all(self, page: int, per_page: int) -> Page[JobDetails]:
        return await self.job_repo.list_all(page, per_page)
