"""Mark job completed use case."""

from dataclasses import dataclass
from uuid import UUID

from marketplace.application.interfaces.repositories import JobRepositoryInterface
from marketplace.application.services.authorization import (
    can_complete_job,
    ensure_authorized,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions import JobNotFoundError
from marketplace.domain.value_objects.actor import Actor
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class CompleteJobRequest:
    """Request for marking a job completed."""

    actor: Actor
    job_id: UUID


class CompleteJobUseCase:
    """The job's contractor marks it completed. There is no way back."""

    def __init__(
        self, job_repo: JobRepositoryInterface, transaction_service: TransactionService
    ):
        self.job_repo = job_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CompleteJobRequest) -> Job:
        async def operation() -> Job:
            job = await self.job_repo.get_by_id(request.job_id)
            if not job:
                raise JobNotFoundError(request.job_id)

            ensure_authorized(
                can_complete_job(request.actor, job),
                "Only the job's contractor can mark it completed",
            )

            if job.completed:
                return job

            job.mark_completed()
            return await self.job_repo.update(job)

        job = await self.transaction_service.execute_in_transaction(operation)

        logger.info("Job marked completed", job_id=str(job.id))
        return job
