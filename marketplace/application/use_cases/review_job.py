"""Update job approval status use case."""

from dataclasses import dataclass
from uuid import UUID

from marketplace.application.interfaces.repositories import JobRepositoryInterface
from marketplace.application.services.authorization import (
    can_review_job,
    ensure_authorized,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions import (
    InvalidApprovalStatusError,
    JobAlreadyPaidError,
    JobNotFoundError,
)
from marketplace.domain.value_objects.actor import Actor
from marketplace.domain.value_objects.approval_status import ApprovalStatus
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class ReviewJobRequest:
    actor: Actor
    job_id: UUID
    status: str


class ReviewJobUseCase:
    """The job's client approves or rejects it.

    Completion is not required first; an approved but incomplete job is
    still not payable.
    """

    def __init__(
        self, job_repo: JobRepositoryInterface, transaction_service: TransactionService
    ):
        self.job_repo = job_repo
        self.transaction_service = transaction_service

    async def execute(self, request: ReviewJobRequest) -> Job:
        async def operation() -> Job:
            job = await self.job_repo.get_by_id(request.job_id)
            if not job:
                raise JobNotFoundError(request.job_id)

            ensure_authorized(
                can_review_job(request.actor, job),
                "Only the job's client can review it",
            )
            if job.paid:
                raise JobAlreadyPaidError(job.id)

            decision = self._parse_decision(request.status)
            job.review(decision)
            return await self.job_repo.update(job)

        job = await self.transaction_service.execute_in_transaction(operation)

        logger.info(
            "Job reviewed", job_id=str(job.id), approval_status=job.approval_status.value
        )
        return job

    @staticmethod
    def _parse_decision(status) -> ApprovalStatus:
        try:
            decision = ApprovalStatus(status)
        except ValueError:
            raise InvalidApprovalStatusError(str(status)) from None

        if not decision.is_decision():
            raise InvalidApprovalStatusError(decision.value)
        return decision
