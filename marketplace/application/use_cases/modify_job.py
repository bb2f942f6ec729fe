"""Modify job use case."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import JobRepositoryInterface
from marketplace.application.services.authorization import (
    can_modify_job,
    ensure_authorized,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions import (
    InvalidPriceError,
    JobAlreadyPaidError,
    JobNotFoundError,
    ValidationError,
)
from marketplace.domain.value_objects.actor import Actor
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class ModifyJobRequest:
    """Partial job update. ``None`` leaves a field unchanged."""

    actor: Actor
    job_id: UUID
    title: Optional[str] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None


@dataclass
class ModifyJobResult:
    job: Job
    changed_fields: List[str] = field(default_factory=list)


class ModifyJobUseCase:
    """The job's client edits title, price or description.

    Approved jobs stay editable. Paid jobs are frozen so the recorded
    transfer always matches the job price.
    """

    def __init__(
        self, job_repo: JobRepositoryInterface, transaction_service: TransactionService
    ):
        self.job_repo = job_repo
        self.transaction_service = transaction_service

    async def execute(self, request: ModifyJobRequest) -> ModifyJobResult:
        if request.price is not None and Decimal(request.price) <= 0:
            raise InvalidPriceError(request.price)
        if request.title is not None and not request.title.strip():
            raise ValidationError("Job title cannot be blank")

        async def operation() -> ModifyJobResult:
            job = await self.job_repo.get_by_id(request.job_id)
            if not job:
                raise JobNotFoundError(request.job_id)

            ensure_authorized(
                can_modify_job(request.actor, job),
                "Only the job's client can modify it",
            )

            if job.paid:
                raise JobAlreadyPaidError(job.id)

            changed = job.apply_changes(
                title=request.title,
                price=request.price,
                description=request.description,
            )
            if not changed:
                return ModifyJobResult(job=job)

            updated = await self.job_repo.update(job)
            return ModifyJobResult(job=updated, changed_fields=changed)

        result = await self.transaction_service.execute_in_transaction(operation)

        logger.info(
            "Job modified",
            job_id=str(request.job_id),
            changed_fields=result.changed_fields,
        )
        return result
