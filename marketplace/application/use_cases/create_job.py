"""Create job use case."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    ContractRepositoryInterface,
    JobRepositoryInterface,
)
from marketplace.application.services.authorization import (
    can_create_job,
    ensure_authorized,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions import (
    ContractNotFoundError,
    ContractTerminatedError,
    InvalidPriceError,
    ValidationError,
)
from marketplace.domain.value_objects.actor import Actor
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from marketplace.infrastructure.monitoring.metrics import record_contract_transition

logger = get_logger(__name__)


@dataclass
class CreateJobRequest:
    """Request for creating a job."""

    actor: Actor
    contract_id: UUID
    title: str
    description: str
    price: Decimal


@dataclass
class CreateJobResult:
    """Result of job creation."""

    job: Job
    contract_started: bool


class CreateJobUseCase:
    """Use case for adding a job to a contract.

    The first job of a ``new`` contract moves it to ``in_progress``. The
    contract row is locked so a concurrent termination cannot slip in
    between the status check and the insert.
    """

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        contract_repo: ContractRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.contract_repo = contract_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CreateJobRequest) -> CreateJobResult:
        if request.price is None or Decimal(request.price) <= 0:
            raise InvalidPriceError(request.price)

        async def operation() -> CreateJobResult:
            contract = await self.contract_repo.get_by_id(
                request.contract_id, for_update=True
            )
            if not contract:
                raise ContractNotFoundError(request.contract_id)

            ensure_authorized(
                can_create_job(request.actor, contract),
                "Only the contract's client can create jobs under it",
            )

            if not contract.status.accepts_jobs():
                raise ContractTerminatedError(contract.id)

            try:
                job = Job(
                    title=request.title,
                    description=request.description,
                    price=request.price,
                    contract_id=contract.id,
                    client_id=contract.client_id,
                    contractor_id=contract.contractor_id,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            created = await self.job_repo.create(job)

            started = contract.start()
            if started:
                await self.contract_repo.update_status(contract)

            return CreateJobResult(job=created, contract_started=started)

        result = await self.transaction_service.execute_in_transaction(operation)

        if result.contract_started:
            record_contract_transition(ContractStatus.IN_PROGRESS.value)

        logger.info(
            "Job created",
            job_id=str(result.job.id),
            contract_id=str(request.contract_id),
            price=str(result.job.price),
            contract_started=result.contract_started,
        )
        return result
