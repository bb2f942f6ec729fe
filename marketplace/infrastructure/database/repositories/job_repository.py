"""Job repository implementation."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from marketplace.application.interfaces.repositories import (
    JobDetails,
    JobRepositoryInterface,
    Page,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.contract import Contract
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions import JobAlreadyPaidError
from marketplace.domain.value_objects.approval_status import ApprovalStatus
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.infrastructure.database.models.contract import ContractModel
from marketplace.infrastructure.database.models.job import JobModel
from marketplace.infrastructure.database.repositories.profile_repository import (
    ProfileRepository,
)

logger = get_logger(__name__)

CENTS = Decimal("0.01")


def _to_money(value) -> Decimal:
    # SQLite hands back floats for SUM over NUMERIC columns
    return Decimal(str(value or 0)).quantize(CENTS)


def job_model_to_entity(model: JobModel) -> Job:
    """Convert SQLAlchemy model to domain entity."""
    return Job(
        id=model.id,
        contract_id=model.contract_id,
        client_id=model.client_id,
        contractor_id=model.contractor_id,
        title=model.title,
        description=model.description,
        price=Decimal(model.price),
        completed=model.completed,
        approval_status=model.approval_status,
        paid=model.paid,
        paid_at=model.paid_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class JobRepository(JobRepositoryInterface):
    """Job repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._profiles = ProfileRepository(db)

    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID, as currently stored."""
        stmt = (
            select(JobModel)
            .where(JobModel.id == job_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def get_details(self, job_id: UUID) -> Optional[JobDetails]:
        """Get job with contract and parties, as currently stored."""
        stmt = (
            select(JobModel)
            .where(JobModel.id == job_id)
            .options(*self._detail_options())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_details(model) if model else None

    async def create(self, job: Job) -> Job:
        """Create a new job."""
        model = JobModel(
            id=job.id,
            contract_id=job.contract_id,
            client_id=job.client_id,
            contractor_id=job.contractor_id,
            title=job.title,
            description=job.description,
            price=job.price,
            completed=job.completed,
            approval_status=job.approval_status,
            paid=job.paid,
            paid_at=job.paid_at,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        logger.info(
            "Job created", job_id=str(model.id), contract_id=str(model.contract_id)
        )
        return self._model_to_entity(model)

    async def update(self, job: Job) -> Job:
        """Persist title, description, price, completion and approval.

        The write only lands while the stored job is unpaid, so an edit
        based on a read taken before a payment committed cannot touch the
        paid row. ``paid`` itself is left alone; only
        ``mark_paid_if_payable`` sets it.
        """
        stmt = (
            update(JobModel)
            .where(JobModel.id == job.id, JobModel.paid.is_(False))
            .values(
                title=job.title,
                description=job.description,
                price=job.price,
                completed=job.completed,
                approval_status=job.approval_status,
                updated_at=job.updated_at,
            )
            .returning(JobModel.id)
        )
        result = await self.db.execute(stmt)

        if result.scalar_one_or_none() is None:
            current = await self.get_by_id(job.id)
            if current is None:
                raise ValueError(f"Job {job.id} not found")

            logger.warning("Job update rejected, already paid", job_id=str(job.id))
            raise JobAlreadyPaidError(job.id)

        logger.info("Job updated", job_id=str(job.id))
        return await self.get_by_id(job.id)

    async def mark_paid_if_payable(
        self, job_id: UUID, client_id: UUID, price: Decimal, paid_at: datetime
    ) -> bool:
        """Flip ``paid`` only if the job is still payable at the given price.

        The guard repeats every payability condition in the WHERE clause so
        that a concurrent payment or price change makes this a no-op.
        """
        stmt = (
            update(JobModel)
            .where(
                and_(
                    JobModel.id == job_id,
                    JobModel.client_id == client_id,
                    JobModel.paid.is_(False),
                    JobModel.completed.is_(True),
                    JobModel.approval_status == ApprovalStatus.APPROVED,
                    JobModel.price == price,
                )
            )
            .values(paid=True, paid_at=paid_at, updated_at=paid_at)
            .returning(JobModel.id)
        )
        result = await self.db.execute(stmt)
        claimed = result.scalar_one_or_none() is not None

        logger.info("Job payment claim", job_id=str(job_id), claimed=claimed)
        return claimed

    async def list_for_party(self, profile_id: UUID) -> List[JobDetails]:
        """List jobs where the profile is client or contractor."""
        stmt = (
            select(JobModel)
            .where(
                or_(JobModel.client_id == profile_id, JobModel.contractor_id == profile_id)
            )
            .options(*self._detail_options())
            .order_by(JobModel.created_at.desc(), JobModel.id)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_details(model) for model in result.scalars().all()]

    async def list_unpaid_for_party(self, profile_id: UUID) -> List[JobDetails]:
        """List completed unpaid jobs of in-progress contracts for a party."""
        stmt = (
            select(JobModel)
            .join(ContractModel, JobModel.contract_id == ContractModel.id)
            .where(
                and_(
                    or_(
                        JobModel.client_id == profile_id,
                        JobModel.contractor_id == profile_id,
                    ),
                    JobModel.paid.is_(False),
                    JobModel.completed.is_(True),
                    ContractModel.status == ContractStatus.IN_PROGRESS,
                )
            )
            .options(*self._detail_options())
            .order_by(JobModel.created_at.desc(), JobModel.id)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_details(model) for model in result.scalars().all()]

    async def list_all(self, page: int, per_page: int) -> Page[JobDetails]:
        """List all jobs, paginated."""
        total = (
            await self.db.execute(select(func.count()).select_from(JobModel))
        ).scalar_one()

        stmt = (
            select(JobModel)
            .options(*self._detail_options())
            .order_by(JobModel.created_at.desc(), JobModel.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.db.execute(stmt)
        items = [self._model_to_details(model) for model in result.scalars().all()]

        return Page(items=items, total=total, page=page, per_page=per_page)

    async def sum_outstanding_for_client(self, client_id: UUID) -> Decimal:
        """Sum prices of completed, approved, unpaid jobs of a client."""
        stmt = select(func.coalesce(func.sum(JobModel.price), 0)).where(
            and_(
                JobModel.client_id == client_id,
                JobModel.paid.is_(False),
                JobModel.completed.is_(True),
                JobModel.approval_status == ApprovalStatus.APPROVED,
            )
        )
        result = await self.db.execute(stmt)
        return _to_money(result.scalar_one())

    async def earnings_by_contractor(
        self, start: datetime, end: datetime, limit: int
    ) -> List[Tuple[UUID, Decimal]]:
        """Top contractors by paid job totals, ties broken by lowest id."""
        return await self._paid_totals(JobModel.contractor_id, start, end, limit)

    async def payments_by_client(
        self, start: datetime, end: datetime, limit: int
    ) -> List[Tuple[UUID, Decimal]]:
        """Top clients by paid job totals, ties broken by lowest id."""
        return await self._paid_totals(JobModel.client_id, start, end, limit)

    async def _paid_totals(
        self, group_column, start: datetime, end: datetime, limit: int
    ) -> List[Tuple[UUID, Decimal]]:
        total = func.sum(JobModel.price).label("total")
        stmt = (
            select(group_column, total)
            .where(
                and_(
                    JobModel.paid.is_(True),
                    JobModel.completed.is_(True),
                    JobModel.created_at >= start,
                    JobModel.created_at <= end,
                )
            )
            .group_by(group_column)
            .order_by(total.desc(), group_column.asc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [(row[0], _to_money(row[1])) for row in result.all()]

    @staticmethod
    def _detail_options() -> list:
        return [
            selectinload(JobModel.contract),
            selectinload(JobModel.client),
            selectinload(JobModel.contractor),
        ]

    def _model_to_details(self, model: JobModel) -> JobDetails:
        contract = model.contract
        return JobDetails(
            job=self._model_to_entity(model),
            contract=Contract(
                id=contract.id,
                client_id=contract.client_id,
                contractor_id=contract.contractor_id,
                status=contract.status,
                created_at=contract.created_at,
                updated_at=contract.updated_at,
            ),
            client=self._profiles._model_to_entity(model.client),
            contractor=self._profiles._model_to_entity(model.contractor),
        )

    def _model_to_entity(self, model: JobModel) -> Job:
        return job_model_to_entity(model)
