"""Contract repository implementation."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from marketplace.application.interfaces.repositories import (
    ContractDetails,
    ContractRepositoryInterface,
    Page,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.contract import Contract
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.infrastructure.database.models.contract import ContractModel
from marketplace.infrastructure.database.repositories.job_repository import (
    job_model_to_entity,
)
from marketplace.infrastructure.database.repositories.profile_repository import (
    ProfileRepository,
)

logger = get_logger(__name__)


class ContractRepository(ContractRepositoryInterface):
    """Contract repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._profiles = ProfileRepository(db)

    async def get_by_id(
        self, contract_id: UUID, for_update: bool = False
    ) -> Optional[Contract]:
        """Get contract by ID, optionally locking the row."""
        stmt = select(ContractModel).where(ContractModel.id == contract_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def get_details(self, contract_id: UUID) -> Optional[ContractDetails]:
        """Get contract with parties and jobs."""
        stmt = (
            select(ContractModel)
            .where(ContractModel.id == contract_id)
            .options(*self._detail_options())
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_details(model) if model else None

    async def create(self, contract: Contract) -> Contract:
        """Create a new contract."""
        model = ContractModel(
            id=contract.id,
            client_id=contract.client_id,
            contractor_id=contract.contractor_id,
            status=contract.status,
            created_at=contract.created_at,
            updated_at=contract.updated_at,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        logger.info("Contract created", contract_id=str(model.id))
        return self._model_to_entity(model)

    async def update_status(self, contract: Contract) -> Contract:
        """Persist the contract status."""
        stmt = select(ContractModel).where(ContractModel.id == contract.id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Contract {contract.id} not found")

        model.status = contract.status
        model.updated_at = contract.updated_at

        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def list_for_party(
        self,
        profile_id: UUID,
        statuses: Sequence[ContractStatus],
        page: int,
        per_page: int,
    ) -> Page[ContractDetails]:
        """List contracts where the profile is client or contractor."""
        conditions = [
            or_(
                ContractModel.client_id == profile_id,
                ContractModel.contractor_id == profile_id,
            ),
            ContractModel.status.in_(list(statuses)),
        ]
        return await self._paginate(conditions, page, per_page)

    async def list_all(
        self, statuses: Sequence[ContractStatus], page: int, per_page: int
    ) -> Page[ContractDetails]:
        """List all contracts in the given statuses."""
        conditions = [ContractModel.status.in_(list(statuses))]
        return await self._paginate(conditions, page, per_page)

    async def _paginate(self, conditions: list, page: int, per_page: int) -> Page:
        count_stmt = select(func.count()).select_from(ContractModel).where(*conditions)
        total = (await self.db.execute(count_stmt)).scalar_one()

        stmt = (
            select(ContractModel)
            .where(*conditions)
            .options(*self._detail_options())
            .order_by(ContractModel.created_at.desc(), ContractModel.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.db.execute(stmt)
        items = [self._model_to_details(model) for model in result.scalars().all()]

        return Page(items=items, total=total, page=page, per_page=per_page)

    @staticmethod
    def _detail_options() -> list:
        return [
            selectinload(ContractModel.client),
            selectinload(ContractModel.contractor),
            selectinload(ContractModel.jobs),
        ]

    def _model_to_details(self, model: ContractModel) -> ContractDetails:
        return ContractDetails(
            contract=self._model_to_entity(model),
            client=self._profiles._model_to_entity(model.client),
            contractor=self._profiles._model_to_entity(model.contractor),
            jobs=[job_model_to_entity(job) for job in model.jobs],
        )

    def _model_to_entity(self, model: ContractModel) -> Contract:
        """Convert SQLAlchemy model to domain entity."""
        return Contract(
            id=model.id,
            client_id=model.client_id,
            contractor_id=model.contractor_id,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
