"""Ledger repository implementation."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.interfaces.repositories import (
    LedgerRepositoryInterface,
    Page,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.ledger_entry import LedgerEntry
from marketplace.infrastructure.database.models.ledger_entry import LedgerEntryModel

logger = get_logger(__name__)


class LedgerRepository(LedgerRepositoryInterface):
    """Append-only store of balance movements."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, entry: LedgerEntry) -> LedgerEntry:
        """Record a balance movement."""
        model = LedgerEntryModel(
            id=entry.id,
            entry_type=entry.entry_type,
            amount=entry.amount,
            debit_profile_id=entry.debit_profile_id,
            credit_profile_id=entry.credit_profile_id,
            job_id=entry.job_id,
            created_at=entry.created_at,
            updated_at=entry.created_at,
        )

        self.db.add(model)
        await self.db.flush()

        logger.debug(
            "Ledger entry recorded",
            entry_id=str(model.id),
            entry_type=entry.entry_type.value,
            amount=str(entry.amount),
        )
        return self._model_to_entity(model)

    async def list_for_profile(
        self, profile_id: UUID, page: int, per_page: int
    ) -> Page[LedgerEntry]:
        """List movements involving a profile, newest first."""
        condition = or_(
            LedgerEntryModel.credit_profile_id == profile_id,
            LedgerEntryModel.debit_profile_id == profile_id,
        )

        count_stmt = select(func.count()).select_from(LedgerEntryModel).where(condition)
        total = (await self.db.execute(count_stmt)).scalar_one()

        stmt = (
            select(LedgerEntryModel)
            .where(condition)
            .order_by(LedgerEntryModel.created_at.desc(), LedgerEntryModel.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.db.execute(stmt)
        items = [self._model_to_entity(model) for model in result.scalars().all()]

        return Page(items=items, total=total, page=page, per_page=per_page)

    def _model_to_entity(self, model: LedgerEntryModel) -> LedgerEntry:
        """Convert SQLAlchemy model to domain entity."""
        return LedgerEntry(
            id=model.id,
            entry_type=model.entry_type,
            amount=Decimal(model.amount),
            debit_profile_id=model.debit_profile_id,
            credit_profile_id=model.credit_profile_id,
            job_id=model.job_id,
            created_at=model.created_at,
        )
