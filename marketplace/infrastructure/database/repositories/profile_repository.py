"""Profile repository implementation."""

from decimal import Decimal
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.interfaces.repositories import (
    Page,
    ProfileFilters,
    ProfileRepositoryInterface,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.profile import Profile
from marketplace.infrastructure.database.models.profile import ProfileModel

logger = get_logger(__name__)


class ProfileRepository(ProfileRepositoryInterface):
    """Profile repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by e-mail, case-insensitively."""
        stmt = select(ProfileModel).where(ProfileModel.email == email.strip().lower())
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def get_by_ids(self, profile_ids: Sequence[UUID]) -> List[Profile]:
        """Get several profiles at once."""
        if not profile_ids:
            return []

        stmt = select(ProfileModel).where(ProfileModel.id.in_(list(profile_ids)))
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def find(
        self, filters: ProfileFilters, page: int, per_page: int
    ) -> Page[Profile]:
        """List profiles matching filters, paginated."""
        conditions = []
        if filters.type is not None:
            conditions.append(ProfileModel.type == filters.type)
        if filters.first_name:
            conditions.append(ProfileModel.first_name == filters.first_name)
        if filters.last_name:
            conditions.append(ProfileModel.last_name == filters.last_name)
        if filters.profession:
            conditions.append(ProfileModel.profession == filters.profession)

        count_stmt = select(func.count()).select_from(ProfileModel).where(*conditions)
        total = (await self.db.execute(count_stmt)).scalar_one()

        stmt = (
            select(ProfileModel)
            .where(*conditions)
            .order_by(ProfileModel.created_at, ProfileModel.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.db.execute(stmt)
        items = [self._model_to_entity(model) for model in result.scalars().all()]

        return Page(items=items, total=total, page=page, per_page=per_page)

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(
            id=profile.id,
            type=profile.type,
            profession=profile.profession,
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=profile.email,
            balance=profile.balance,
            password_hash=profile.password_hash,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

        self.db.add(model)
        # Use flush instead of commit to maintain transaction atomicity
        await self.db.flush()
        await self.db.refresh(model)

        logger.info("Profile created", profile_id=str(model.id), type=model.type.value)
        return self._model_to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update descriptive fields. Never touches balance or type."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.first_name = profile.first_name
        model.last_name = profile.last_name
        model.profession = profile.profession
        model.updated_at = profile.updated_at

        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def lock_for_update(self, profile_ids: Sequence[UUID]) -> List[Profile]:
        """Lock profile rows in ascending id order.

        A fixed lock order keeps two transfers over the same pair of
        profiles from deadlocking. Backends without row locks ignore
        ``FOR UPDATE``.
        """
        ordered_ids = sorted(set(profile_ids))
        stmt = (
            select(ProfileModel)
            .where(ProfileModel.id.in_(ordered_ids))
            .order_by(ProfileModel.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def credit(self, profile_id: UUID, amount: Decimal) -> Decimal:
        """Atomically add to a balance and return the new balance."""
        stmt = (
            update(ProfileModel)
            .where(ProfileModel.id == profile_id)
            .values(balance=ProfileModel.balance + amount)
            .returning(ProfileModel.balance)
        )
        result = await self.db.execute(stmt)
        new_balance = result.scalar_one_or_none()

        if new_balance is None:
            raise ValueError(f"Profile {profile_id} not found")

        logger.debug("Balance credited", profile_id=str(profile_id), amount=str(amount))
        return Decimal(new_balance)

    async def debit_if_sufficient(
        self, profile_id: UUID, amount: Decimal
    ) -> Optional[Decimal]:
        """Atomically subtract from a balance only if it covers the amount.

        Returns the new balance, or None when nothing was debited.
        """
        stmt = (
            update(ProfileModel)
            .where(ProfileModel.id == profile_id, ProfileModel.balance >= amount)
            .values(balance=ProfileModel.balance - amount)
            .returning(ProfileModel.balance)
        )
        result = await self.db.execute(stmt)
        new_balance = result.scalar_one_or_none()
        debited = new_balance is not None

        logger.debug(
            "Balance debit attempted",
            profile_id=str(profile_id),
            amount=str(amount),
            debited=debited,
        )
        return Decimal(new_balance) if debited else None

    def _model_to_entity(self, model: ProfileModel) -> Profile:
        """Convert SQLAlchemy model to domain entity."""
        return Profile(
            id=model.id,
            type=model.type,
            profession=model.profession,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            balance=Decimal(model.balance),
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
