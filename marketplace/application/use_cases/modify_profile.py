"""Modify profile use case."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import ProfileRepositoryInterface
from marketplace.application.services.authorization import (
    can_modify_profile,
    ensure_authorized,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.profile import Profile
from marketplace.domain.exceptions import (
    InvalidProfileUpdateError,
    ProfileNotFoundError,
    ValidationError,
)
from marketplace.domain.value_objects.actor import Actor
from marketplace.domain.value_objects.profile_type import ProfileType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class ModifyProfileRequest:
    """Partial profile update. ``None`` leaves a field unchanged."""

    actor: Actor
    profile_id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profession: Optional[str] = None
    type: Optional[ProfileType] = None


class ModifyProfileUseCase:
    def __init__(
        self,
        profile_repo: ProfileRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.profile_repo = profile_repo
        self.transaction_service = transaction_service

    async def execute(self, request: ModifyProfileRequest) -> Profile:
        profile = await self.profile_repo.get_by_id(request.profile_id)
        if not profile:
            raise ProfileNotFoundError(request.profile_id)

        ensure_authorized(
            can_modify_profile(request.actor, profile),
            "Profiles can only be modified by their owner",
        )

        if request.type is not None and ProfileType(request.type) != profile.type:
            raise InvalidProfileUpdateError("Profile type cannot be changed")
        if request.profession is not None and not profile.is_contractor:
            raise InvalidProfileUpdateError("Only contractors have a profession")

        for name in ("first_name", "last_name"):
            value = getattr(request, name)
            if value is not None:
                if not value.strip():
                    raise ValidationError(f"{name} cannot be blank")
                setattr(profile, name, value.strip())

        if request.profession is not None:
            profile.profession = request.profession.strip() or None

        profile.updated_at = datetime.now(timezone.utc)
        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.profile_repo.update(profile)
        )

        logger.info("Profile modified", profile_id=str(updated.id))
        return updated
