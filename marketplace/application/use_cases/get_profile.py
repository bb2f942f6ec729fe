"""Profile query use cases."""

from uuid import UUID

from marketplace.application.interfaces.repositories import (
    Page,
    ProfileFilters,
    ProfileRepositoryInterface,
)
from marketplace.domain.entities.profile import Profile
from marketplace.domain.exceptions import ProfileNotFoundError


class GetProfileUseCase:
    def __init__(self, profile_repo: ProfileRepositoryInterface):
        self.profile_repo = profile_repo

    async def execute(self, profile_id: UUID) -> Profile:
        profile = await self.profile_repo.get_by_id(profile_id)
        if not profile:
            raise ProfileNotFoundError(profile_id)
        return profile


class ListProfilesUseCase:
    def __init__(self, profile_repo: ProfileRepositoryInterface):
        self.profile_repo = profile_repo

    async def execute(
        self, filters: ProfileFilters, page: int, per_page: int
    ) -> Page[Profile]:
        return await self.profile_repo.find(filters, page, per_page)
