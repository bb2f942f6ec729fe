"""Ledger query use case."""

from uuid import UUID

from marketplace.application.interfaces.repositories import (
    LedgerRepositoryInterface,
    Page,
    ProfileRepositoryInterface,
)
from marketplace.application.services.authorization import (
    can_view_ledger,
    ensure_authorized,
)
from marketplace.domain.entities.ledger_entry import LedgerEntry
from marketplace.domain.exceptions import ProfileNotFoundError
from marketplace.domain.value_objects.actor import Actor


class GetLedgerUseCase:
    """Balance movements of one profile, newest first."""

    def __init__(
        self,
        ledger_repo: LedgerRepositoryInterface,
        profile_repo: ProfileRepositoryInterface,
    ):
        self.ledger_repo = ledger_repo
        self.profile_repo = profile_repo

    async def execute(
        self, actor: Actor, profile_id: UUID, page: int, per_page: int
    ) -> Page[LedgerEntry]:
        ensure_authorized(
            can_view_ledger(actor, profile_id),
            "Only the owner can view this ledger",
        )

        if not await self.profile_repo.get_by_id(profile_id):
            raise ProfileNotFoundError(profile_id)

        return await self.ledger_repo.list_for_profile(profile_id, page, per_page)
