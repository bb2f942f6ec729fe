"""Contract query use cases."""

from typing import Optional, Sequence
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    ContractDetails,
    ContractRepositoryInterface,
    Page,
)
from marketplace.application.services.authorization import (
    can_view_contract,
    ensure_authorized,
)
from marketplace.domain.exceptions import ContractNotFoundError
from marketplace.domain.value_objects.actor import Actor
from marketplace.domain.value_objects.contract_status import ContractStatus


class GetContractUseCase:
    def __init__(self, contract_repo: ContractRepositoryInterface):
        self.contract_repo = contract_repo

    async def execute(self, actor: Actor, contract_id: UUID) -> ContractDetails:
        details = await self.contract_repo.get_details(contract_id)
        if not details:
            raise ContractNotFoundError(contract_id)

        ensure_authorized(
            can_view_contract(actor, details.contract),
            "Only the parties to a contract can view it",
        )
        return details


class ListContractsUseCase:
    """Paginated contract listings.

    Terminated contracts are left out unless a status filter asks for them.
    """

    def __init__(self, contract_repo: ContractRepositoryInterface):
        self.contract_repo = contract_repo

    async def for_party(
        self,
        actor: Actor,
        page: int,
        per_page: int,
        statuses: Optional[Sequence[ContractStatus]] = None,
    ) -> Page[ContractDetails]:
        return await self.contract_repo.list_for_party(
            actor.subject_id, self._statuses(statuses), page, per_page
        )

    async def all(
        self,
        page: int,
        per_page: int,
        statuses: Optional[Sequence[ContractStatus]] = None,
    ) -> Page[ContractDetails]:
        return await self.contract_repo.list_all(self._statuses(statuses), page, per_page)

    @staticmethod
    def _statuses(
        statuses: Optional[Sequence[ContractStatus]],
    ) -> Sequence[ContractStatus]:
        return list(statuses) if statuses else ContractStatus.active()
