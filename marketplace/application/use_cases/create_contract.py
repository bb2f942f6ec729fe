"""Create contract use case."""

from dataclasses import dataclass
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    ContractRepositoryInterface,
    ProfileRepositoryInterface,
)
from marketplace.application.services.authorization import ensure_authorized
from marketplace.config.logging import get_logger
from marketplace.domain.entities.contract import Contract
from marketplace.domain.exceptions import ProfileNotFoundError, ValidationError
from marketplace.domain.value_objects.actor import Actor
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from marketplace.infrastructure.monitoring.metrics import record_contract_transition

logger = get_logger(__name__)


@dataclass
class CreateContractRequest:
    """The acting client opens a contract with a contractor."""

    actor: Actor
    contractor_id: UUID


class CreateContractUseCase:
    def __init__(
        self,
        contract_repo: ContractRepositoryInterface,
        profile_repo: ProfileRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.contract_repo = contract_repo
        self.profile_repo = profile_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CreateContractRequest) -> Contract:
        client_id = request.actor.subject_id

        client = await self.profile_repo.get_by_id(client_id)
        if not client:
            raise ProfileNotFoundError(client_id)
        ensure_authorized(client.is_client, "Only clients can open contracts")

        contractor = await self.profile_repo.get_by_id(request.contractor_id)
        if not contractor:
            raise ProfileNotFoundError(request.contractor_id)
        if not contractor.is_contractor:
            raise ValidationError(f"Profile {contractor.id} is not a contractor")

        contract = Contract(client_id=client.id, contractor_id=contractor.id)
        created = await self.transaction_service.execute_in_transaction(
            lambda: self.contract_repo.create(contract)
        )

        record_contract_transition(ContractStatus.NEW.value)
        logger.info(
            "Contract opened",
            contract_id=str(created.id),
            client_id=str(created.client_id),
            contractor_id=str(created.contractor_id),
        )
        return created
