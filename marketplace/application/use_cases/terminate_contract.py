"""Terminate contract use case."""

from dataclasses import dataclass
from uuid import UUID

from marketplace.application.interfaces.repositories import ContractRepositoryInterface
from marketplace.application.services.authorization import (
    can_terminate_contract,
    ensure_authorized,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.contract import Contract
from marketplace.domain.exceptions import ContractNotFoundError
from marketplace.domain.value_objects.actor import Actor
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from marketplace.infrastructure.monitoring.metrics import record_contract_transition

logger = get_logger(__name__)


@dataclass
class TerminateContractRequest:
    actor: Actor
    contract_id: UUID


class TerminateContractUseCase:
    """Either party ends a contract.

    Terminating an already terminated contract succeeds and changes nothing
    but ``updated_at``.
    """

    def __init__(
        self,
        contract_repo: ContractRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.contract_repo = contract_repo
        self.transaction_service = transaction_service

    async def execute(self, request: TerminateContractRequest) -> Contract:
        async def operation() -> Contract:
            contract = await self.contract_repo.get_by_id(
                request.contract_id, for_update=True
            )
            if not contract:
                raise ContractNotFoundError(request.contract_id)

            ensure_authorized(
                can_terminate_contract(request.actor, contract),
                "Only a party to the contract can terminate it",
            )

            contract.terminate()
            return await self.contract_repo.update_status(contract)

        terminated = await self.transaction_service.execute_in_transaction(operation)

        record_contract_transition(ContractStatus.TERMINATED.value)
        logger.info(
            "Contract terminated",
            contract_id=str(terminated.id),
            actor_id=str(request.actor.subject_id),
        )
        return terminated
