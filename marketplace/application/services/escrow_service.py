"""
Escrow service: client deposits and job payments.

Every balance change is a conditional UPDATE inside one transaction. A job
payment locks both profile rows in id order, claims the job with a
compare-and-swap on its ``paid`` flag, debits the client only if the balance
still covers the price, credits the contractor and writes a ledger entry.
Any failure rolls the whole unit back, so a partial transfer is never
committed.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_DOWN, Decimal
from typing import Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    JobRepositoryInterface,
    LedgerRepositoryInterface,
    ProfileRepositoryInterface,
)
from marketplace.application.services.authorization import (
    can_deposit,
    can_pay_for_job,
    ensure_authorized,
)
from marketplace.config.logging import get_logger
from marketplace.config.settings import settings
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.ledger_entry import LedgerEntry
from marketplace.domain.exceptions import (
    AuthorizationError,
    ConflictError,
    DepositLimitExceededError,
    InsufficientBalanceError,
    JobAlreadyPaidError,
    JobNotFoundError,
    JobNotPayableError,
    NotFoundError,
    ProfileNotFoundError,
    ValidationError,
)
from marketplace.domain.value_objects.actor import Actor
from marketplace.domain.value_objects.ledger_entry_type import LedgerEntryType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from marketplace.infrastructure.monitoring.metrics import (
    record_deposit,
    record_funds_transferred,
    record_payment,
)

logger = get_logger(__name__)

CENTS = Decimal("0.01")


def outcome_label(error: Exception) -> str:
    """Map an exception to a metrics outcome label."""
    if isinstance(error, NotFoundError):
        return "not_found"
    if isinstance(error, AuthorizationError):
        return "forbidden"
    if isinstance(error, ValidationError):
        return "invalid"
    if isinstance(error, ConflictError):
        return "conflict"
    return "error"


@dataclass
class DepositResult:
    """Result of a deposit."""

    profile_id: UUID
    amount: Decimal
    balance: Decimal
    max_deposit: Decimal


@dataclass
class PaymentResult:
    """Result of a job payment."""

    job: Job
    amount: Decimal
    client_balance: Decimal
    contractor_balance: Decimal


class EscrowService:
    """Moves money between profiles."""

    def __init__(
        self,
        profile_repo: ProfileRepositoryInterface,
        job_repo: JobRepositoryInterface,
        ledger_repo: LedgerRepositoryInterface,
        transaction_service: TransactionService,
        cap_ratio: Optional[Decimal] = None,
    ):
        self.profile_repo = profile_repo
        self.job_repo = job_repo
        self.ledger_repo = ledger_repo
        self.transaction_service = transaction_service
        self.cap_ratio = (
            cap_ratio if cap_ratio is not None else settings.DEPOSIT_CAP_RATIO
        )

    def max_deposit_for(self, total_due: Decimal) -> Decimal:
        """Largest deposit allowed against the given outstanding total."""
        return (Decimal(total_due) * self.cap_ratio).quantize(CENTS, rounding=ROUND_DOWN)

    async def deposit(
        self, actor: Actor, profile_id: UUID, amount: Decimal
    ) -> DepositResult:
        """Top up a client balance, capped by its approved unpaid work."""
        amount = Decimal(amount)

        async def operation() -> DepositResult:
            profile = await self.profile_repo.get_by_id(profile_id)
            if not profile:
                raise ProfileNotFoundError(profile_id)

            ensure_authorized(
                can_deposit(actor, profile),
                "Only the owning client can deposit into this balance",
            )

            if amount <= 0:
                raise ValidationError("Deposit amount must be positive")

            # Serializes with payments touching the same client
            await self.profile_repo.lock_for_update([profile_id])

            total_due = await self.job_repo.sum_outstanding_for_client(profile_id)
            max_deposit = self.max_deposit_for(total_due)
            if amount > max_deposit:
                raise DepositLimitExceededError(amount, max_deposit, self.cap_ratio)

            balance = await self.profile_repo.credit(profile_id, amount)
            await self.ledger_repo.add(
                LedgerEntry(
                    entry_type=LedgerEntryType.DEPOSIT,
                    amount=amount,
                    credit_profile_id=profile_id,
                )
            )

            return DepositResult(
                profile_id=profile_id,
                amount=amount,
                balance=balance,
                max_deposit=max_deposit,
            )

        try:
            result = await self.transaction_service.execute_in_transaction(operation)
        except Exception as e:
            record_deposit(outcome_label(e))
            logger.warning(
                "Deposit rejected",
                profile_id=str(profile_id),
                amount=str(amount),
                reason=str(e),
            )
            raise

        record_deposit("success")
        logger.info(
            "Deposit completed",
            profile_id=str(profile_id),
            amount=str(amount),
            balance=str(result.balance),
        )
        return result

    async def pay_for_job(self, actor: Actor, job_id: UUID) -> PaymentResult:
        """Transfer the job price from its client to its contractor."""

        async def operation() -> PaymentResult:
            job = await self.job_repo.get_by_id(job_id)
            if not job:
                raise JobNotFoundError(job_id)
            if job.paid:
                raise JobAlreadyPaidError(job_id)

            ensure_authorized(
                can_pay_for_job(actor, job), "Only the job's client can pay for it"
            )

            if not (job.completed and job.is_approved):
                raise JobNotPayableError(
                    job_id, job.completed, job.approval_status.value
                )

            locked = {
                profile.id: profile
                for profile in await self.profile_repo.lock_for_update(
                    [job.client_id, job.contractor_id]
                )
            }
            client = locked.get(job.client_id)
            if client is None:
                raise ProfileNotFoundError(job.client_id)
            if job.contractor_id not in locked:
                raise ProfileNotFoundError(job.contractor_id)

            if not client.can_cover(job.price):
                raise InsufficientBalanceError(client.id, client.balance, job.price)

            paid_at = datetime.now(timezone.utc)
            claimed = await self.job_repo.mark_paid_if_payable(
                job.id, job.client_id, job.price, paid_at
            )
            if not claimed:
                raise await self._payment_conflict(job)

            client_balance = await self.profile_repo.debit_if_sufficient(
                job.client_id, job.price
            )
            if client_balance is None:
                raise InsufficientBalanceError(client.id, client.balance, job.price)

            contractor_balance = await self.profile_repo.credit(
                job.contractor_id, job.price
            )
            await self.ledger_repo.add(
                LedgerEntry(
                    entry_type=LedgerEntryType.JOB_PAYMENT,
                    amount=job.price,
                    debit_profile_id=job.client_id,
                    credit_profile_id=job.contractor_id,
                    job_id=job.id,
                )
            )

            job.mark_paid(paid_at)
            return PaymentResult(
                job=job,
                amount=job.price,
                client_balance=client_balance,
                contractor_balance=contractor_balance,
            )

        try:
            result = await self.transaction_service.execute_in_transaction(operation)
        except Exception as e:
            record_payment(outcome_label(e))
            logger.warning(
                "Job payment rejected",
                job_id=str(job_id),
                actor_id=str(actor.subject_id),
                reason=str(e),
                error_type=type(e).__name__,
            )
            raise

        record_payment("success")
        record_funds_transferred(result.amount)
        logger.info(
            "Job paid",
            job_id=str(job_id),
            client_id=str(result.job.client_id),
            contractor_id=str(result.job.contractor_id),
            amount=str(result.amount),
        )
        return result

    async def _payment_conflict(self, stale: Job) -> Exception:
        """Explain why the payment claim on a job matched no row."""
        details = await self.job_repo.get_details(stale.id)
        if details is None:
            return JobNotFoundError(stale.id)

        current = details.job
        if current.paid:
            return JobAlreadyPaidError(current.id)
        return JobNotPayableError(
            current.id, current.completed, current.approval_status.value
        )
