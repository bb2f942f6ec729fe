"""
Relationship-based authorization predicates.

Route-level role filters only decide whether an actor may call an endpoint at
all. Every entity-specific decision goes through one of the predicates below,
which compare the actor's identity with the ownership fields of the entity.
"""

from uuid import UUID

from marketplace.domain.entities.contract import Contract
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.profile import Profile
from marketplace.domain.exceptions.authorization_error import AuthorizationError
from marketplace.domain.value_objects.actor import Actor


def can_modify_profile(actor: Actor, profile: Profile) -> bool:
    return actor.is_subject(profile.id)


def can_deposit(actor: Actor, profile: Profile) -> bool:
    """Only the owning client tops up a balance."""
    return actor.is_subject(profile.id) and profile.is_client


def can_view_ledger(actor: Actor, profile_id: UUID) -> bool:
    return actor.is_admin or actor.is_subject(profile_id)


def can_view_contract(actor: Actor, contract: Contract) -> bool:
    return actor.is_admin or contract.is_party(actor.subject_id)


def can_terminate_contract(actor: Actor, contract: Contract) -> bool:
    """Either party may terminate, regardless of the role claim."""
    return contract.is_party(actor.subject_id)


def can_create_job(actor: Actor, contract: Contract) -> bool:
    return actor.is_subject(contract.client_id)


def can_view_job(actor: Actor, job: Job) -> bool:
    return actor.is_admin or actor.subject_id in (job.client_id, job.contractor_id)


def can_modify_job(actor: Actor, job: Job) -> bool:
    return actor.is_subject(job.client_id)


def can_complete_job(actor: Actor, job: Job) -> bool:
    return actor.is_subject(job.contractor_id)


def can_review_job(actor: Actor, job: Job) -> bool:
    return actor.is_subject(job.client_id)


def can_pay_for_job(actor: Actor, job: Job) -> bool:
    return actor.is_subject(job.client_id)


def ensure_authorized(allowed: bool, message: str) -> None:
    """Raise AuthorizationError unless the predicate allowed the action."""
    if not allowed:
        raise AuthorizationError(message)
