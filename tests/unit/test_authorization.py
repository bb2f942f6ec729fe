"""
Unit tests for relationship-based authorization predicates.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from marketplace.application.services import authorization
from marketplace.domain.entities.contract import Contract
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.profile import Profile
from marketplace.domain.exceptions import AuthorizationError
from marketplace.domain.value_objects.actor import Actor, Role
from marketplace.domain.value_objects.profile_type import ProfileType


@pytest.fixture
def client():
    return Profile(
        first_name="Harry",
        last_name="Potter",
        email="harry@hogwarts.edu",
        type=ProfileType.CLIENT,
    )


@pytest.fixture
def contractor():
    return Profile(
        first_name="Linus",
        last_name="Torvalds",
        email="linus@kernel.org",
        type=ProfileType.CONTRACTOR,
        profession="Programmer",
    )


@pytest.fixture
def contract(client, contractor):
    return Contract(client_id=client.id, contractor_id=contractor.id)


@pytest.fixture
def job(contract):
    return Job(
        title="Kernel patch",
        description="",
        price=Decimal("100"),
        contract_id=contract.id,
        client_id=contract.client_id,
        contractor_id=contract.contractor_id,
    )


@pytest.fixture
def client_actor(client):
    return Actor(subject_id=client.id, role=Role.CLIENT)


@pytest.fixture
def contractor_actor(contractor):
    return Actor(subject_id=contractor.id, role=Role.CONTRACTOR)


@pytest.fixture
def admin_actor():
    return Actor(subject_id=uuid4(), role=Role.ADMIN)


@pytest.fixture
def stranger():
    return Actor(subject_id=uuid4(), role=Role.CLIENT)


class TestProfilePredicates:
    def test_only_owner_modifies_profile(self, client, client_actor, admin_actor):
        assert authorization.can_modify_profile(client_actor, client) is True
        assert authorization.can_modify_profile(admin_actor, client) is False

    def test_only_owning_client_deposits(
        self, client, contractor, client_actor, contractor_actor
    ):
        assert authorization.can_deposit(client_actor, client) is True
        assert authorization.can_deposit(client_actor, contractor) is False
        # A contractor cannot top up its own balance
        assert authorization.can_deposit(contractor_actor, contractor) is False

    def test_ledger_visible_to_owner_and_admin(
        self, client, client_actor, admin_actor, stranger
    ):
        assert authorization.can_view_ledger(client_actor, client.id) is True
        assert authorization.can_view_ledger(admin_actor, client.id) is True
        assert authorization.can_view_ledger(stranger, client.id) is False


class TestContractPredicates:
    def test_view(self, contract, client_actor, contractor_actor, admin_actor, stranger):
        assert authorization.can_view_contract(client_actor, contract) is True
        assert authorization.can_view_contract(contractor_actor, contract) is True
        assert authorization.can_view_contract(admin_actor, contract) is True
        assert authorization.can_view_contract(stranger, contract) is False

    def test_either_party_terminates(
        self, contract, client_actor, contractor_actor, admin_actor
    ):
        assert authorization.can_terminate_contract(client_actor, contract) is True
        assert authorization.can_terminate_contract(contractor_actor, contract) is True
        assert authorization.can_terminate_contract(admin_actor, contract) is False

    def test_terminate_ignores_role_claim(self, contract, contractor):
        # The relationship decides, not the token role
        actor = Actor(subject_id=contractor.id, role=Role.CLIENT)
        assert authorization.can_terminate_contract(actor, contract) is True

    def test_only_client_creates_jobs(self, contract, client_actor, contractor_actor):
        assert authorization.can_create_job(client_actor, contract) is True
        assert authorization.can_create_job(contractor_actor, contract) is False


class TestJobPredicates:
    def test_client_side_actions(self, job, client_actor, contractor_actor):
        for predicate in (
            authorization.can_modify_job,
            authorization.can_review_job,
            authorization.can_pay_for_job,
        ):
            assert predicate(client_actor, job) is True
            assert predicate(contractor_actor, job) is False

    def test_contractor_completes(self, job, client_actor, contractor_actor):
        assert authorization.can_complete_job(contractor_actor, job) is True
        assert authorization.can_complete_job(client_actor, job) is False

    def test_view(self, job, client_actor, contractor_actor, admin_actor, stranger):
        assert authorization.can_view_job(client_actor, job) is True
        assert authorization.can_view_job(contractor_actor, job) is True
        assert authorization.can_view_job(admin_actor, job) is True
        assert authorization.can_view_job(stranger, job) is False


class TestEnsureAuthorized:
    def test_allowed_passes(self):
        authorization.ensure_authorized(True, "never raised")

    def test_denied_raises(self):
        with pytest.raises(AuthorizationError, match="nope"):
            authorization.ensure_authorized(False, "nope")
