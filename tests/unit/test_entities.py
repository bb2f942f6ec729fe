"""
Unit tests for domain entities.
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from marketplace.domain.entities.contract import Contract
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.ledger_entry import LedgerEntry
from marketplace.domain.entities.profile import Profile
from marketplace.domain.value_objects.approval_status import ApprovalStatus
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.domain.value_objects.ledger_entry_type import LedgerEntryType
from marketplace.domain.value_objects.profile_type import ProfileType


def make_job(**overrides) -> Job:
    data = {
        "title": "Fix the sink",
        "description": "Kitchen sink leaks",
        "price": Decimal("150.00"),
        "contract_id": uuid4(),
        "client_id": uuid4(),
        "contractor_id": uuid4(),
    }
    data.update(overrides)
    return Job(**data)


class TestProfile:
    """Test Profile entity."""

    def test_email_is_normalized(self):
        profile = Profile(
            first_name="Harry",
            last_name="Potter",
            email="  Harry@Hogwarts.EDU ",
            type=ProfileType.CLIENT,
        )
        assert profile.email == "harry@hogwarts.edu"

    def test_client_never_keeps_profession(self):
        profile = Profile(
            first_name="Harry",
            last_name="Potter",
            email="harry@hogwarts.edu",
            type="client",
            profession="Wizard",
        )
        assert profile.type is ProfileType.CLIENT
        assert profile.profession is None

    def test_contractor_keeps_profession(self):
        profile = Profile(
            first_name="Linus",
            last_name="Torvalds",
            email="linus@kernel.org",
            type=ProfileType.CONTRACTOR,
            profession="Programmer",
        )
        assert profile.is_contractor is True
        assert profile.profession == "Programmer"
        assert profile.full_name == "Linus Torvalds"

    def test_negative_balance_rejected(self):
        with pytest.raises(ValueError, match="Balance cannot be negative"):
            Profile(
                first_name="Harry",
                last_name="Potter",
                email="harry@hogwarts.edu",
                type=ProfileType.CLIENT,
                balance=Decimal("-1"),
            )

    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_blank_names_rejected(self, field):
        data = {
            "first_name": "Harry",
            "last_name": "Potter",
            "email": "harry@hogwarts.edu",
            "type": ProfileType.CLIENT,
        }
        data[field] = "   "
        with pytest.raises(ValueError):
            Profile(**data)

    def test_invalid_email_rejected(self):
        with pytest.raises(ValueError, match="valid email"):
            Profile(
                first_name="Harry",
                last_name="Potter",
                email="not-an-email",
                type=ProfileType.CLIENT,
            )

    def test_can_cover(self):
        profile = Profile(
            first_name="Harry",
            last_name="Potter",
            email="harry@hogwarts.edu",
            type=ProfileType.CLIENT,
            balance=Decimal("100.00"),
        )
        assert profile.can_cover(Decimal("100.00")) is True
        assert profile.can_cover(Decimal("100.01")) is False


class TestContract:
    """Test Contract entity."""

    def test_new_contract_defaults(self):
        contract = Contract(client_id=uuid4(), contractor_id=uuid4())

        assert contract.status is ContractStatus.NEW
        assert contract.created_at is not None
        assert contract.is_terminated is False

    def test_same_party_rejected(self):
        profile_id = uuid4()
        with pytest.raises(ValueError, match="different profiles"):
            Contract(client_id=profile_id, contractor_id=profile_id)

    def test_start_moves_new_to_in_progress_once(self):
        contract = Contract(client_id=uuid4(), contractor_id=uuid4())

        assert contract.start() is True
        assert contract.status is ContractStatus.IN_PROGRESS
        assert contract.start() is False
        assert contract.status is ContractStatus.IN_PROGRESS

    def test_start_does_not_revive_terminated_contract(self):
        contract = Contract(
            client_id=uuid4(),
            contractor_id=uuid4(),
            status=ContractStatus.TERMINATED,
        )

        assert contract.start() is False
        assert contract.status is ContractStatus.TERMINATED

    def test_terminate_from_any_status(self):
        for status in ContractStatus:
            contract = Contract(client_id=uuid4(), contractor_id=uuid4(), status=status)
            contract.terminate()
            assert contract.status is ContractStatus.TERMINATED

    def test_is_party(self):
        client_id, contractor_id = uuid4(), uuid4()
        contract = Contract(client_id=client_id, contractor_id=contractor_id)

        assert contract.is_party(client_id) is True
        assert contract.is_party(contractor_id) is True
        assert contract.is_party(uuid4()) is False


class TestJob:
    """Test Job entity."""

    def test_defaults(self):
        job = make_job()

        assert job.completed is False
        assert job.approval_status is ApprovalStatus.PENDING
        assert job.paid is False
        assert job.paid_at is None

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-5"), None])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ValueError, match="price must be positive"):
            make_job(price=price)

    def test_blank_title_rejected(self):
        with pytest.raises(ValueError, match="title is required"):
            make_job(title="  ")

    @pytest.mark.parametrize(
        "completed,approval_status,paid,expected",
        [
            (True, ApprovalStatus.APPROVED, False, True),
            (True, ApprovalStatus.APPROVED, True, False),
            (True, ApprovalStatus.PENDING, False, False),
            (True, ApprovalStatus.REJECTED, False, False),
            (False, ApprovalStatus.APPROVED, False, False),
        ],
    )
    def test_is_payable(self, completed, approval_status, paid, expected):
        job = make_job(completed=completed, approval_status=approval_status, paid=paid)
        assert job.is_payable() is expected

    def test_apply_changes_reports_changed_fields(self):
        job = make_job()

        changed = job.apply_changes(
            title="Fix the sink", price=Decimal("175"), description="Also the tap"
        )

        assert changed == ["price", "description"]
        assert job.price == Decimal("175")
        assert job.description == "Also the tap"

    def test_apply_changes_without_changes(self):
        job = make_job()
        updated_at = job.updated_at

        assert job.apply_changes() == []
        assert job.updated_at == updated_at

    def test_review_and_complete(self):
        job = make_job()

        job.review(ApprovalStatus.APPROVED)
        job.mark_completed()

        assert job.is_approved is True
        assert job.completed is True

    def test_mark_paid(self):
        job = make_job(completed=True, approval_status=ApprovalStatus.APPROVED)
        paid_at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

        job.mark_paid(paid_at)

        assert job.paid is True
        assert job.paid_at == paid_at
        assert job.is_payable() is False


class TestLedgerEntry:
    def test_deposit_has_no_debit_side(self):
        credit_id = uuid4()
        entry = LedgerEntry(
            entry_type="deposit", amount=Decimal("50"), credit_profile_id=credit_id
        )

        assert entry.entry_type is LedgerEntryType.DEPOSIT
        assert entry.debit_profile_id is None
        assert entry.involves(credit_id) is True
        assert entry.involves(uuid4()) is False

    def test_amount_must_be_positive(self):
        with pytest.raises(ValueError):
            LedgerEntry(
                entry_type=LedgerEntryType.DEPOSIT,
                amount=Decimal("0"),
                credit_profile_id=uuid4(),
            )
