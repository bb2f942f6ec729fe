"""
Unit tests for value objects.
"""

import dataclasses
from uuid import uuid4

import pytest

from marketplace.domain.value_objects.actor import Actor, Role
from marketplace.domain.value_objects.approval_status import ApprovalStatus
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.domain.value_objects.ledger_entry_type import LedgerEntryType
from marketplace.domain.value_objects.profile_type import ProfileType


class TestContractStatus:
    """Test ContractStatus value object."""

    def test_enum_values(self):
        """Test that all expected enum values exist."""
        assert [status.value for status in ContractStatus] == [
            "new",
            "in_progress",
            "terminated",
        ]

    def test_is_final(self):
        assert ContractStatus.TERMINATED.is_final() is True
        assert ContractStatus.NEW.is_final() is False
        assert ContractStatus.IN_PROGRESS.is_final() is False

    def test_accepts_jobs(self):
        assert ContractStatus.NEW.accepts_jobs() is True
        assert ContractStatus.IN_PROGRESS.accepts_jobs() is True
        assert ContractStatus.TERMINATED.accepts_jobs() is False

    def test_active_statuses_exclude_terminated(self):
        assert ContractStatus.active() == [
            ContractStatus.NEW,
            ContractStatus.IN_PROGRESS,
        ]

    def test_enum_comparison(self):
        assert ContractStatus.IN_PROGRESS == "in_progress"
        assert ContractStatus("terminated") is ContractStatus.TERMINATED


class TestApprovalStatus:
    """Test ApprovalStatus value object."""

    def test_enum_values(self):
        assert [status.value for status in ApprovalStatus] == [
            "pending",
            "approved",
            "rejected",
        ]

    def test_is_decision(self):
        """Only approved and rejected may be set by a client."""
        assert ApprovalStatus.APPROVED.is_decision() is True
        assert ApprovalStatus.REJECTED.is_decision() is True
        assert ApprovalStatus.PENDING.is_decision() is False

    def test_decisions(self):
        assert ApprovalStatus.decisions() == [
            ApprovalStatus.APPROVED,
            ApprovalStatus.REJECTED,
        ]

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            ApprovalStatus("maybe")


class TestProfileType:
    def test_enum_values(self):
        assert [t.value for t in ProfileType] == ["client", "contractor"]

    def test_has_profession(self):
        assert ProfileType.CONTRACTOR.has_profession is True
        assert ProfileType.CLIENT.has_profession is False


class TestLedgerEntryType:
    def test_enum_values(self):
        assert [t.value for t in LedgerEntryType] == ["deposit", "job_payment"]


class TestActor:
    """Test Actor value object."""

    def test_is_admin(self):
        assert Actor(subject_id=uuid4(), role=Role.ADMIN).is_admin is True
        assert Actor(subject_id=uuid4(), role=Role.CLIENT).is_admin is False

    def test_is_subject(self):
        subject_id = uuid4()
        actor = Actor(subject_id=subject_id, role=Role.CONTRACTOR)

        assert actor.is_subject(subject_id) is True
        assert actor.is_subject(uuid4()) is False

    def test_immutable(self):
        """Test that actor is immutable."""
        actor = Actor(subject_id=uuid4(), role=Role.CLIENT)

        with pytest.raises(dataclasses.FrozenInstanceError):
            actor.role = Role.ADMIN

    def test_role_values(self):
        assert {role.value for role in Role} == {"client", "contractor", "admin"}
