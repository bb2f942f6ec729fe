"""
Pytest configuration and fixtures.
"""

import os

# Settings are read at import time
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator, Optional
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from marketplace.application.interfaces.repositories import (
    ContractRepositoryInterface,
    JobRepositoryInterface,
    LedgerRepositoryInterface,
    ProfileRepositoryInterface,
)
from marketplace.application.services.escrow_service import EscrowService
from marketplace.application.services.reporting_service import ReportingService
from marketplace.domain.entities.contract import Contract
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.profile import Profile
from marketplace.domain.value_objects.actor import Actor, Role
from marketplace.domain.value_objects.approval_status import ApprovalStatus
from marketplace.domain.value_objects.contract_status import ContractStatus
from marketplace.domain.value_objects.profile_type import ProfileType
from marketplace.infrastructure.database.models import Base
from marketplace.infrastructure.database.repositories import (
    ContractRepository,
    JobRepository,
    LedgerRepository,
    ProfileRepository,
    TransactionService,
)

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def profile_repo(db_session):
    return ProfileRepository(db_session)


@pytest.fixture
def contract_repo(db_session):
    return ContractRepository(db_session)


@pytest.fixture
def job_repo(db_session):
    return JobRepository(db_session)


@pytest.fixture
def ledger_repo(db_session):
    return LedgerRepository(db_session)


@pytest.fixture
def transaction_service(db_session):
    return TransactionService(db_session)


@pytest.fixture
def escrow_service(profile_repo, job_repo, ledger_repo, transaction_service):
    return EscrowService(
        profile_repo, job_repo, ledger_repo, transaction_service, Decimal("0.25")
    )


@pytest.fixture
def reporting_service(job_repo, profile_repo):
    return ReportingService(job_repo, profile_repo, default_limit=2)


class EntityFactory:
    """Persists entities through the repositories and commits each one."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.profiles = ProfileRepository(session)
        self.contracts = ContractRepository(session)
        self.jobs = JobRepository(session)

    async def client(self, balance="0", first_name="Harry", **kwargs) -> Profile:
        return await self._profile(
            ProfileType.CLIENT, balance, first_name=first_name, **kwargs
        )

    async def contractor(
        self, balance="0", profession="Programmer", first_name="Linus", **kwargs
    ) -> Profile:
        return await self._profile(
            ProfileType.CONTRACTOR,
            balance,
            first_name=first_name,
            profession=profession,
            **kwargs,
        )

    async def contract(
        self,
        client: Profile,
        contractor: Profile,
        status: ContractStatus = ContractStatus.IN_PROGRESS,
    ) -> Contract:
        contract = await self.contracts.create(
            Contract(client_id=client.id, contractor_id=contractor.id, status=status)
        )
        await self.session.commit()
        return contract

    async def job(
        self,
        contract: Contract,
        price="100",
        completed: bool = False,
        approval_status: ApprovalStatus = ApprovalStatus.PENDING,
        paid: bool = False,
        created_at: Optional[datetime] = None,
        title: str = "Build a web crawler",
    ) -> Job:
        job = await self.jobs.create(
            Job(
                title=title,
                description="",
                price=Decimal(price),
                contract_id=contract.id,
                client_id=contract.client_id,
                contractor_id=contract.contractor_id,
                completed=completed,
                approval_status=approval_status,
                paid=paid,
                created_at=created_at,
                updated_at=created_at,
            )
        )
        await self.session.commit()
        return job

    async def payable_job(self, contract: Contract, price="100", **kwargs) -> Job:
        return await self.job(
            contract,
            price=price,
            completed=True,
            approval_status=ApprovalStatus.APPROVED,
            **kwargs,
        )

    async def _profile(
        self,
        profile_type: ProfileType,
        balance,
        first_name: str,
        last_name: str = "Tester",
        email: Optional[str] = None,
        profession: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> Profile:
        profile = await self.profiles.create(
            Profile(
                type=profile_type,
                first_name=first_name,
                last_name=last_name,
                email=email or f"{uuid4().hex[:12]}@example.com",
                profession=profession,
                balance=Decimal(balance),
                password_hash=password_hash,
            )
        )
        await self.session.commit()
        return profile


@pytest.fixture
def factory(db_session) -> EntityFactory:
    return EntityFactory(db_session)


@pytest.fixture
def actor_for():
    """Build the actor whose role matches a profile's type."""

    def build(profile: Profile) -> Actor:
        return Actor(subject_id=profile.id, role=Role(profile.type.value))

    return build


@pytest.fixture
def admin_actor() -> Actor:
    return Actor(subject_id=uuid4(), role=Role.ADMIN)


@pytest.fixture
def mock_profile_repository():
    """Mock profile repository."""
    return AsyncMock(spec=ProfileRepositoryInterface)


@pytest.fixture
def mock_contract_repository():
    """Mock contract repository."""
    return AsyncMock(spec=ContractRepositoryInterface)


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    return AsyncMock(spec=JobRepositoryInterface)


@pytest.fixture
def mock_ledger_repository():
    """Mock ledger repository."""
    return AsyncMock(spec=LedgerRepositoryInterface)


@pytest.fixture
def mock_transaction_service():
    """Transaction service that just runs the operation."""
    service = AsyncMock(spec=TransactionService)

    async def run(operation):
        return await operation()

    service.execute_in_transaction.side_effect = run
    return service
