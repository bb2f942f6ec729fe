"""
Integration tests for the admin reports.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from marketplace.domain.exceptions import ReportDataNotFoundError
from marketplace.domain.value_objects.approval_status import ApprovalStatus

pytestmark = pytest.mark.integration

IN_RANGE = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
START = datetime(2024, 3, 1, tzinfo=timezone.utc)
END = datetime(2024, 3, 31, 23, 59, 59, tzinfo=timezone.utc)


async def paid_job(factory, contract, price, created_at=IN_RANGE):
    return await factory.payable_job(
        contract, price=price, paid=True, created_at=created_at
    )


class TestBestProfession:
    @pytest.mark.asyncio
    async def test_highest_earning_contractor_wins(self, factory, reporting_service):
        client = await factory.client()
        programmer = await factory.contractor(profession="Programmer")
        musician = await factory.contractor(profession="Musician")
        await paid_job(factory, await factory.contract(client, programmer), "300")
        await paid_job(factory, await factory.contract(client, musician), "250")
        await paid_job(factory, await factory.contract(client, musician), "100")
        # Outside the range
        await paid_job(
            factory,
            await factory.contract(client, programmer),
            "900",
            created_at=START - timedelta(days=1),
        )

        result = await reporting_service.best_profession(START, END)

        assert result.profession == "Musician"
        assert result.total_earned == Decimal("350.00")
        assert result.contractor.id == musician.id

    @pytest.mark.asyncio
    async def test_unpaid_or_incomplete_jobs_do_not_count(
        self, factory, reporting_service
    ):
        client = await factory.client()
        contractor = await factory.contractor()
        contract = await factory.contract(client, contractor)
        await factory.payable_job(contract, price="500", created_at=IN_RANGE)
        await factory.job(
            contract,
            price="500",
            approval_status=ApprovalStatus.APPROVED,
            created_at=IN_RANGE,
        )

        with pytest.raises(ReportDataNotFoundError):
            await reporting_service.best_profession(START, END)

    @pytest.mark.asyncio
    async def test_range_bounds_are_inclusive(self, factory, reporting_service):
        client = await factory.client()
        contractor = await factory.contractor(profession="Fighter")
        contract = await factory.contract(client, contractor)
        await paid_job(factory, contract, "10", created_at=START)
        await paid_job(factory, contract, "20", created_at=END)

        result = await reporting_service.best_profession(START, END)

        assert result.total_earned == Decimal("30.00")


class TestBestClients:
    @pytest.mark.asyncio
    async def test_ranking_with_lowest_id_tie_break(self, factory, reporting_service):
        contractor = await factory.contractor()
        clients = [await factory.client() for _ in range(3)]
        top, tied = clients[0], sorted(clients[1:], key=lambda c: c.id)
        await paid_job(factory, await factory.contract(top, contractor), "500")
        for client in reversed(tied):
            await paid_job(factory, await factory.contract(client, contractor), "300")

        results = await reporting_service.best_clients(START, END, limit=3)

        assert [item.client.id for item in results] == [top.id, tied[0].id, tied[1].id]
        assert [item.total_paid for item in results] == [
            Decimal("500.00"),
            Decimal("300.00"),
            Decimal("300.00"),
        ]

    @pytest.mark.asyncio
    async def test_default_limit(self, factory, reporting_service):
        contractor = await factory.contractor()
        for price in ("100", "200", "300"):
            client = await factory.client()
            await paid_job(factory, await factory.contract(client, contractor), price)

        results = await reporting_service.best_clients(START, END)

        assert [item.total_paid for item in results] == [
            Decimal("300.00"),
            Decimal("200.00"),
        ]

    @pytest.mark.asyncio
    async def test_sums_multiple_jobs_per_client(self, factory, reporting_service):
        client = await factory.client()
        contractor = await factory.contractor()
        contract = await factory.contract(client, contractor)
        await paid_job(factory, contract, "120.25")
        await paid_job(factory, contract, "79.75")

        results = await reporting_service.best_clients(START, END)

        assert len(results) == 1
        assert results[0].total_paid == Decimal("200.00")
        assert results[0].client.full_name == client.full_name

    @pytest.mark.asyncio
    async def test_empty_range_returns_empty_list(self, reporting_service):
        assert await reporting_service.best_clients(START, END) == []
