"""
End-to-end tests of the HTTP API over an in-memory database.
"""

from decimal import Decimal
from uuid import uuid4

import httpx
import pytest
import pytest_asyncio

from marketplace.api.app import create_app
from marketplace.config.database import get_db_session
from marketplace.domain.value_objects.actor import Role
from marketplace.infrastructure.security import TokenService

pytestmark = pytest.mark.integration

API = "/api/v1"
RANGE = {"start": "2000-01-01T00:00:00Z", "end": "2100-01-01T00:00:00Z"}


@pytest_asyncio.fixture
async def api_client(session_factory):
    app = create_app()

    async def override_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def admin_headers() -> dict:
    return auth(TokenService().create_access_token(uuid4(), Role.ADMIN))


async def signup(client, profile_type: str, email: str, **extra) -> dict:
    response = await client.post(
        f"{API}/profiles/create",
        json={
            "type": profile_type,
            "first_name": "Test",
            "last_name": profile_type.title(),
            "email": email,
            "password": "secret-pass",
            **extra,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


async def contract_with_payable_job(client, price: str):
    """Sign up both parties and walk a job to completed and approved."""
    owner = await signup(client, "client", f"client-{uuid4().hex[:8]}@example.com")
    worker = await signup(
        client,
        "contractor",
        f"worker-{uuid4().hex[:8]}@example.com",
        profession="Programmer",
    )
    client_headers = auth(owner["access_token"])
    worker_headers = auth(worker["access_token"])

    contract = (
        await client.post(
            f"{API}/contracts/create",
            json={"contractor_id": worker["profile"]["id"]},
            headers=client_headers,
        )
    ).json()
    job = (
        await client.post(
            f"{API}/jobs/create",
            json={"contract_id": contract["id"], "title": "Build it", "price": price},
            headers=client_headers,
        )
    ).json()

    response = await client.put(
        f"{API}/jobs/update/completed", json={"job_id": job["id"]}, headers=worker_headers
    )
    assert response.status_code == 200, response.text
    response = await client.put(
        f"{API}/jobs/update/approval",
        json={"job_id": job["id"], "status": "approved"},
        headers=client_headers,
    )
    assert response.status_code == 200, response.text

    return owner, worker, contract, job


class TestProfilesApi:
    @pytest.mark.asyncio
    async def test_signup_and_login(self, api_client):
        created = await signup(api_client, "client", "Grace@Example.com")

        assert created["token_type"] == "bearer"
        assert created["profile"]["email"] == "grace@example.com"
        assert Decimal(str(created["profile"]["balance"])) == Decimal("100")
        assert "password_hash" not in created["profile"]

        response = await api_client.post(
            f"{API}/profiles/login",
            json={"email": "grace@example.com", "password": "secret-pass"},
        )
        assert response.status_code == 200
        token = response.json()["access_token"]

        me = await api_client.get(f"{API}/profiles/me", headers=auth(token))
        assert me.status_code == 200
        assert me.json()["id"] == created["profile"]["id"]

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, api_client):
        await signup(api_client, "client", "dup@example.com")

        response = await api_client.post(
            f"{API}/profiles/create",
            json={
                "type": "contractor",
                "first_name": "Other",
                "last_name": "Person",
                "email": "DUP@example.com",
                "password": "secret-pass",
            },
        )

        assert response.status_code == 409
        assert response.json()["type"] == "conflict_error"

    @pytest.mark.asyncio
    async def test_wrong_password_is_unauthorized(self, api_client):
        await signup(api_client, "client", "pw@example.com")

        response = await api_client.post(
            f"{API}/profiles/login",
            json={"email": "pw@example.com", "password": "not-it"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_body_is_bad_request(self, api_client):
        response = await api_client.post(
            f"{API}/profiles/create", json={"type": "client", "email": "nope"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation Error"
        assert body["type"] == "validation_error"

    @pytest.mark.asyncio
    async def test_missing_token_is_unauthorized(self, api_client):
        response = await api_client.get(f"{API}/profiles/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["type"] == "authentication_error"

    @pytest.mark.asyncio
    async def test_garbage_token_is_unauthorized(self, api_client):
        response = await api_client.get(
            f"{API}/profiles/me", headers=auth("not-a-token")
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_profile_is_not_found(self, api_client):
        created = await signup(api_client, "client", "lookup@example.com")

        response = await api_client.get(
            f"{API}/profiles/{uuid4()}", headers=auth(created["access_token"])
        )

        assert response.status_code == 404
        assert response.json()["type"] == "not_found"


class TestJobPaymentFlow:
    @pytest.mark.asyncio
    async def test_full_payment_flow(self, api_client):
        owner, worker, contract, job = await contract_with_payable_job(
            api_client, "60.00"
        )
        client_headers = auth(owner["access_token"])

        details = await api_client.get(
            f"{API}/contracts/{contract['id']}", headers=client_headers
        )
        assert details.json()["status"] == "in_progress"

        unpaid = await api_client.get(f"{API}/jobs/unpaid", headers=client_headers)
        assert [item["id"] for item in unpaid.json()] == [job["id"]]

        response = await api_client.post(
            f"{API}/jobs/{job['id']}/pay", headers=client_headers
        )
        assert response.status_code == 200, response.text
        payment = response.json()
        assert payment["job"]["paid"] is True
        assert Decimal(str(payment["amount"])) == Decimal("60")
        assert Decimal(str(payment["client_balance"])) == Decimal("40")
        assert Decimal(str(payment["contractor_balance"])) == Decimal("160")

        unpaid = await api_client.get(f"{API}/jobs/unpaid", headers=client_headers)
        assert unpaid.json() == []

        ledger = await api_client.get(
            f"{API}/balances/{owner['profile']['id']}/ledger", headers=client_headers
        )
        entries = ledger.json()["items"]
        assert len(entries) == 1
        assert entries[0]["entry_type"] == "job_payment"
        assert entries[0]["debit_profile_id"] == owner["profile"]["id"]
        assert entries[0]["credit_profile_id"] == worker["profile"]["id"]

    @pytest.mark.asyncio
    async def test_second_payment_conflicts(self, api_client):
        owner, _, _, job = await contract_with_payable_job(api_client, "10.00")
        headers = auth(owner["access_token"])

        first = await api_client.post(f"{API}/jobs/{job['id']}/pay", headers=headers)
        second = await api_client.post(f"{API}/jobs/{job['id']}/pay", headers=headers)

        assert first.status_code == 200
        assert second.status_code == 409
        assert second.json()["type"] == "conflict_error"

        me = await api_client.get(f"{API}/profiles/me", headers=headers)
        assert Decimal(str(me.json()["balance"])) == Decimal("90")

    @pytest.mark.asyncio
    async def test_insufficient_balance_conflicts(self, api_client):
        owner, _, _, job = await contract_with_payable_job(api_client, "150.00")
        headers = auth(owner["access_token"])

        response = await api_client.post(f"{API}/jobs/{job['id']}/pay", headers=headers)

        assert response.status_code == 409
        me = await api_client.get(f"{API}/profiles/me", headers=headers)
        assert Decimal(str(me.json()["balance"])) == Decimal("100")

    @pytest.mark.asyncio
    async def test_contractor_cannot_pay(self, api_client):
        _, worker, _, job = await contract_with_payable_job(api_client, "10.00")

        response = await api_client.post(
            f"{API}/jobs/{job['id']}/pay", headers=auth(worker["access_token"])
        )

        assert response.status_code == 403
        assert response.json()["type"] == "authorization_error"

    @pytest.mark.asyncio
    async def test_contractor_cannot_create_jobs(self, api_client):
        _, worker, contract, _ = await contract_with_payable_job(api_client, "10.00")

        response = await api_client.post(
            f"{API}/jobs/create",
            json={"contract_id": contract["id"], "title": "Nope", "price": "1.00"},
            headers=auth(worker["access_token"]),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_terminated_contract_rejects_jobs(self, api_client):
        owner, _, contract, _ = await contract_with_payable_job(api_client, "10.00")
        headers = auth(owner["access_token"])

        response = await api_client.put(
            f"{API}/contracts/terminate/{contract['id']}", headers=headers
        )
        assert response.json()["status"] == "terminated"

        response = await api_client.post(
            f"{API}/jobs/create",
            json={"contract_id": contract["id"], "title": "Late", "price": "1.00"},
            headers=headers,
        )
        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_unknown_job_is_not_found(self, api_client):
        owner = await signup(api_client, "client", "ghost@example.com")

        response = await api_client.post(
            f"{API}/jobs/{uuid4()}/pay", headers=auth(owner["access_token"])
        )

        assert response.status_code == 404


class TestDepositApi:
    @pytest.mark.asyncio
    async def test_deposit_capped_by_outstanding_work(self, api_client):
        owner, _, _, _ = await contract_with_payable_job(api_client, "400.00")
        headers = auth(owner["access_token"])
        url = f"{API}/balances/deposit/{owner['profile']['id']}"

        rejected = await api_client.post(url, json={"amount": "100.01"}, headers=headers)
        assert rejected.status_code == 400

        accepted = await api_client.post(url, json={"amount": "100.00"}, headers=headers)
        assert accepted.status_code == 200, accepted.text
        body = accepted.json()
        assert Decimal(str(body["balance"])) == Decimal("200")
        assert Decimal(str(body["max_deposit"])) == Decimal("100")

    @pytest.mark.asyncio
    async def test_deposit_into_someone_else_is_forbidden(self, api_client):
        owner, _, _, _ = await contract_with_payable_job(api_client, "400.00")
        other = await signup(api_client, "client", "other@example.com")

        response = await api_client.post(
            f"{API}/balances/deposit/{owner['profile']['id']}",
            json={"amount": "1.00"},
            headers=auth(other["access_token"]),
        )

        assert response.status_code == 403


class TestAdminApi:
    @pytest.mark.asyncio
    async def test_reports_after_payment(self, api_client):
        owner, worker, _, job = await contract_with_payable_job(api_client, "75.00")
        await api_client.post(
            f"{API}/jobs/{job['id']}/pay", headers=auth(owner["access_token"])
        )

        profession = await api_client.get(
            f"{API}/admin/best-profession", params=RANGE, headers=admin_headers()
        )
        clients = await api_client.get(
            f"{API}/admin/best-clients", params=RANGE, headers=admin_headers()
        )

        assert profession.status_code == 200
        assert profession.json()["profession"] == "Programmer"
        assert profession.json()["contractor_id"] == worker["profile"]["id"]
        assert Decimal(str(profession.json()["total_earned"])) == Decimal("75")

        assert clients.status_code == 200
        assert [item["id"] for item in clients.json()] == [owner["profile"]["id"]]
        assert clients.json()[0]["full_name"] == "Test Client"

    @pytest.mark.asyncio
    async def test_empty_reports(self, api_client):
        profession = await api_client.get(
            f"{API}/admin/best-profession", params=RANGE, headers=admin_headers()
        )
        clients = await api_client.get(
            f"{API}/admin/best-clients", params=RANGE, headers=admin_headers()
        )

        assert profession.status_code == 404
        assert clients.status_code == 200
        assert clients.json() == []

    @pytest.mark.asyncio
    async def test_inverted_range_is_bad_request(self, api_client):
        response = await api_client.get(
            f"{API}/admin/best-clients",
            params={"start": RANGE["end"], "end": RANGE["start"]},
            headers=admin_headers(),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_reports_require_admin(self, api_client):
        owner = await signup(api_client, "client", "nosy@example.com")

        response = await api_client.get(
            f"{API}/admin/best-clients",
            params=RANGE,
            headers=auth(owner["access_token"]),
        )

        assert response.status_code == 403


class TestHealthApi:
    @pytest.mark.asyncio
    async def test_liveness(self, api_client):
        response = await api_client.get(f"{API}/health/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_readiness(self, api_client):
        response = await api_client.get(f"{API}/health/ready")

        assert response.status_code == 200
        assert response.json()["services"]["database"]["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_metrics(self, api_client):
        response = await api_client.get(f"{API}/health/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
