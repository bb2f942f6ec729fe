"""
Prometheus metrics for money movements and contract transitions.
"""

from decimal import Decimal

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)

registry = CollectorRegistry()


def get_registry() -> CollectorRegistry:
    """Get the application registry."""
    return registry


JOB_PAYMENTS = Counter(
    "job_payments_total",
    "Job payment attempts by outcome",
    ["outcome"],
    registry=registry,
)

DEPOSITS = Counter(
    "deposits_total",
    "Deposit attempts by outcome",
    ["outcome"],
    registry=registry,
)

FUNDS_TRANSFERRED = Counter(
    "funds_transferred_total",
    "Sum of amounts moved from clients to contractors",
    registry=registry,
)

CONTRACT_TRANSITIONS = Counter(
    "contract_transitions_total",
    "Contract status transitions by target status",
    ["status"],
    registry=registry,
)


def record_payment(outcome: str):
    """Record a job payment attempt."""
    JOB_PAYMENTS.labels(outcome=outcome).inc()


def record_deposit(outcome: str):
    """Record a deposit attempt."""
    DEPOSITS.labels(outcome=outcome).inc()


def record_funds_transferred(amount: Decimal):
    """Add a settled payment amount to the transfer total."""
    FUNDS_TRANSFERRED.inc(float(amount))


def record_contract_transition(status: str):
    """Record a contract entering a status."""
    CONTRACT_TRANSITIONS.labels(status=status).inc()


def get_metrics():
    """Get all metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type():
    """Get the content type for metrics."""
    return CONTENT_TYPE_LATEST
