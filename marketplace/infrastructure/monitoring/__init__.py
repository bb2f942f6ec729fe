"""
Monitoring package.
"""

from .health_checks import HealthChecker
from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_contract_transition,
    record_deposit,
    record_funds_transferred,
    record_payment,
)

__all__ = [
    "HealthChecker",
    "get_metrics",
    "get_metrics_content_type",
    "record_contract_transition",
    "record_deposit",
    "record_funds_transferred",
    "record_payment",
]
