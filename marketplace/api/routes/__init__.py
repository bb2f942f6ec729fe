"""
API routes package.
"""

from .admin import router as admin_router
from .balances import router as balances_router
from .contracts import router as contracts_router
from .health import router as health_router
from .jobs import router as jobs_router
from .profiles import router as profiles_router

__all__ = [
    "admin_router",
    "balances_router",
    "contracts_router",
    "health_router",
    "jobs_router",
    "profiles_router",
]
