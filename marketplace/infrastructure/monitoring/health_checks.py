"""
Health check implementations for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.config.database import get_database_health
from marketplace.config.logging import get_logger

logger = get_logger(__name__)


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session
        self.checks = {
            "database": self._check_database,
        }

    async def run_health_checks(self) -> Dict[str, Any]:
        """Run all health checks."""
        results = {}

        for check_name, check_func in self.checks.items():
            results[check_name] = await check_func()

        return results

    async def _check_database(self) -> Dict[str, Any]:
        """Check database health."""
        return await get_database_health(self.db_session)

    async def check_readiness(self) -> Dict[str, Any]:
        """Check if the service is ready to receive traffic."""
        services = await self.run_health_checks()
        ready = all(result.get("status") == "healthy" for result in services.values())

        if not ready:
            logger.warning("Readiness check failed", services=services)

        return {
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": services,
        }
