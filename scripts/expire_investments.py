"""Flip matured investments to ``expired``.

Meant to be run hourly by an external scheduler, e.g. ``0 * * * *`` in cron.
"""
import asyncio
import logging

from tradehub.core.config import get_settings
from tradehub.core.container import ApplicationContainer
from tradehub.core.logging import configure_logging
from tradehub.infrastructure.database.session import session_scope
from tradehub.modules.investments import InvestmentService

logger = logging.getLogger("tradehub.scripts.expire_investments")


async def expire_investments() -> int:
    container = ApplicationContainer.from_settings(get_settings())
    updated = 0
    try:
        async for db in session_scope(container.session_factory):
            updated = await InvestmentService.with_session(db).expire_due()
    finally:
        await container.dispose()
    return updated


if __name__ == "__main__":
    configure_logging(get_settings())
    updated = asyncio.run(expire_investments())
    logger.info("Sweep finished, %d investment(s) expired", updated)
