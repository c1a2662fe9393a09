"""Seed standardized categories and rebuild the Plaid category map.

Run once per deployment (e.g. as a migration step). The Plaid mapping table is
deleted and reinserted, so never run two copies of this script at once.
"""

import asyncio
import logging
import sys

from budgethero.config import settings
from budgethero.core.errors import get_error
from budgethero.core.exceptions import SeedingError
from budgethero.core.logging import setup_logging
from budgethero.db.session import AsyncSessionLocal, async_engine
from budgethero.services.seeding import seed_comprehensive_categories

logger = logging.getLogger("seed_categories")


async def main() -> int:
    try:
        async with AsyncSessionLocal() as session:
            result = await seed_comprehensive_categories(session)
    except SeedingError as exc:
        error = get_error(exc.error_code)
        logger.error("%s: %s", exc.error_code, error["message"])
        print(f"\n❌ {error['user_message']} {error['suggestion']}")
        return 1
    finally:
        await async_engine.dispose()

    print("\n✅ Categorization tables seeded successfully!")
    print(f"   Admin categories:       {result.admin_categories}")
    print(f"   Budget categories:      {result.budget_categories}")
    print(f"   Transaction categories: {result.transaction_categories}")
    print(f"   Plaid mappings:         {result.plaid_mappings}")
    return 0


if __name__ == "__main__":
    setup_logging(settings.log_level, json_output=settings.log_json)
    sys.exit(asyncio.run(main()))
