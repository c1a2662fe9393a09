"""Seed the admin category table and rebuild the Plaid category map.

Steps:
1. Upsert the standardized categories (by slug, or name for legacy rows)
2. Delete every Plaid mapping row
3. Insert one mapping row per parsed mapping record
4. Backfill slugs for categories that have none
5. Report row counts

Categories are never deleted, so re-running leaves that table unchanged. The
mapping table is replaced wholesale on every run, which means two runs must
not overlap: invoke this from a single process (migration step or admin task).
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from budgethero.config import settings
from budgethero.core.exceptions import SeedingError
from budgethero.models.admin_category import AdminCategory
from budgethero.models.plaid_category_map import PlaidCategoryMap
from budgethero.plaid.mapping import get_plaid_mappings, name_to_slug
from budgethero.repositories.admin_category import AdminCategoryRepository
from budgethero.repositories.plaid_category_map import PlaidCategoryMapRepository
from budgethero.schemas.plaid import PlaidMappingRecord, SeedResult
from budgethero.services.standard_categories import (
    STANDARDIZED_CATEGORIES,
    budget_categories,
    transaction_categories,
)

logger = logging.getLogger(__name__)


class CategorySeeder:
    """Runs the seeding steps against one database session."""

    def __init__(
        self,
        db: AsyncSession,
        categories: Sequence[Mapping[str, Any]] = STANDARDIZED_CATEGORIES,
        mappings: list[PlaidMappingRecord] | None = None,
        mapping_confidence: float | None = None,
    ):
        self.db = db
        self.categories = categories
        self.mappings = mappings if mappings is not None else get_plaid_mappings().mappings
        self.mapping_confidence = (
            mapping_confidence if mapping_confidence is not None else settings.plaid_mapping_confidence
        )
        self.category_repo = AdminCategoryRepository(db)
        self.mapping_repo = PlaidCategoryMapRepository(db)

    async def run(self) -> SeedResult:
        """Run every step and commit once at the end.

        Raises:
            SeedingError: If any database statement fails; the session is rolled back
        """
        logger.info("Seeding categories and Plaid category mappings")
        try:
            await self.upsert_categories()
            await self.replace_mappings()
            await self.backfill_slugs()
            result = SeedResult(
                admin_categories=await self.category_repo.count(),
                plaid_mappings=await self.mapping_repo.count(),
                budget_categories=len(budget_categories(self.categories)),
                transaction_categories=len(transaction_categories(self.categories)),
            )
            await self.db.commit()
        except SeedingError as exc:
            await self.db.rollback()
            logger.error("Category seeding failed", extra={"error_code": exc.error_code})
            raise
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error(
                "Category seeding failed: %s",
                type(exc).__name__,
                extra={"error_code": "SEED_001"},
            )
            raise SeedingError("SEED_001", details={"error_type": type(exc).__name__}) from exc

        logger.info(
            "Seeded %d admin categories (%d budget, %d transaction) and %d Plaid mappings",
            result.admin_categories,
            result.budget_categories,
            result.transaction_categories,
            result.plaid_mappings,
        )
        return result

    async def upsert_categories(self) -> None:
        """Insert or update each standardized category in place."""
        inserted = updated = 0
        for category in self.categories:
            existing = await self.category_repo.get_by_slug_or_name(category.get("slug"), category["name"])
            if existing is not None:
                existing.name = category["name"]
                existing.slug = category.get("slug")
                existing.ledger_type = category["ledger_type"]
                existing.budget_type = category["budget_type"]
                existing.color = category["color"]
                existing.sort_order = category["sort_order"]
                updated += 1
            else:
                await self.category_repo.add(
                    AdminCategory(
                        name=category["name"],
                        slug=category.get("slug"),
                        ledger_type=category["ledger_type"],
                        budget_type=category["budget_type"],
                        color=category["color"],
                        sort_order=category["sort_order"],
                        is_active=True,
                    )
                )
                inserted += 1
        await self.db.flush()
        logger.info("Upserted standardized categories: %d inserted, %d updated", inserted, updated)

    async def replace_mappings(self) -> None:
        """Clear the Plaid mapping table and insert every parsed record."""
        rows = [
            PlaidCategoryMap(
                plaid_primary=mapping.plaid_primary,
                plaid_detailed=mapping.plaid_detailed,
                admin_category_slug=mapping.slug,
                ledger_type=mapping.ledger_type,
                confidence=self.mapping_confidence,
                source_order=position,
            )
            for position, mapping in enumerate(self.mappings)
        ]
        try:
            removed = await self.mapping_repo.delete_all()
            logger.info("Cleared %d existing Plaid mappings", removed, extra={"count": removed})
            created = await self.mapping_repo.bulk_create(rows)
        except SQLAlchemyError as exc:
            raise SeedingError("SEED_002", details={"error_type": type(exc).__name__}) from exc
        logger.info("Created %d Plaid category mappings", created, extra={"count": created})

    async def backfill_slugs(self) -> None:
        """Give every slugless category a slug derived from its name."""
        missing = await self.category_repo.get_without_slug()
        for category in missing:
            category.slug = name_to_slug(category.name)
            logger.debug("Backfilled slug", extra={"slug": category.slug})
        await self.db.flush()
        if missing:
            logger.info("Backfilled %d category slugs", len(missing), extra={"count": len(missing)})


async def seed_comprehensive_categories(db: AsyncSession) -> SeedResult:
    """Seed standardized categories and rebuild the Plaid category map.

    Args:
        db: Database session; committed on success, rolled back on failure

    Returns:
        SeedResult with table row counts and standardized category group sizes

    Raises:
        SeedingError: If any database step fails
    """
    return await CategorySeeder(db).run()
