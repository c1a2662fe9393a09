"""Plaid category map repository."""
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from budgethero.models.plaid_category_map import PlaidCategoryMap
from budgethero.repositories.base import BaseRepository


class PlaidCategoryMapRepository(BaseRepository[PlaidCategoryMap]):
    """Repository for the Plaid code -> category slug table."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, PlaidCategoryMap)

    async def delete_all(self) -> int:
        """Delete every mapping row. Returns the number of rows removed."""
        result = await self.db.execute(delete(PlaidCategoryMap))
        return result.rowcount or 0

    async def bulk_create(self, mappings: list[PlaidCategoryMap]) -> int:
        """Stage many mapping rows in the current transaction."""
        self.db.add_all(mappings)
        await self.db.flush()
        return len(mappings)

    async def get_by_detailed(self, plaid_detailed: str) -> PlaidCategoryMap | None:
        """Get the mapping for a Plaid detailed code."""
        result = await self.db.execute(
            select(PlaidCategoryMap)
            .where(PlaidCategoryMap.plaid_detailed == plaid_detailed)
            .order_by(PlaidCategoryMap.source_order)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_first_by_primary(self, plaid_primary: str) -> PlaidCategoryMap | None:
        """Get the earliest mapping sharing a Plaid primary code."""
        result = await self.db.execute(
            select(PlaidCategoryMap)
            .where(PlaidCategoryMap.plaid_primary == plaid_primary)
            .order_by(PlaidCategoryMap.source_order)
            .limit(1)
        )
        return result.scalar_one_or_none()
