"""Admin category repository."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from budgethero.models.admin_category import AdminCategory
from budgethero.repositories.base import BaseRepository


class AdminCategoryRepository(BaseRepository[AdminCategory]):
    """Repository for AdminCategory with slug/name lookups."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, AdminCategory)

    async def get_by_slug(self, slug: str) -> AdminCategory | None:
        """Get a category by its slug."""
        result = await self.db.execute(select(AdminCategory).where(AdminCategory.slug == slug))
        return result.scalar_one_or_none()

    async def get_by_slug_or_name(self, slug: str | None, name: str) -> AdminCategory | None:
        """Find the row an upsert should update.

        Matches by slug when one is given, otherwise by name. A row created
        before slugs existed is still found through its name.
        """
        if slug:
            existing = await self.get_by_slug(slug)
            if existing is not None:
                return existing
            condition = AdminCategory.slug.is_(None) & (AdminCategory.name == name)
        else:
            condition = AdminCategory.name == name
        result = await self.db.execute(
            select(AdminCategory).where(condition).order_by(AdminCategory.created_at).limit(1)
        )
        return result.scalar_one_or_none()

    async def get_without_slug(self) -> list[AdminCategory]:
        """Get categories that still have no slug."""
        result = await self.db.execute(select(AdminCategory).where(AdminCategory.slug.is_(None)))
        return list(result.scalars().all())

    async def get_active(self) -> list[AdminCategory]:
        """Get active categories ordered for display."""
        result = await self.db.execute(
            select(AdminCategory)
            .where(AdminCategory.is_active.is_(True))
            .order_by(AdminCategory.sort_order, AdminCategory.name)
        )
        return list(result.scalars().all())
