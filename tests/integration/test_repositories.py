"""Integration tests for repository layer."""
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from budgethero.models.admin_category import AdminCategory
from budgethero.models.plaid_category_map import PlaidCategoryMap
from budgethero.repositories.admin_category import AdminCategoryRepository
from budgethero.repositories.plaid_category_map import PlaidCategoryMapRepository


def _category(name: str, slug: str | None = None, **kwargs) -> AdminCategory:
    kwargs.setdefault("ledger_type", "EXPENSE")
    kwargs.setdefault("color", "#000000")
    return AdminCategory(name=name, slug=slug, **kwargs)


def _mapping(detailed: str, primary: str, slug: str, order: int) -> PlaidCategoryMap:
    return PlaidCategoryMap(
        plaid_primary=primary,
        plaid_detailed=detailed,
        admin_category_slug=slug,
        ledger_type="EXPENSE",
        source_order=order,
    )


class TestAdminCategoryRepository:
    """Test AdminCategoryRepository lookups."""

    @pytest.mark.asyncio
    async def test_create_applies_defaults(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        category = await repo.create(_category("Pets", "pets"))

        assert category.id is not None
        assert category.budget_type == "FLEXIBLE"
        assert category.is_active is True
        assert category.sort_order == 0
        assert await repo.get_by_id(category.id) is category

    @pytest.mark.asyncio
    async def test_get_by_slug(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        await repo.create(_category("Pets", "pets"))

        assert (await repo.get_by_slug("pets")).name == "Pets"
        assert await repo.get_by_slug("missing") is None

    @pytest.mark.asyncio
    async def test_get_by_slug_or_name_prefers_slug(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        await repo.create(_category("Pets (old)", "pets"))
        await repo.create(_category("Pets"))

        found = await repo.get_by_slug_or_name("pets", "Pets")
        assert found.name == "Pets (old)"

    @pytest.mark.asyncio
    async def test_get_by_slug_or_name_finds_slugless_row(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        await repo.create(_category("Pets"))

        found = await repo.get_by_slug_or_name("pets", "Pets")
        assert found is not None
        assert found.slug is None

    @pytest.mark.asyncio
    async def test_get_by_slug_or_name_ignores_other_slugged_row(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        await repo.create(_category("Pets", "animals"))

        assert await repo.get_by_slug_or_name("pets", "Pets") is None

    @pytest.mark.asyncio
    async def test_get_by_slug_or_name_without_slug(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        await repo.create(_category("Pets", "animals"))

        assert (await repo.get_by_slug_or_name(None, "Pets")).slug == "animals"

    @pytest.mark.asyncio
    async def test_get_without_slug(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        await repo.create(_category("Pets", "pets"))
        await repo.create(_category("Legacy"))

        assert [c.name for c in await repo.get_without_slug()] == ["Legacy"]

    @pytest.mark.asyncio
    async def test_get_active_ordering(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        await repo.create(_category("Zoo", "zoo", sort_order=1))
        await repo.create(_category("Bar", "bar", sort_order=2))
        await repo.create(_category("Alpha", "alpha", sort_order=1))
        await repo.create(_category("Hidden", "hidden", is_active=False))

        assert [c.name for c in await repo.get_active()] == ["Alpha", "Zoo", "Bar"]

    @pytest.mark.asyncio
    async def test_get_all_pagination(self, db_session: AsyncSession):
        repo = AdminCategoryRepository(db_session)
        for index in range(3):
            await repo.create(_category(f"Category {index}", f"category-{index}"))

        assert len(await repo.get_all()) == 3
        assert len(await repo.get_all(skip=1, limit=1)) == 1
        assert await repo.count() == 3


class TestPlaidCategoryMapRepository:
    """Test PlaidCategoryMapRepository bulk operations and lookups."""

    @pytest.mark.asyncio
    async def test_bulk_create_and_delete_all(self, db_session: AsyncSession):
        repo = PlaidCategoryMapRepository(db_session)
        created = await repo.bulk_create(
            [
                _mapping("PETS_VET", "PETS", "pets", 0),
                _mapping("PETS_FOOD", "PETS", "pets", 1),
            ]
        )
        assert created == 2
        assert await repo.count() == 2

        assert await repo.delete_all() == 2
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_lookups_follow_source_order(self, db_session: AsyncSession):
        repo = PlaidCategoryMapRepository(db_session)
        await repo.bulk_create(
            [
                _mapping("PETS_FOOD", "PETS", "shopping", 5),
                _mapping("PETS_VET", "PETS", "pets", 2),
            ]
        )

        assert (await repo.get_first_by_primary("PETS")).plaid_detailed == "PETS_VET"
        assert (await repo.get_by_detailed("PETS_FOOD")).admin_category_slug == "shopping"
        assert await repo.get_by_detailed("MISSING") is None
        assert await repo.get_first_by_primary("MISSING") is None

    @pytest.mark.asyncio
    async def test_default_confidence(self, db_session: AsyncSession):
        repo = PlaidCategoryMapRepository(db_session)
        await repo.bulk_create([_mapping("PETS_VET", "PETS", "pets", 0)])

        assert (await repo.get_by_detailed("PETS_VET")).confidence == pytest.approx(0.95)
