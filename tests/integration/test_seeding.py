"""Integration tests for category seeding against a real database."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from budgethero.core.exceptions import SeedingError
from budgethero.models.admin_category import AdminCategory
from budgethero.models.plaid_category_map import PlaidCategoryMap
from budgethero.repositories.admin_category import AdminCategoryRepository
from budgethero.repositories.plaid_category_map import PlaidCategoryMapRepository
from budgethero.services.seeding import CategorySeeder, seed_comprehensive_categories
from budgethero.services.standard_categories import STANDARDIZED_CATEGORIES


@pytest.mark.asyncio
async def test_seed_empty_database(db_session: AsyncSession):
    result = await seed_comprehensive_categories(db_session)

    assert result.admin_categories == 30
    assert result.plaid_mappings == 88
    assert result.budget_categories == 17
    assert result.transaction_categories == 13


@pytest.mark.asyncio
async def test_seeding_is_idempotent(db_session: AsyncSession):
    first = await seed_comprehensive_categories(db_session)
    second = await seed_comprehensive_categories(db_session)

    assert first == second
    assert await AdminCategoryRepository(db_session).count() == 30
    assert await PlaidCategoryMapRepository(db_session).count() == 88


@pytest.mark.asyncio
async def test_mapping_rows(db_session: AsyncSession):
    await seed_comprehensive_categories(db_session)
    repo = PlaidCategoryMapRepository(db_session)

    groceries = await repo.get_by_detailed("FOOD_AND_DRINK_GROCERIES")
    assert groceries.admin_category_slug == "groceries"
    assert groceries.ledger_type == "EXPENSE"
    assert groceries.confidence == pytest.approx(0.95)

    card = await repo.get_by_detailed("LOAN_PAYMENT_CREDIT_CARD")
    assert card.admin_category_slug == "credit-card-payment"
    assert card.ledger_type == "TRANSFER"

    first_income = await repo.get_first_by_primary("INCOME")
    assert first_income.plaid_detailed == "INCOME_WAGES"
    assert first_income.source_order == 0


@pytest.mark.asyncio
async def test_every_mapping_points_at_a_category(db_session: AsyncSession):
    await seed_comprehensive_categories(db_session)

    slugs = set((await db_session.execute(select(AdminCategory.slug))).scalars())
    targets = set((await db_session.execute(select(PlaidCategoryMap.admin_category_slug))).scalars())
    assert targets <= slugs


@pytest.mark.asyncio
async def test_existing_category_is_updated_in_place(db_session: AsyncSession):
    legacy = AdminCategory(
        name="Groceries",
        slug=None,
        ledger_type="EXPENSE",
        budget_type="FIXED",
        color="#000000",
        sort_order=999,
    )
    db_session.add(legacy)
    await db_session.commit()
    legacy_id = legacy.id

    await seed_comprehensive_categories(db_session)

    repo = AdminCategoryRepository(db_session)
    groceries = await repo.get_by_slug("groceries")
    assert groceries.id == legacy_id
    assert groceries.budget_type == "FLEXIBLE"
    assert groceries.sort_order == 90
    assert await repo.count() == 30


@pytest.mark.asyncio
async def test_custom_category_keeps_row_and_gets_slug(db_session: AsyncSession):
    db_session.add(
        AdminCategory(name="Side Hustle & Gigs", ledger_type="INCOME", color="#123456")
    )
    await db_session.commit()

    result = await seed_comprehensive_categories(db_session)

    assert result.admin_categories == 31
    custom = await AdminCategoryRepository(db_session).get_by_slug("side-hustle-and-gigs")
    assert custom is not None
    assert custom.ledger_type == "INCOME"


@pytest.mark.asyncio
async def test_mapping_failure_rolls_back_everything(db_session: AsyncSession):
    seeder = CategorySeeder(db_session)
    seeder.mapping_repo.bulk_create = AsyncMock(
        side_effect=OperationalError("INSERT", {}, Exception("disk full"))
    )

    with pytest.raises(SeedingError) as exc_info:
        await seeder.run()

    assert exc_info.value.error_code == "SEED_002"
    assert await AdminCategoryRepository(db_session).count() == 0


@pytest.mark.asyncio
async def test_mapping_confidence_override(db_session: AsyncSession):
    await CategorySeeder(db_session, mapping_confidence=0.5).run()

    mapping = await PlaidCategoryMapRepository(db_session).get_by_detailed("INCOME_WAGES")
    assert mapping.confidence == pytest.approx(0.5)


@pytest.mark.asyncio
async def test_group_counts_follow_seeded_categories(db_session: AsyncSession):
    subset = [STANDARDIZED_CATEGORIES[0], STANDARDIZED_CATEGORIES[1], STANDARDIZED_CATEGORIES[17]]

    result = await CategorySeeder(db_session, categories=subset, mappings=[]).run()

    assert result.admin_categories == 3
    assert result.plaid_mappings == 0
    assert result.budget_categories == 2
    assert result.transaction_categories == 1


@pytest.mark.asyncio
async def test_empty_category_list_reports_zero_groups(db_session: AsyncSession):
    result = await CategorySeeder(db_session, categories=[], mappings=[]).run()

    assert result.admin_categories == 0
    assert result.budget_categories == 0
    assert result.transaction_categories == 0
