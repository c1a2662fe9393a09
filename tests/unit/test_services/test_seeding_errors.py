"""Unit tests for seeding failure handling."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from budgethero.core.exceptions import SeedingError
from budgethero.services.seeding import CategorySeeder


def _db_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("connection lost"))


@pytest.mark.asyncio
async def test_database_error_rolls_back_and_raises(mock_db):
    mock_db.execute.side_effect = _db_error()

    with pytest.raises(SeedingError) as exc_info:
        await CategorySeeder(mock_db).run()

    assert exc_info.value.error_code == "SEED_001"
    assert exc_info.value.details == {"error_type": "OperationalError"}
    assert isinstance(exc_info.value.__cause__, OperationalError)
    mock_db.rollback.assert_awaited_once()
    mock_db.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_mapping_replace_error_uses_its_own_code(mock_db):
    seeder = CategorySeeder(mock_db)
    seeder.upsert_categories = AsyncMock()
    seeder.mapping_repo.delete_all = AsyncMock(side_effect=_db_error())

    with pytest.raises(SeedingError) as exc_info:
        await seeder.run()

    assert exc_info.value.error_code == "SEED_002"
    mock_db.rollback.assert_awaited_once()
    mock_db.commit.assert_not_awaited()


def test_explicit_mappings_and_confidence(mock_db):
    seeder = CategorySeeder(mock_db, mappings=[], mapping_confidence=0.5)
    assert seeder.mappings == []
    assert seeder.mapping_confidence == 0.5


def test_default_mappings_come_from_built_in_dump(mock_db):
    seeder = CategorySeeder(mock_db)
    assert len(seeder.mappings) == 88
    assert seeder.mapping_confidence == 0.95
