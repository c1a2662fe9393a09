"""Schemas for the Plaid category mapping pipeline."""

from pydantic import BaseModel, ConfigDict, Field


class PlaidMappingRecord(BaseModel):
    """One parsed row of the Plaid-to-internal category mapping dump."""

    model_config = ConfigDict(frozen=True)

    ledger: str = Field(..., description="Source ledger bucket ('Income' or 'Expenses')")
    budget_hero_category: str = Field(..., description="Internal category display name (cleaned)")
    plaid_primary: str
    plaid_detailed: str
    ledger_type: str = Field(..., description="INCOME, EXPENSE or TRANSFER")
    slug: str


class CategoryStub(BaseModel):
    """Unique category derived from the mapping dump."""

    name: str
    slug: str
    ledger_type: str


class PlaidMappingParseResult(BaseModel):
    """Parsed mapping records plus the deduplicated category list."""

    mappings: list[PlaidMappingRecord]
    unique_categories: list[CategoryStub]


class MappingSummary(BaseModel):
    """Validation summary of a parsed mapping dump."""

    total_mappings: int
    unique_categories: int
    breakdown: dict[str, int]
    samples: list[PlaidMappingRecord] = Field(default_factory=list)


class SeedResult(BaseModel):
    """Row counts reported after seeding."""

    admin_categories: int
    plaid_mappings: int
    budget_categories: int
    transaction_categories: int
