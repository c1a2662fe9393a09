"""Plaid category mapping parser.

Turns the four-lines-per-record dump in ``data.py`` into structured mapping
records and a deduplicated category list. This is offline data preparation:
the result feeds the seeding step, not the text categorizer.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from functools import lru_cache

from budgethero.core.exceptions import MappingParseError
from budgethero.plaid.data import RAW_PLAID_MAPPING
from budgethero.schemas.plaid import (
    CategoryStub,
    MappingSummary,
    PlaidMappingParseResult,
    PlaidMappingRecord,
)

logger = logging.getLogger(__name__)

FIELDS_PER_RECORD = 4
HEADER_LINES = 4

# Categories whose source ledger says "Expenses" but which only move money.
TRANSFER_CATEGORIES = frozenset({"Transfers", "Credit Card Payment", "Loan Payments"})

# Source rows filed under "Food & Drink" that belong to Groceries.
DETAILED_CATEGORY_OVERRIDES = {"FOOD_AND_DRINK_GROCERIES": "Groceries"}

# Known trailing-space variants in the source dump.
CATEGORY_NAME_FIXES = {
    "Family Care ": "Family Care",
    "Shopping ": "Shopping",
    "General Services ": "General Services",
    "Travel & Vacation ": "Travel & Vacation",
}

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9\-]")
_HYPHENS = re.compile(r"-+")


def name_to_slug(name: str) -> str:
    """Derive a URL/key-safe slug from a category display name.

    >>> name_to_slug("Auto & Transport")
    'auto-and-transport'
    """
    slug = _WHITESPACE.sub("-", name.lower().strip())
    slug = slug.replace("&", "and")
    slug = _NON_SLUG.sub("", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def ledger_type_for(ledger: str, category: str) -> str:
    """Map a source ledger bucket and category name to INCOME/EXPENSE/TRANSFER."""
    if ledger == "Income":
        return "INCOME"
    if category in TRANSFER_CATEGORIES:
        return "TRANSFER"
    return "EXPENSE"


def clean_category_name(raw_category: str, plaid_detailed: str) -> str:
    """Apply the known source-data corrections to a category name."""
    category = DETAILED_CATEGORY_OVERRIDES.get(plaid_detailed, raw_category)
    category = CATEGORY_NAME_FIXES.get(category, category)
    return category.strip()


def parse_plaid_mapping_blob(raw_text: str) -> PlaidMappingParseResult:
    """Parse the mapping dump into records and unique categories.

    Args:
        raw_text: Dump with four header lines, then four lines per record

    Returns:
        PlaidMappingParseResult with every complete record in source order and
        one CategoryStub per slug (last record for a slug wins)

    Raises:
        MappingParseError: If nothing follows the header lines
    """
    lines = raw_text.strip().split("\n")
    if len(lines) <= HEADER_LINES:
        raise MappingParseError("MAP_001", details={"line_count": len(lines)})

    mappings: list[PlaidMappingRecord] = []
    for start in range(HEADER_LINES, len(lines), FIELDS_PER_RECORD):
        group = lines[start : start + FIELDS_PER_RECORD]
        if len(group) < FIELDS_PER_RECORD:
            logger.debug("Skipping truncated mapping record at line %d", start + 1)
            continue

        raw_ledger, raw_category, raw_primary, raw_detailed = group
        ledger, plaid_primary, plaid_detailed = raw_ledger.strip(), raw_primary.strip(), raw_detailed.strip()
        if not (ledger and raw_category.strip() and plaid_primary and plaid_detailed):
            logger.debug("Skipping incomplete mapping record at line %d", start + 1)
            continue

        category = clean_category_name(raw_category, plaid_detailed)
        mappings.append(
            PlaidMappingRecord(
                ledger=ledger,
                budget_hero_category=category,
                plaid_primary=plaid_primary,
                plaid_detailed=plaid_detailed,
                ledger_type=ledger_type_for(ledger, category),
                slug=name_to_slug(category),
            )
        )

    return PlaidMappingParseResult(mappings=mappings, unique_categories=unique_categories(mappings))


def unique_categories(mappings: list[PlaidMappingRecord]) -> list[CategoryStub]:
    """One stub per slug, in first-seen order, holding the last record's values."""
    by_slug: dict[str, CategoryStub] = {}
    for mapping in mappings:
        by_slug[mapping.slug] = CategoryStub(
            name=mapping.budget_hero_category,
            slug=mapping.slug,
            ledger_type=mapping.ledger_type,
        )
    return list(by_slug.values())


@lru_cache
def get_plaid_mappings() -> PlaidMappingParseResult:
    """Parsed built-in mapping dump, parsed once per process."""
    result = parse_plaid_mapping_blob(RAW_PLAID_MAPPING)
    logger.info(
        "Parsed %d Plaid category mappings into %d categories",
        len(result.mappings),
        len(result.unique_categories),
    )
    return result


def validate_mappings(result: PlaidMappingParseResult | None = None) -> MappingSummary:
    """Summarize a parsed dump: totals, ledger-type breakdown and a few samples."""
    result = result or get_plaid_mappings()
    breakdown = Counter(category.ledger_type for category in result.unique_categories)
    return MappingSummary(
        total_mappings=len(result.mappings),
        unique_categories=len(result.unique_categories),
        breakdown=dict(breakdown),
        samples=result.mappings[:5],
    )
