"""Categorization service for stored transactions.

Transactions imported from Plaid often already carry a personal-finance
category code. Those are resolved through the seeded ``plaid_category_map``
table (detailed code first, then primary code). Everything else goes through
the rule-based text categorizer.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from budgethero.categorization.categorizer import TransactionCategorizer, get_categorizer
from budgethero.models.admin_category import AdminCategory
from budgethero.models.plaid_category_map import PlaidCategoryMap
from budgethero.repositories.admin_category import AdminCategoryRepository
from budgethero.repositories.plaid_category_map import PlaidCategoryMapRepository
from budgethero.schemas.categorization import CategoryMatch, TransactionInput

logger = logging.getLogger(__name__)

PRIMARY_MATCH_FACTOR = 0.9

PLAID_CONFIDENCE_SCORES = {
    "VERY_HIGH": 0.95,
    "HIGH": 0.85,
    "MEDIUM": 0.75,
    "LOW": 0.60,
}
DEFAULT_PLAID_CONFIDENCE = 0.80


def plaid_confidence_score(level: str | None) -> float:
    """Numeric score for a Plaid confidence level string."""
    return PLAID_CONFIDENCE_SCORES.get((level or "").upper(), DEFAULT_PLAID_CONFIDENCE)


class CategorizationService:
    """Resolves categories for transactions using Plaid codes, then text rules."""

    def __init__(self, db: AsyncSession, categorizer: TransactionCategorizer | None = None):
        self.db = db
        self.categorizer = categorizer or get_categorizer()
        self.category_repo = AdminCategoryRepository(db)
        self.mapping_repo = PlaidCategoryMapRepository(db)
        self._categories_by_slug: dict[str, AdminCategory] | None = None
        self._categories_by_name: dict[str, AdminCategory] | None = None

    async def _load_categories(self) -> None:
        categories = await self.category_repo.get_active()
        self._categories_by_slug = {c.slug: c for c in categories if c.slug}
        self._categories_by_name = {c.name: c for c in categories}
        logger.debug("Loaded active categories", extra={"count": len(categories)})

    async def refresh(self) -> None:
        """Reload cached categories, e.g. after seeding or admin edits."""
        await self._load_categories()

    async def categorize_transaction(self, transaction: TransactionInput) -> CategoryMatch:
        """Resolve the category for one transaction.

        Args:
            transaction: Transaction text, signed amount and optional Plaid codes

        Returns:
            CategoryMatch with the source that decided it
        """
        if self._categories_by_slug is None:
            await self._load_categories()

        if transaction.plaid_detailed:
            mapping = await self.mapping_repo.get_by_detailed(transaction.plaid_detailed)
            match = self._from_mapping(
                mapping,
                source="plaid_detailed",
                confidence_cap=(
                    plaid_confidence_score(transaction.plaid_confidence)
                    if transaction.plaid_confidence
                    else None
                ),
            )
            if match is not None:
                return match

        if transaction.plaid_primary:
            mapping = await self.mapping_repo.get_first_by_primary(transaction.plaid_primary)
            match = self._from_mapping(mapping, source="plaid_primary", factor=PRIMARY_MATCH_FACTOR)
            if match is not None:
                return match

        return self._from_rules(transaction)

    def _from_mapping(
        self,
        mapping: PlaidCategoryMap | None,
        source: str,
        factor: float = 1.0,
        confidence_cap: float | None = None,
    ) -> CategoryMatch | None:
        if mapping is None:
            return None
        category = self._categories_by_slug.get(mapping.admin_category_slug)
        if category is None:
            logger.debug(
                "Plaid mapping points at a missing or inactive category",
                extra={"slug": mapping.admin_category_slug, "plaid_detailed": mapping.plaid_detailed},
            )
            return None

        confidence = float(mapping.confidence) * factor
        if confidence_cap is not None:
            confidence = min(confidence, confidence_cap)
        return CategoryMatch(
            category_name=category.name,
            category_slug=category.slug,
            category_id=str(category.id),
            confidence=confidence,
            source=source,
            ledger_type=category.ledger_type,
            budget_type=category.budget_type,
        )

    def _from_rules(self, transaction: TransactionInput) -> CategoryMatch:
        result = self.categorizer.categorize(
            transaction.description, transaction.amount, transaction.merchant
        )
        category = self._categories_by_name.get(result.category)
        return CategoryMatch(
            category_name=result.category,
            category_slug=category.slug if category else None,
            category_id=str(category.id) if category else None,
            confidence=result.confidence,
            source="rules",
            ledger_type=result.type.value,
            budget_type=category.budget_type if category else None,
        )
