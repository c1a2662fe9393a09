"""Rule-based transaction categorizer.

Categorization happens in two passes over ``description + merchant``:

1. Merchant keyword table: first keyword hit in table order wins outright with
   a fixed confidence.
2. Taxonomy rules: every rule is scored, then the highest priority wins with
   confidence as the tie-breaker.

Anything left over goes through an amount-based default ladder. Amounts are
signed: positive means money came into the account.

The categorizer holds only immutable tables built at construction time, so one
instance can be shared freely across threads and tasks.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from budgethero.categorization.merchants import MERCHANT_KEYWORDS, merchant_category_type
from budgethero.categorization.schemas import ClassificationResult
from budgethero.categorization.taxonomy import (
    CATEGORY_TAXONOMY,
    CategoryRule,
    CategoryTaxonomyEntry,
    TransactionType,
)
from budgethero.config import settings

MERCHANT_MATCH_CONFIDENCE = 0.9
STRONG_MATCH_BOOST = 1.5
STRONG_KEYWORD_MIN_LENGTH = 4

# Default ladder
REFUND_HINTS = ("refund", "return", "credit", "cashback")
LARGE_CREDIT_THRESHOLD = 1000
ADJUSTMENT_FALLBACK = ("Balance Adjustments", 0.3, TransactionType.ADJUSTMENT)
INCOME_FALLBACK = ("Other Income", 0.1, TransactionType.INCOME)
UNCATEGORIZED_FALLBACK = ("Uncategorized", 0.1, TransactionType.EXPENSE)


@dataclass(frozen=True)
class RankedRule:
    """A taxonomy rule flattened with its owning entry's name and type."""

    category: str
    type: TransactionType
    keywords: tuple[str, ...]
    patterns: tuple[re.Pattern[str], ...]
    priority: int

    @classmethod
    def from_entry(cls, entry: CategoryTaxonomyEntry, rule: CategoryRule) -> "RankedRule":
        return cls(
            category=entry.detailed,
            type=entry.type,
            keywords=tuple(k.lower() for k in rule.keywords),
            patterns=rule.patterns,
            priority=rule.priority or 0,
        )

    def score(self, search_text: str) -> float:
        """Share of this rule's checks that hit, boosted for long keyword hits."""
        total_checks = len(self.keywords) + len(self.patterns)
        if total_checks == 0:
            return 0.0

        keyword_hits = [k for k in self.keywords if k in search_text]
        pattern_hits = sum(1 for p in self.patterns if p.search(search_text))
        matches = len(keyword_hits) + pattern_hits

        confidence = matches / total_checks
        if matches and any(len(k) >= STRONG_KEYWORD_MIN_LENGTH for k in keyword_hits):
            confidence = min(confidence * STRONG_MATCH_BOOST, 1.0)
        return confidence


def build_search_text(description: str, merchant: str | None = None) -> str:
    """Lowercased text the keyword and pattern checks run against."""
    return f"{description} {merchant or ''}".lower()


class TransactionCategorizer:
    """Assigns a category, confidence and accounting type to a transaction."""

    def __init__(
        self,
        taxonomy: Iterable[CategoryTaxonomyEntry] = CATEGORY_TAXONOMY,
        merchant_keywords: Mapping[str, Iterable[str]] = MERCHANT_KEYWORDS,
        merchant_confidence: float = MERCHANT_MATCH_CONFIDENCE,
    ):
        self.taxonomy: tuple[CategoryTaxonomyEntry, ...] = tuple(taxonomy)
        self.merchant_keywords: tuple[tuple[str, tuple[str, ...]], ...] = tuple(
            (category, tuple(k.lower() for k in keywords))
            for category, keywords in merchant_keywords.items()
        )
        self.merchant_confidence = merchant_confidence

        # sorted() is stable, so equal priorities keep declaration order.
        self.rules: tuple[RankedRule, ...] = tuple(
            sorted(
                (RankedRule.from_entry(entry, rule) for entry in self.taxonomy for rule in entry.rules),
                key=lambda r: r.priority,
                reverse=True,
            )
        )

    def categorize(
        self,
        description: str,
        amount: float | int | Decimal,
        merchant: str | None = None,
    ) -> ClassificationResult:
        """Categorize a single transaction.

        Args:
            description: Raw bank description
            amount: Signed amount, positive for money in
            merchant: Optional merchant name, matched together with the description

        Returns:
            ClassificationResult; never raises for string/number input
        """
        search_text = build_search_text(description, merchant)

        merchant_match = self._match_merchant(search_text)
        if merchant_match is not None:
            return merchant_match

        rule_match = self._match_rules(search_text)
        if rule_match is not None:
            return rule_match

        return self._default(search_text, amount)

    def _match_merchant(self, search_text: str) -> ClassificationResult | None:
        for category, keywords in self.merchant_keywords:
            for keyword in keywords:
                if keyword in search_text:
                    return ClassificationResult(
                        category=category,
                        confidence=self.merchant_confidence,
                        type=merchant_category_type(category),
                    )
        return None

    def _match_rules(self, search_text: str) -> ClassificationResult | None:
        candidates: list[tuple[RankedRule, float]] = []
        for rule in self.rules:
            confidence = rule.score(search_text)
            if confidence > 0:
                candidates.append((rule, confidence))

        if not candidates:
            return None

        best_rule, best_confidence = min(
            candidates, key=lambda c: (-c[0].priority, -c[1])
        )
        return ClassificationResult(
            category=best_rule.category,
            confidence=best_confidence,
            type=best_rule.type or TransactionType.EXPENSE,
        )

    @staticmethod
    def _default(search_text: str, amount: float | int | Decimal) -> ClassificationResult:
        # Decimal NaN raises on comparison; float NaN compares false.
        amount = float(amount)
        if amount > 0:
            if any(hint in search_text for hint in REFUND_HINTS):
                category, confidence, type_ = ADJUSTMENT_FALLBACK
            elif amount > LARGE_CREDIT_THRESHOLD:
                category, confidence, type_ = INCOME_FALLBACK
            else:
                category, confidence, type_ = UNCATEGORIZED_FALLBACK
        else:
            category, confidence, type_ = UNCATEGORIZED_FALLBACK
        return ClassificationResult(category=category, confidence=confidence, type=type_)

    def get_all_categories(self) -> list[str]:
        """Detailed names of every taxonomy entry, in declaration order."""
        return [entry.detailed for entry in self.taxonomy]

    def get_categories_by_type(self, type_: TransactionType | str) -> list[str]:
        """Detailed names of taxonomy entries with the given accounting type."""
        return [entry.detailed for entry in self.taxonomy if entry.type == type_]


@lru_cache
def get_categorizer() -> TransactionCategorizer:
    """Process-wide categorizer built from the built-in tables."""
    return TransactionCategorizer(merchant_confidence=settings.merchant_match_confidence)


def categorize(
    description: str, amount: float | int | Decimal, merchant: str | None = None
) -> ClassificationResult:
    """Categorize with the shared default categorizer."""
    return get_categorizer().categorize(description, amount, merchant)
