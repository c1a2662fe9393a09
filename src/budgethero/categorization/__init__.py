"""Transaction categorization.

Deterministic, local categorization of bank transactions from their
description text. Rule-based so results are fast and auditable.
"""

from budgethero.categorization.categorizer import (
    TransactionCategorizer,
    categorize,
    get_categorizer,
)
from budgethero.categorization.taxonomy import CATEGORY_TAXONOMY, TransactionType

__all__ = [
    "CATEGORY_TAXONOMY",
    "TransactionCategorizer",
    "TransactionType",
    "categorize",
    "get_categorizer",
]
