import re

import pytest

from budgethero.categorization.merchants import (
    MERCHANT_ADJUSTMENT_CATEGORIES,
    MERCHANT_INCOME_CATEGORIES,
    MERCHANT_KEYWORDS,
    MERCHANT_TRANSFER_CATEGORIES,
    merchant_category_type,
)
from budgethero.categorization.taxonomy import CATEGORY_TAXONOMY, TransactionType


def test_detailed_names_are_unique() -> None:
    names = [entry.detailed for entry in CATEGORY_TAXONOMY]
    assert len(names) == len(set(names))


def test_rules_belong_to_their_entry() -> None:
    for entry in CATEGORY_TAXONOMY:
        assert entry.rules
        for rule in entry.rules:
            assert rule.category == entry.detailed


def test_keywords_are_lowercase() -> None:
    for entry in CATEGORY_TAXONOMY:
        for rule in entry.rules:
            assert all(keyword == keyword.lower() for keyword in rule.keywords)


def test_patterns_are_case_insensitive() -> None:
    for entry in CATEGORY_TAXONOMY:
        for rule in entry.rules:
            assert all(pattern.flags & re.IGNORECASE for pattern in rule.patterns)


def test_primary_matches_type() -> None:
    for entry in CATEGORY_TAXONOMY:
        assert entry.primary == entry.type.value


def test_refund_words_left_to_default_ladder() -> None:
    keywords = {k for entry in CATEGORY_TAXONOMY for rule in entry.rules for k in rule.keywords}
    assert "refund" not in keywords
    assert "return" not in keywords


def test_transaction_type_is_string_enum() -> None:
    assert TransactionType.DEBT_PRINCIPAL == "DEBT_PRINCIPAL"
    assert TransactionType("ADJUSTMENT") is TransactionType.ADJUSTMENT


def test_merchant_type_sets_name_real_categories() -> None:
    names = set(MERCHANT_KEYWORDS)
    assert MERCHANT_INCOME_CATEGORIES <= names
    assert MERCHANT_TRANSFER_CATEGORIES <= names
    assert MERCHANT_ADJUSTMENT_CATEGORIES <= names


def test_merchant_category_type() -> None:
    assert merchant_category_type("Interest") == TransactionType.INCOME
    assert merchant_category_type("Transfer") == TransactionType.TRANSFER
    assert merchant_category_type("Balance Adjustments") == TransactionType.ADJUSTMENT
    assert merchant_category_type("Groceries") == TransactionType.EXPENSE
    assert merchant_category_type("Not A Category") == TransactionType.EXPENSE


def test_merchant_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        MERCHANT_KEYWORDS["New"] = ("new",)
