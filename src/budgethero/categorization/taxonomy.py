"""Built-in category taxonomy for description-based categorization.

Each entry pairs a detailed category name with its accounting treatment and the
keyword/pattern rules that identify it. Rules carry a priority: when several
rules match the same transaction, the highest priority wins.

Refund and return credits are deliberately absent from the keyword lists. They
are recognised by the amount-aware default ladder in the categorizer, which only
treats them as adjustments when money actually came back into the account.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class TransactionType(str, Enum):
    """Accounting treatment of a categorized transaction."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"
    DEBT_PRINCIPAL = "DEBT_PRINCIPAL"
    DEBT_INTEREST = "DEBT_INTEREST"
    ADJUSTMENT = "ADJUSTMENT"


@dataclass(frozen=True)
class CategoryRule:
    """Keyword and pattern rule for one category.

    Keywords are lowercase substrings of the search text; patterns are
    searched against the same text.
    """

    category: str
    keywords: tuple[str, ...]
    patterns: tuple[re.Pattern[str], ...] = ()
    priority: int = 0


@dataclass(frozen=True)
class CategoryTaxonomyEntry:
    """One category definition: grouping, accounting type and its rules."""

    primary: str
    detailed: str
    type: TransactionType
    rules: tuple[CategoryRule, ...] = field(default_factory=tuple)


def _entry(
    primary: str,
    detailed: str,
    type_: TransactionType,
    keywords: tuple[str, ...],
    priority: int,
    patterns: tuple[str, ...] = (),
) -> CategoryTaxonomyEntry:
    rule = CategoryRule(
        category=detailed,
        keywords=keywords,
        patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
        priority=priority,
    )
    return CategoryTaxonomyEntry(primary=primary, detailed=detailed, type=type_, rules=(rule,))


CATEGORY_TAXONOMY: tuple[CategoryTaxonomyEntry, ...] = (
    # Income
    _entry(
        "INCOME", "Salary", TransactionType.INCOME,
        ("payroll", "salary", "wages", "direct deposit", "paycheck", "employer"),
        priority=10,
    ),
    _entry(
        "INCOME", "Tips/Gig", TransactionType.INCOME,
        ("doordash", "grubhub", "instacart", "freelance", "gig", "tips", "upwork", "fiverr"),
        priority=9,
    ),

    # Expenses
    _entry(
        "EXPENSE", "Rent", TransactionType.EXPENSE,
        ("rent", "lease", "apartment", "housing", "property management"),
        priority=10,
    ),
    _entry(
        "EXPENSE", "Utilities", TransactionType.EXPENSE,
        ("electric", "electricity", "gas", "water", "sewer", "internet", "cable", "phone", "cellular"),
        priority=9,
    ),
    _entry(
        "EXPENSE", "Groceries", TransactionType.EXPENSE,
        ("grocery", "supermarket", "walmart", "target", "costco", "whole foods", "kroger", "safeway"),
        priority=8,
    ),
    _entry(
        "EXPENSE", "Dining", TransactionType.EXPENSE,
        (
            "restaurant", "cafe", "coffee", "starbucks", "mcdonald", "burger", "pizza", "food",
            "dining", "kfc", "subway", "taco", "chipotle", "wendys", "dunkin",
        ),
        priority=8,
    ),
    # Outranks Tips/Gig.
    _entry(
        "EXPENSE", "Transport", TransactionType.EXPENSE,
        (
            "uber", "lyft", "rideshare", "taxi", "cab", "uber trip", "lyft ride", "gas", "fuel",
            "shell", "exxon", "chevron", "bp", "mobil", "petro", "parking", "toll",
        ),
        priority=10,
    ),
    _entry(
        "EXPENSE", "Household > Laundry", TransactionType.EXPENSE,
        ("laundry", "dry clean", "cleaners", "wash"),
        priority=7,
    ),
    _entry(
        "EXPENSE", "Insurance", TransactionType.EXPENSE,
        ("insurance", "premium", "policy", "coverage"),
        priority=8,
    ),
    _entry(
        "EXPENSE", "Health", TransactionType.EXPENSE,
        ("doctor", "hospital", "pharmacy", "medical", "health", "dental", "vision", "prescription"),
        priority=8,
    ),
    _entry(
        "EXPENSE", "Subscriptions", TransactionType.EXPENSE,
        ("netflix", "spotify", "subscription", "monthly", "annual", "membership"),
        priority=7,
    ),
    _entry(
        "EXPENSE", "Bank Fees", TransactionType.EXPENSE,
        ("fee", "charge", "overdraft", "atm", "maintenance", "service charge"),
        priority=9,
    ),

    # Transfers
    _entry(
        "TRANSFER", "Credit Card Payment", TransactionType.TRANSFER,
        ("credit card payment", "cc payment", "card payment", "payment to credit", "payment to chase card"),
        priority=10,
        patterns=(r"payment.*credit", r"credit.*payment", r"payment.*chase.*card", r"payment.*card.*ending"),
    ),
    _entry(
        "TRANSFER", "To/From Savings", TransactionType.TRANSFER,
        ("transfer", "savings", "deposit", "withdrawal", "from savings", "to savings"),
        priority=8,
    ),
    # Outranks Credit Card Payment.
    _entry(
        "TRANSFER", "P2P Transfer", TransactionType.TRANSFER,
        (
            "p2p", "peer to peer", "zelle", "venmo", "cashapp", "paypal transfer",
            "branch messenger", "messenger p2p",
        ),
        priority=11,
        patterns=(r"p2p", r"peer.*to.*peer", r"zelle", r"venmo"),
    ),
    _entry(
        "TRANSFER", "Internal Transfer", TransactionType.TRANSFER,
        ("internal transfer", "account transfer", "between accounts"),
        priority=8,
    ),
    _entry(
        "TRANSFER", "Cash Withdrawal", TransactionType.TRANSFER,
        ("atm", "cash withdrawal", "cash advance", "withdrawal"),
        priority=9,
    ),

    # Debt
    _entry(
        "DEBT_PRINCIPAL", "Loan Principal", TransactionType.DEBT_PRINCIPAL,
        ("loan payment", "principal", "auto loan", "personal loan", "student loan"),
        priority=8,
    ),
    _entry(
        "DEBT_PRINCIPAL", "Mortgage Principal", TransactionType.DEBT_PRINCIPAL,
        ("mortgage", "home loan", "mortgage payment"),
        priority=9,
    ),
    _entry(
        "DEBT_INTEREST", "Loan Interest", TransactionType.DEBT_INTEREST,
        ("interest", "finance charge", "loan interest"),
        priority=7,
    ),
    _entry(
        "DEBT_INTEREST", "Mortgage Interest", TransactionType.DEBT_INTEREST,
        ("mortgage interest", "home interest"),
        priority=8,
    ),

    # Adjustments
    _entry(
        "ADJUSTMENT", "Refund", TransactionType.ADJUSTMENT,
        ("reversal", "credit adjustment", "rebate"),
        priority=9,
    ),
    _entry(
        "ADJUSTMENT", "Chargeback", TransactionType.ADJUSTMENT,
        ("chargeback", "dispute", "provisional credit"),
        priority=9,
    ),
)
