"""Standardized admin categories with stable slugs.

Budget categories use sort orders below 200; transaction-specific categories
(income, transfers, adjustments) use 200 and above.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

BUDGET_SORT_ORDER_LIMIT = 200

_STANDARDIZED_CATEGORIES: tuple[dict[str, Any], ...] = (
    # Budget categories
    {"name": "Auto & Transport", "slug": "auto-and-transport", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#3b82f6", "sort_order": 10},
    {"name": "Bank Fees", "slug": "bank-fees", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#ef4444", "sort_order": 20},
    {"name": "Entertainment", "slug": "entertainment", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#8b5cf6", "sort_order": 30},
    {"name": "Family Care", "slug": "family-care", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#ec4899", "sort_order": 40},
    {"name": "Food & Drink", "slug": "food-and-drink", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#f59e0b", "sort_order": 50},
    {"name": "General Services", "slug": "general-services", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#6b7280", "sort_order": 60},
    {"name": "Gifts", "slug": "gifts", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#f97316", "sort_order": 70},
    {"name": "Government & Non-Profit", "slug": "government-and-non-profit", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#059669", "sort_order": 80},
    {"name": "Groceries", "slug": "groceries", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#10b981", "sort_order": 90},
    {"name": "Health & Wellness", "slug": "health-and-wellness", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#06b6d4", "sort_order": 100},
    {"name": "Home & Garden", "slug": "home-and-garden", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#84cc16", "sort_order": 110},
    {"name": "Medical & Healthcare", "slug": "medical-and-healthcare", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#dc2626", "sort_order": 120},
    {"name": "Personal Care", "slug": "personal-care", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#d946ef", "sort_order": 130},
    {"name": "Pets", "slug": "pets", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#f472b6", "sort_order": 140},
    {"name": "Shopping", "slug": "shopping", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#a855f7", "sort_order": 150},
    {"name": "Software & Tech", "slug": "software-and-tech", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#3b82f6", "sort_order": 160},
    {"name": "Travel & Vacation", "slug": "travel-and-vacation", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#0891b2", "sort_order": 170},

    # Transaction-specific categories
    {"name": "Income", "slug": "income", "ledger_type": "INCOME", "budget_type": "NON_MONTHLY", "color": "#22c55e", "sort_order": 200},
    {"name": "Bills & Utilities", "slug": "bills-and-utilities", "ledger_type": "EXPENSE", "budget_type": "FIXED", "color": "#6366f1", "sort_order": 210},
    {"name": "Legal", "slug": "legal", "ledger_type": "EXPENSE", "budget_type": "NON_MONTHLY", "color": "#7c3aed", "sort_order": 220},
    {"name": "Education", "slug": "education", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#0891b2", "sort_order": 230},
    {"name": "Taxes", "slug": "taxes", "ledger_type": "EXPENSE", "budget_type": "NON_MONTHLY", "color": "#dc2626", "sort_order": 240},
    {"name": "Donations", "slug": "donations", "ledger_type": "EXPENSE", "budget_type": "FLEXIBLE", "color": "#059669", "sort_order": 250},
    {"name": "Transfers", "slug": "transfers", "ledger_type": "TRANSFER", "budget_type": "NON_MONTHLY", "color": "#6b7280", "sort_order": 260},
    {"name": "Credit Card Payment", "slug": "credit-card-payment", "ledger_type": "TRANSFER", "budget_type": "NON_MONTHLY", "color": "#ef4444", "sort_order": 270},
    {"name": "Loan Payments", "slug": "loan-payments", "ledger_type": "TRANSFER", "budget_type": "FIXED", "color": "#f59e0b", "sort_order": 280},
    {"name": "Uncategorized", "slug": "uncategorized", "ledger_type": "EXPENSE", "budget_type": "NON_MONTHLY", "color": "#9ca3af", "sort_order": 290},
    {"name": "Reimbursement", "slug": "reimbursement", "ledger_type": "ADJUSTMENT", "budget_type": "NON_MONTHLY", "color": "#10b981", "sort_order": 300},
    {"name": "Savings Transfer", "slug": "savings-transfer", "ledger_type": "TRANSFER", "budget_type": "NON_MONTHLY", "color": "#06b6d4", "sort_order": 310},
    {"name": "Investment", "slug": "investment", "ledger_type": "TRANSFER", "budget_type": "NON_MONTHLY", "color": "#8b5cf6", "sort_order": 320},
)

STANDARDIZED_CATEGORIES: tuple[Mapping[str, Any], ...] = tuple(
    MappingProxyType(category) for category in _STANDARDIZED_CATEGORIES
)


def budget_categories(
    categories: Iterable[Mapping[str, Any]] = STANDARDIZED_CATEGORIES,
) -> list[Mapping[str, Any]]:
    """Categories used for budgeting."""
    return [c for c in categories if c["sort_order"] < BUDGET_SORT_ORDER_LIMIT]


def transaction_categories(
    categories: Iterable[Mapping[str, Any]] = STANDARDIZED_CATEGORIES,
) -> list[Mapping[str, Any]]:
    """Categories that only label transactions."""
    return [c for c in categories if c["sort_order"] >= BUDGET_SORT_ORDER_LIMIT]
