"""BudgetHero transaction categorization core."""

__version__ = "0.1.0"
