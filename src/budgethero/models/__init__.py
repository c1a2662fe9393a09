"""Database models."""
from budgethero.models.admin_category import AdminCategory
from budgethero.models.plaid_category_map import PlaidCategoryMap

__all__ = ["AdminCategory", "PlaidCategoryMap"]
